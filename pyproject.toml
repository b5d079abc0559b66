[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "domotica"
version = "0.1.0"
description = "Terminal home-automation simulator with zones, properties, sensors, devices and rule processors"
requires-python = ">=3.10"
dependencies = []
keywords = ["home automation", "simulation", "curses", "sensors", "zones"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
domotica = "domotica.app:main"

[tool.hatch.build.targets.wheel]
packages = ["domotica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
