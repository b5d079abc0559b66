# domotica

A small home-automation simulator that runs in the terminal.

- Lay out a house as a grid of zones.
- Put sensors, devices and rule processors in the zones.
- Advance time and watch the devices change the zones' properties.

## Installation

```
pip install .
```

The console needs the standard `curses` module, which is available on POSIX
systems.

Run the tests with:

```
pip install ".[test]"
pytest
```

## Running

```
domotica
```

The screen has a house grid on the left, a command prompt on the right and a
notification area below the prompt. The current instant is shown in the
bottom-right corner.

After each command, every zone that sits in a grid cell is redrawn. Its
devices are processed at the current instant. Type `sair` to quit.

## Commands

| Command | Effect |
| --- | --- |
| `hnova <rows> <cols>` | new house grid of 2–4 by 2–4 cells; resets the instant to 0 |
| `hrem` | remove all zones and grid cells |
| `znova <row> <col>` | create a zone at a grid position |
| `zrem <zone>` | remove a zone |
| `zlista` | list zones |
| `zcomp <zone>` | list a zone's devices, sensors and processors |
| `zprops <zone>` | list a zone's properties |
| `pmod <zone> <name> <value>` | add `value` to the property called `name` |
| `cnovo <zone> s <property letter>` | add a sensor for a property |
| `cnovo <zone> p <command>` | add a rule processor |
| `cnovo <zone> a <a\|s\|l\|r>` | add a heater, sprinkler, lamp or cooler |
| `crem <zone> <s\|p\|a> <id>` | remove a device (only the first zone of the house is searched) |
| `rnova <zone> <proc> <rule> <sensor> [x] [y]` | add a rule to a processor |
| `rlista <zone> <proc>` | list a processor's rules |
| `pmuda <zone> <proc> <command>` | change a processor's command |
| `acom <zone> <device> <liga\|desliga>` | switch a device on or off |
| `prox` / `avanca <n>` | advance one or `n` instants |
| `exec <file>` | run the commands in a file, one per line |

Zone ids are given in order of creation, starting at 0. Sensors, processors
and devices share one id counter, starting at 1.

Each zone has seven properties. Each has a letter used by sensors:

| Property | Letter | Unit | Limits |
| --- | --- | --- | --- |
| Temperatura | `t` | Graus celcius | at least -273; set directly rather than added to |
| Luz | `m` | Lumens | at least 0 |
| Radiacao | `d` | Becquerel | at least 0 |
| Vibracao | `v` | Hertz | at least 0 |
| Humidade | `h` | % | 0–100 |
| Fumo | `f` | % Obscuracao | 0–100 |
| Som | `o` | Decibeis | at least 0 |

Devices change properties when switched:

- **Heater** (`a`): Som +5 when switched on. While on, it sets Temperatura to a third of the instant, at most 50.
- **Cooler** (`r`): Som +20 when switched on. While on, it sets Temperatura to minus a third of the instant.
- **Lamp** (`l`): Luz +900 on, −900 off.
- **Sprinkler** (`s`): Humidade +50 and Vibracao +100 on, Vibracao −100 off.

Switching undoes only the changes listed here. A device's letter is shown in
upper case while it is on.

## What it does not do

Rule processors store their rules and command, but they do not act on them.

- Rules are never evaluated against sensor readings.
- Processors never send commands to devices.

The following commands only print an acknowledgement and change nothing:

- `plista`, `prepoe`, `prem` and `psalva` (saved processor copies)
- `asoc` and `ades` (processor–device associations)
- `rrem` (rule removal)

Nothing is saved between runs.

## Using it as a library

The model can be driven without a terminal. `CommandProcessor` writes its
messages to any object with `write` and `clear` methods:

```python
from domotica.commands import CommandProcessor

class Console:
    def write(self, value):
        print(value, end="")

    def clear(self):
        print()

processor = CommandProcessor()
out = Console()
processor.execute_line("znova 1 1", out)     # zone 0
processor.execute_line("cnovo 0 a a", out)   # heater with id 1
processor.execute_line("acom 0 1 liga", out)
processor.execute_line("zprops 0", out)
```

Without a window factory, the grid cells are kept in memory only. Devices are
processed only by the console loop; call `device.process(instant)` yourself
when driving the model directly.

The building blocks live in these modules:

- `domotica.properties`: `Property` and its subclasses, and `default_properties()`.
- `domotica.zone`: `Zone`.
- `domotica.sensor`: `Sensor`.
- `domotica.devices`: `Heater`, `Sprinkler`, `Lamp`, `Cooler` and `make_device()`.
- `domotica.rules`: `Rule` and `Processor`.
- `domotica.house`: `House`.

`domotica.terminal` wraps `curses` with `Terminal` and `Window`.