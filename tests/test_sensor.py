from domotica.sensor import Sensor
from domotica.zone import Zone


def test_reading_matches_property():
    zone = Zone(1, 1, 0)
    zone.properties[0].set_value(30)
    sensor = Sensor(zone, "t", 1)
    assert sensor.reading() == zone.properties[0].describe()


def test_reading_case_insensitive():
    zone = Zone(1, 1, 0)
    assert Sensor(zone, "M", 2).reading() == "Luz, valor: 0 Lumens"


def test_reading_unknown_kind():
    zone = Zone(1, 1, 0)
    assert Sensor(zone, "z", 3).reading() == " "


def test_str_format():
    zone = Zone(1, 1, 0)
    sensor = Sensor(zone, "m", 4)
    assert str(sensor) == "ID: 4, Propriedade: Luz, valor: 0 Lumens; "


def test_reading_follows_changes():
    zone = Zone(1, 1, 0)
    sensor = Sensor(zone, "h", 5)
    before = sensor.reading()
    zone.properties[4].set_value(60)
    assert sensor.reading() == zone.properties[4].describe()
    assert sensor.reading() != before