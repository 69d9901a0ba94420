"""
test_abc_contracts.py

Tests that the LegoSensor contract is enforced at instantiation time.
"""

import pytest

from ev3_sensors.exceptions import InvalidSensorError
from ev3_sensors.sensors.lego_sensor import LegoSensor


class _FakeTouch(LegoSensor):
    DRIVER_NAME = "lego-ev3-touch"


class _NoDriverName(LegoSensor):
    pass


class _EmptyDriverName(LegoSensor):
    DRIVER_NAME = ""


class TestLegoSensorContracts:

    def test_driver_name_checked(self, make_port):
        _FakeTouch(make_port(driver_name="lego-ev3-touch"))
        with pytest.raises(InvalidSensorError):
            _FakeTouch(make_port(driver_name="lego-nxt-sound"))

    @pytest.mark.parametrize("cls", [_NoDriverName, _EmptyDriverName])
    def test_missing_driver_name_rejected_even_for_empty_port(self, make_port, cls):
        """A port reporting an empty driver must not satisfy an unset DRIVER_NAME."""
        port = make_port(driver_name="")
        with pytest.raises(TypeError):
            cls(port)

    def test_missing_driver_name_checked_before_port_io(self, make_port):
        port = make_port()
        port.get_driver_name = lambda: pytest.fail("port queried")
        with pytest.raises(TypeError):
            _NoDriverName(port)
