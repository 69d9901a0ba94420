"""
lego_sensor.py

Provides a base helper class for LEGO sensors attached through an ev3dev
port, including the shared driver identity check and mode-guarded reads.
"""

import logging
from abc import ABC

from ev3_sensors import PACKAGE_LOGGER_NAME
from ev3_sensors.exceptions import InvalidSensorError, SensorValueError
from ev3_sensors.ports.base import SensorPort
from ev3_sensors.sensors.mode_guard import Measurement, ensure_mode

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.lego_sensor")


def _check_auto_switch(value) -> bool:
    # bool("false") is True, so anything but a real bool is rejected.
    if not isinstance(value, bool):
        raise SensorValueError(
            f"auto_switch_mode must be a bool, got {type(value).__name__}"
        )
    return value


class LegoSensor(ABC):
    """
    Base class for sensors read through a SensorPort.

    Subclasses must set DRIVER_NAME; construction fails with
    InvalidSensorError if the port reports a different driver. Instances are
    not safe for concurrent use: a mode switch and the read that follows are
    separate sysfs operations, so callers sharing a sensor between threads
    must serialise access themselves.
    """

    DRIVER_NAME: str

    def __init__(self, port: SensorPort, *, auto_switch_mode: bool = True):
        if not getattr(self, "DRIVER_NAME", ""):
            raise TypeError(f"{self.__class__.__name__} must define a non-empty DRIVER_NAME")
        self.port = port
        self._auto_switch_mode = _check_auto_switch(auto_switch_mode)
        self._check_driver()

    def _check_driver(self) -> None:
        """
        Verify the device bound to the port is the one this class drives.
        """
        actual = self.port.get_driver_name()
        logger.debug(f"{self.__class__.__name__}: port reports driver '{actual}'")
        if actual != self.DRIVER_NAME:
            raise InvalidSensorError(
                f"Can't create a {self.__class__.__name__} on a port driven by "
                f"'{actual}' (expected '{self.DRIVER_NAME}')",
                expected=self.DRIVER_NAME,
                actual=actual,
            )

    def _read_measurement(self, measurement: Measurement) -> float:
        """
        Put the device in the measurement's mode and parse its value slot.

        Raises InvalidModeError, ValueError on malformed content, or OSError.
        """
        ensure_mode(self.port, measurement.required_mode, self._auto_switch_mode)
        return float(self.port.get_attribute(measurement.attribute_name))

    # --- Auto-switch --------------------------------------------------------

    def set_auto_switch_mode(self, enabled: bool) -> None:
        """Enable or disable switching modes automatically before a read."""
        self._auto_switch_mode = _check_auto_switch(enabled)

    def is_auto_switch_mode(self) -> bool:
        return self._auto_switch_mode
