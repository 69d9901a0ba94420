"""
sysfs.py

Provides SysfsSensorPort, which binds to the sensor device attached to a
LegoPort via /sys/class/lego-sensor/sensor*.

The device directory is resolved lazily on first access, so an unbound
port surfaces as InvalidPortError from whichever call touches it first
(normally the driver-name check in a sensor constructor).
"""

import logging

from ev3_sensors import PACKAGE_LOGGER_NAME
from ev3_sensors.config import get_sysfs_root
from ev3_sensors.exceptions import InvalidPortError
from ev3_sensors.ports.lego_port import LegoPort, find_device_dir, read_attribute, write_attribute

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.ports")


class SysfsSensorPort:
    """
    Sensor device bound to a port, read and written through sysfs.

    Implements the SensorPort protocol. Does not hold open file handles;
    every call opens, reads or writes, and closes the attribute file.
    """

    def __init__(self, port: LegoPort | str, sysfs_root: str | None = None):
        if isinstance(port, LegoPort):
            self.address = port.address
            self.sysfs_root = sysfs_root or port.sysfs_root
        elif isinstance(port, str) and port.strip():
            self.address = port.strip()
            self.sysfs_root = sysfs_root or get_sysfs_root()
        else:
            raise InvalidPortError(f"Invalid port: {port!r}")

        self._device_dir: str | None = None

    def __repr__(self) -> str:
        return f"SysfsSensorPort(address={self.address!r})"

    def _get_device_dir(self) -> str:
        """
        Return the lego-sensor directory bound to this port or raise.
        """
        if self._device_dir:
            return self._device_dir
        path = find_device_dir("lego-sensor", "sensor", self.address, self.sysfs_root)
        if path is None:
            raise InvalidPortError(f"No sensor bound to port '{self.address}'")
        logger.debug(f"Port {self.address} resolved to {path}")
        self._device_dir = path
        return path

    # --- SensorPort ---------------------------------------------------------

    def get_driver_name(self) -> str:
        return self.get_attribute("driver_name")

    def get_mode(self) -> str:
        return self.get_attribute("mode")

    def set_mode(self, mode: str) -> None:
        self.set_attribute("mode", mode)

    def get_attribute(self, name: str) -> str:
        return read_attribute(self._get_device_dir(), name)

    # --- Extras -------------------------------------------------------------

    def get_modes(self) -> list[str]:
        return self.get_attribute("modes").split()

    def set_attribute(self, name: str, value: str) -> None:
        write_attribute(self._get_device_dir(), name, value)
