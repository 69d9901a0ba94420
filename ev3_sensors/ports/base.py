"""
base.py

Defines the SensorPort protocol: the capabilities a sensor driver needs
from whatever binds it to hardware.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SensorPort(Protocol):
    """
    Anything that can identify, configure and read a bound sensor device.

    The sysfs binding (SysfsSensorPort) is the production implementation;
    tests can pass any object exposing these four calls.
    """

    def get_driver_name(self) -> str:
        """Name of the device driver currently bound to the port."""
        ...

    def get_mode(self) -> str:
        """Current operating mode token."""
        ...

    def set_mode(self, mode: str) -> None:
        """Switch the device to the given mode. Raises OSError if rejected."""
        ...

    def get_attribute(self, name: str) -> str:
        """Raw text content of a named device attribute."""
        ...
