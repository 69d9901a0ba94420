"""
lego_port.py

Provides LegoPort, a physical EV3 input/output port exposed by the ev3dev
kernel under /sys/class/lego-port/port*.
"""

import glob
import os

from ev3_sensors.config import get_sysfs_root
from ev3_sensors.exceptions import InvalidPortError


def read_attribute(directory: str, name: str) -> str:
    """
    Read one sysfs attribute file and return its text without the trailing
    newline. OSError propagates unchanged.
    """
    with open(os.path.join(directory, name), "r") as f:
        return f.read().rstrip("\n")


def write_attribute(directory: str, name: str, value: str) -> None:
    """
    Write a value to one sysfs attribute file.
    """
    with open(os.path.join(directory, name), "w") as f:
        f.write(value)


def address_matches(device_address: str, address: str) -> bool:
    """
    Return True if a sysfs address ("in1" or "ev3-ports:in1") names the
    requested port address.
    """
    device_address = device_address.strip()
    return device_address == address or device_address.endswith(f":{address}")


def find_device_dir(class_name: str, prefix: str, address: str, sysfs_root: str | None = None) -> str | None:
    """
    Scan <sysfs_root>/<class_name>/<prefix>* for the entry whose address
    matches. Returns the directory path or None.
    """
    root = sysfs_root or get_sysfs_root()
    for candidate in sorted(glob.glob(os.path.join(root, class_name, f"{prefix}*"))):
        try:
            device_address = read_attribute(candidate, "address")
        except OSError:
            continue
        if address_matches(device_address, address):
            return candidate
    return None


class LegoPort:
    """
    A physical port on the EV3 brick, e.g. "in1" or "outA".

    Parameters
    ----------
    address : str
        Port address as printed on the brick ("in1".."in4", "outA".."outD").
        Fully-qualified sysfs addresses such as "ev3-ports:in1" also match.
    sysfs_root : str | None
        Root of the sysfs class tree, defaults to get_sysfs_root().

    Raises
    ------
    InvalidPortError
        If the address is empty or no lego-port entry has that address.
    """

    def __init__(self, address: str, sysfs_root: str | None = None):
        if not isinstance(address, str) or not address.strip():
            raise InvalidPortError(f"Invalid port address: {address!r}")

        self.address = address.strip()
        self.sysfs_root = sysfs_root or get_sysfs_root()

        path = find_device_dir("lego-port", "port", self.address, self.sysfs_root)
        if path is None:
            raise InvalidPortError(f"No lego-port found with address '{self.address}'")
        self.path = path

    def __repr__(self) -> str:
        return f"LegoPort(address={self.address!r}, path={self.path!r})"

    @property
    def driver_name(self) -> str:
        return read_attribute(self.path, "driver_name")

    @property
    def status(self) -> str:
        return read_attribute(self.path, "status")

    @property
    def modes(self) -> list[str]:
        return read_attribute(self.path, "modes").split()

    @property
    def mode(self) -> str:
        return read_attribute(self.path, "mode")

    def set_mode(self, mode: str) -> None:
        write_attribute(self.path, "mode", mode)
