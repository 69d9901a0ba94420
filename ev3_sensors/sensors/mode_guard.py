"""
mode_guard.py

Mode checking shared by mode-switching sensors. A measurement is only valid
while the device is in the measurement's required mode; the guard either
lets the read proceed, switches the mode first, or refuses.
"""

import enum
import logging
from dataclasses import dataclass

from ev3_sensors import PACKAGE_LOGGER_NAME
from ev3_sensors.exceptions import InvalidModeError
from ev3_sensors.ports.base import SensorPort

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.mode_guard")


class ModeAction(enum.Enum):
    PROCEED = "proceed"
    SWITCH = "switch"


@dataclass(frozen=True)
class Measurement:
    """
    One reading a sensor exposes: the mode it needs and the value slot it
    reads. Several measurements may share a slot in different modes.
    """
    key: str
    required_mode: str
    value_index: int = 0

    @property
    def attribute_name(self) -> str:
        return f"value{self.value_index}"


def resolve_mode_action(current: str, required: str, auto_switch: bool) -> ModeAction:
    """
    Decide what to do before a read given the device's current mode.

    Raises:
        InvalidModeError: If the modes differ and auto-switch is disabled.
    """
    if current == required:
        return ModeAction.PROCEED
    if auto_switch:
        return ModeAction.SWITCH
    raise InvalidModeError(required_mode=required, actual_mode=current)


def ensure_mode(port: SensorPort, required_mode: str, auto_switch: bool) -> None:
    """
    Query the port's mode and make sure it equals required_mode, switching
    it once if allowed. The mode is always re-read, never cached.
    """
    current = port.get_mode()
    action = resolve_mode_action(current, required_mode, auto_switch)
    if action is ModeAction.SWITCH:
        logger.info(f"Switching sensor mode {current} -> {required_mode}")
        port.set_mode(required_mode)
