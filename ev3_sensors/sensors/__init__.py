from .mode_guard import Measurement, ModeAction, ensure_mode, resolve_mode_action
from .sound import SoundSensor

__all__ = ["Measurement", "ModeAction", "ensure_mode", "resolve_mode_action", "SoundSensor"]
