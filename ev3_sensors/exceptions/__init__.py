from .config_exceptions import ConfigurationError, InvalidConfigValueError
from .sensors import (
    SensorInitError,
    SensorReadError,
    SensorValueError,
    EV3LibraryError,
    InvalidPortError,
    InvalidSensorError,
    InvalidModeError,
)

__all__ = [
    "ConfigurationError",
    "InvalidConfigValueError",
    "SensorInitError",
    "SensorReadError",
    "SensorValueError",
    "EV3LibraryError",
    "InvalidPortError",
    "InvalidSensorError",
    "InvalidModeError",
]
