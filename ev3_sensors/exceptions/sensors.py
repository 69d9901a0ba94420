"""
sensors.py

Shared exception classes for the EV3 device layer.

The shared bases (SensorInitError, SensorReadError, SensorValueError) let
callers catch failures by phase, while the EV3LibraryError family names
what went wrong at the port/driver level:

    # Precise:
    except InvalidModeError as e:
        sensor.set_auto_switch_mode(True)

    # Broad, by phase:
    except SensorInitError: ...

Raw file I/O failures are not wrapped here; they surface as OSError.
"""


class SensorInitError(Exception):
    """Raised when a sensor cannot be initialised."""


class SensorReadError(Exception):
    """Raised when a sensor read fails."""


class SensorValueError(Exception):
    """Raised when a sensor receives or produces an invalid value."""


class EV3LibraryError(Exception):
    """Base class for errors raised by the EV3 port and sensor layer."""


class InvalidPortError(EV3LibraryError, SensorInitError):
    """Raised when a port address is not bound to a usable device."""


class InvalidSensorError(EV3LibraryError, SensorInitError):
    """Raised when the device on a port is not the expected sensor type."""

    def __init__(self, message: str, *, expected: str | None = None, actual: str | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidModeError(EV3LibraryError, SensorReadError):
    """
    Raised when a reading needs a different mode and auto-switch is off.

    Recoverable: switch the mode manually or re-enable auto-switch, then
    read again.
    """

    def __init__(self, required_mode: str, actual_mode: str) -> None:
        super().__init__(
            f"[Auto-switch is off] Sensor must be in mode '{required_mode}', "
            f"current mode is '{actual_mode}'"
        )
        self.required_mode = required_mode
        self.actual_mode = actual_mode
