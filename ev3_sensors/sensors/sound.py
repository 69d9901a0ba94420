"""
sound.py

Provides a sensor driver for the LEGO NXT sound sensor on an EV3 brick.
"""

from ev3_sensors.sensors.lego_sensor import LegoSensor
from ev3_sensors.sensors.mode_guard import Measurement


class SoundSensor(LegoSensor):
    """
    LEGO NXT sound sensor driver.

    Both readings come from the same value slot; the mode selects the
    weighting the sensor applies. Values are returned as parsed, with no
    clamping to the nominal 0-100 % range.

    Parameters
    ----------
    port : SensorPort
        Port binding for the sensor, e.g. SysfsSensorPort("in1").
    auto_switch_mode : bool
        If True (default), reads switch the sensor to the required mode.
        If False, a read in the wrong mode raises InvalidModeError.
    """

    SOUND_PRESSURE_REQUIRED_MODE = "DB"
    SOUND_PRESSURE_VALUE_INDEX = 0
    SOUND_PRESSURE_LOW_REQUIRED_MODE = "DBA"
    SOUND_PRESSURE_LOW_VALUE_INDEX = 0
    DRIVER_NAME = "lego-nxt-sound"

    SOUND_PRESSURE = Measurement(
        key="sound_pressure",
        required_mode=SOUND_PRESSURE_REQUIRED_MODE,
        value_index=SOUND_PRESSURE_VALUE_INDEX,
    )
    SOUND_PRESSURE_LOW = Measurement(
        key="sound_pressure_low",
        required_mode=SOUND_PRESSURE_LOW_REQUIRED_MODE,
        value_index=SOUND_PRESSURE_LOW_VALUE_INDEX,
    )

    def read_sound_pressure(self) -> float:
        """
        Sound pressure level as a percent, flat weighting (mode "DB").
        """
        return self._read_measurement(self.SOUND_PRESSURE)

    def read_sound_pressure_low(self) -> float:
        """
        Sound pressure level as a percent, A-weighted (mode "DBA"), which
        focuses on levels up to about 55 dB.
        """
        return self._read_measurement(self.SOUND_PRESSURE_LOW)
