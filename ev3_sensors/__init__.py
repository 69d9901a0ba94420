from ev3_sensors.__version__ import __version__

PACKAGE_LOGGER_NAME = "ev3_sensors"
