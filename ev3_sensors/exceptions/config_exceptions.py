"""
config_exceptions.py

Errors raised while resolving where the EV3 device tree lives.
"""


class ConfigurationError(Exception):
    """Base class for configuration errors."""


class InvalidConfigValueError(ConfigurationError, ValueError):
    """Raised when a setting (e.g. EV3_SYSFS_ROOT) names something unusable."""
