"""
config.py

Locates the sysfs class tree the port layer reads. On a brick this is
/sys/class; the EV3_SYSFS_ROOT environment variable points it elsewhere
(a mounted image, a test fixture).

Usage:
    root = get_sysfs_root()
"""

import logging
import os
from pathlib import Path

from ev3_sensors import PACKAGE_LOGGER_NAME
from ev3_sensors.exceptions import InvalidConfigValueError

DEFAULT_SYSFS_ROOT = "/sys/class"
SYSFS_ROOT_ENV = "EV3_SYSFS_ROOT"

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.config")


def get_sysfs_root() -> str:
    """
    Return the sysfs class root, honouring EV3_SYSFS_ROOT.

    Raises:
        InvalidConfigValueError: If EV3_SYSFS_ROOT is set but is not a
            directory.
    """
    env_root = os.getenv(SYSFS_ROOT_ENV)
    if not env_root:
        return DEFAULT_SYSFS_ROOT

    path = Path(env_root).expanduser()
    if not path.is_dir():
        logger.error(f"{SYSFS_ROOT_ENV}={env_root} is not a directory")
        raise InvalidConfigValueError(f"{SYSFS_ROOT_ENV} is not a directory: {env_root}")
    logger.debug(f"Using sysfs root from {SYSFS_ROOT_ENV}: {path}")
    return str(path)
