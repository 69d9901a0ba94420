"""
logging_setup.py

Configures the root logger for a program using the package: a rotating log file plus console
output. Safe to call more than once.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
FILE_HANDLER_NAME = "ev3_sensors.file"
CONSOLE_HANDLER_NAME = "ev3_sensors.console"


def setup_logging(log_dir: str = "log", log_file_name: str = "ev3_sensors.log",
                  log_level: str = "INFO", max_bytes: int = 1_000_000,
                  backup_count: int = 3) -> logging.Logger:
    """
    Configure and return the root logger.

    Creates log_dir if needed. The package's handlers are attached once;
    later calls only update the level.
    """
    os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    existing = {h.get_name() for h in root.handlers}
    formatter = logging.Formatter(LOG_FORMAT)

    if FILE_HANDLER_NAME not in existing:
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, log_file_name),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if CONSOLE_HANDLER_NAME not in existing:
        stream_handler = logging.StreamHandler()
        stream_handler.set_name(CONSOLE_HANDLER_NAME)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    return root
