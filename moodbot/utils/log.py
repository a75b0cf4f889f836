from __future__ import annotations

import logging
import logging.handlers
import os
from datetime import datetime

from pytz import timezone

LOG_FILE = os.getenv("LOG_FILE", "logs/log.log")
LOG_TIMEZONE = timezone(os.getenv("LOG_TIMEZONE", "UTC"))

if os.path.dirname(LOG_FILE):
    os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)


def _local_time(timestamp: float):
    return datetime.fromtimestamp(timestamp, LOG_TIMEZONE).timetuple()


filehandler = logging.handlers.RotatingFileHandler(
    LOG_FILE,
    maxBytes=1024 * 1024 * 5,
    backupCount=5,
    encoding="utf-8",
)
filehandler.setLevel(logging.DEBUG)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(funcName)s - %(message)s")
formatter.converter = _local_time
filehandler.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """
    Returns the logger for ``name`` with the rotating file handler attached.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if filehandler not in logger.handlers:
        logger.addHandler(filehandler)
    return logger


log = get_logger("moodbot")
