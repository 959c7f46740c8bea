"""
Logging setup for service entry points

Console handler at LOG_LEVEL plus a rotating file that keeps errors only
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(service_name: str = "market_data", log_dir: str | None = None) -> None:
    """
    Configure root logging once per process

    Args:
        service_name: Used for the error log filename
        log_dir: Override for settings.LOG_DIR
    """
    settings = get_settings()
    log_dir = log_dir or settings.LOG_DIR
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    os.makedirs(log_dir, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    error_file = RotatingFileHandler(
        os.path.join(log_dir, f"{service_name}_errors.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
    )
    error_file.setLevel(logging.ERROR)
    error_file.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[console, error_file], force=True)
