"""Logging setup for the form demos."""
from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import AppConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: AppConfig) -> None:
    """Configure the root logger from ``config``.

    Existing root handlers are removed so repeated calls do not duplicate
    output.  A rotating file handler is added only when ``log_file`` is set.
    """

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=1_048_576,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("PIL").setLevel(logging.WARNING)


__all__ = ["setup_logging", "LOG_FORMAT"]
