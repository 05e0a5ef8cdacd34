# qif_stream/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
    },
    "loggers": {
        "qif_stream": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": True,
        },
    },
}

_FILE_HANDLER: dict[str, Any] = {
    "class": "logging.handlers.RotatingFileHandler",
    "level": "DEBUG",
    "formatter": "verbose",
    "maxBytes": 5_000_000,
    "backupCount": 5,
    "encoding": "utf-8",
}


def build_logging_config(
    level: str = "INFO", log_file: Path | str | None = None
) -> dict[str, Any]:
    """Return a copy of LOGGING with the console level set and an optional file handler."""
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = level.upper()
    if log_file is not None:
        config["handlers"]["file"] = {**_FILE_HANDLER, "filename": str(log_file)}
        config["loggers"]["qif_stream"]["handlers"].append("file")
    return config


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, log_file))
