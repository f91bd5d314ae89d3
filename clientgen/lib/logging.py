"""Logging configuration for the clientgen CLI."""

import logging
from logging.config import dictConfig

from .settings import get_settings

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        }
    },
    "loggers": {
        "clientgen": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        }
    },
}


def configure_logging(level: str | None = None) -> None:
    """Configure logging based on settings."""

    settings = get_settings()
    level = (level or settings.log_level).upper()
    config = {
        **LOGGING_CONFIG,
        "loggers": {"clientgen": {**LOGGING_CONFIG["loggers"]["clientgen"], "level": level}},
    }
    dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
