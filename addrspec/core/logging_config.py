"""Logging configuration for the addrspec command line."""
from __future__ import annotations

import copy
import logging.config
from typing import Any, Dict, Optional


LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        }
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: Optional[str] = None) -> None:
    """Apply logging configuration."""

    config = copy.deepcopy(LOGGING_CONFIG)
    if level:
        config["root"]["level"] = level.upper()

    logging.config.dictConfig(config)
