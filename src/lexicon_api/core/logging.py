#!/usr/bin/env python3

import logging
import logging.config

from pythonjsonlogger import jsonlogger

from .env_utils import getenv_clean


def setup_logging(stream: str = "ext://sys.stdout"):
    """Setup JSON logging configuration

    Args:
        stream: dictConfig stream reference for the console handler
    """
    level = (getenv_clean("LOG_LEVEL", "INFO") or "INFO").upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(operation)s %(attempt)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": stream
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False
            },
            "uvicorn": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
