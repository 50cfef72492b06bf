"""
Logging configuration for the errandctl command line.

Diagnostic logs go to stderr; stdout is reserved for errand output.
"""

import logging
import logging.config
from typing import Any, Dict, Union

HTTP_LOGGERS = ("httpx", "httpcore")


class HttpNoiseFilter(logging.Filter):
    """Filter to suppress chatty HTTP client logs."""

    def __init__(self, min_level: int = logging.WARNING):
        super().__init__()
        self.min_level = min_level

    def filter(self, record: logging.LogRecord) -> bool:
        """Drop httpx/httpcore records below the configured level."""
        if record.name.split(".")[0] in HTTP_LOGGERS:
            return record.levelno >= self.min_level
        return True


def get_logging_config(level: Union[str, int] = "WARNING") -> Dict[str, Any]:
    """Get logging configuration for the given level."""
    if isinstance(level, int):
        level = logging.getLevelName(level)
    level = str(level).upper()

    # HTTP client chatter is only interesting when debugging
    http_level = logging.DEBUG if level == "DEBUG" else logging.WARNING

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "http_noise_filter": {
                "()": HttpNoiseFilter,
                "min_level": http_level,
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["http_noise_filter"],
            }
        },
        "loggers": {
            "errandctl": {
                "handlers": ["default"],
                "level": level,
                "propagate": False,
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"],
        },
    }


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
