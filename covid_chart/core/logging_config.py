"""Centralized logging configuration for covid_chart.

Configures structured JSON logging to a rotating file and human-readable
logging for CLI usage.
"""

import copy
import logging
import logging.config
import os
from typing import Any


# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "json_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": "logs/covid_chart.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        },
    },
    "loggers": {
        "covid_chart": {
            "level": "DEBUG",
            "handlers": ["console", "json_file"],
            "propagate": False,
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging(
    json_output: bool = False, log_level: str = "INFO", log_dir: str = "logs"
) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory receiving the rotating JSON log file
    """
    os.makedirs(log_dir, exist_ok=True)

    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["json_file"]["filename"] = os.path.join(log_dir, "covid_chart.log")

    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        level = log_level.upper()
        config["handlers"]["console"]["level"] = level
        config["loggers"]["covid_chart"]["level"] = level

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Rendering chart", extra={"bars": 190, "width": 1000})
    """
    return logging.getLogger(name)
