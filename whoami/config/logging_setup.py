"""Process-wide logging configuration for the probe server."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def config_configure_logging(log_level: str = "info") -> None:
    """Install a single stdout handler for the `whoami` logger tree.

    Args:
        log_level: Case-insensitive level name applied to the `whoami` logger.

    Returns:
        None: Logging configuration is applied as a side effect.

    Raises:
        ValueError: Raised when the level name is not recognized by `logging`.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "whoami": {
                    "handlers": ["stdout"],
                    "level": log_level.upper(),
                    "propagate": False,
                },
            },
        }
    )
