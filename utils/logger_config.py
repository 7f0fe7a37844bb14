import logging.config
import sys
from typing import Optional

from runeroll.core.config import settings


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Install console + rotating error-file logging. The engine never calls this itself."""
    level = (level or settings.LOG_LEVEL).upper()
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        # Formatters: How the logs look
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # Handlers: Where the logs go
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
            "file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": log_file or settings.LOG_FILE,
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "delay": True,
            },
        },

        # Loggers: The configuration for specific modules
        "loggers": {
            "": {  # The "root" logger (captures everything)
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": True
            },
            "runeroll": {  # solver and generator emit per-search debug lines
                "handlers": ["console", "file"],
                "level": level,
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
