"""
Custom logging configuration that keeps credentials out of log output
"""

import logging
import logging.config
import re
from typing import Dict, Any


class CredentialRedactionFilter(logging.Filter):
    """Filter to mask bearer tokens and passwords in log messages."""

    BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s'\",]+", re.IGNORECASE)
    PASSWORD_PATTERN = re.compile(r"""(['"]?password['"]?\s*[:=]\s*['"]?)[^'",\s}]+""", re.IGNORECASE)

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with credentials masked."""
        message = record.getMessage()
        redacted = self.BEARER_PATTERN.sub(r"\1***", message)
        redacted = self.PASSWORD_PATTERN.sub(r"\1***", redacted)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "credential_filter": {
                "()": CredentialRedactionFilter
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
                "filters": ["credential_filter"]
            }
        },
        "loggers": {
            "authsession": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
