"""
Custom logging configuration that keeps registry secrets out of logs
"""

import logging
import logging.config
import re
from typing import Any, Dict

_KEY_PATTERN = re.compile(r'("?(?:primaryKey|secondaryKey|primary_key|secondary_key)"?\s*[:=]\s*)("[^"]*"|\'[^\']*\'|[^\s,}]+)')
_SAS_PATTERN = re.compile(r"(SharedAccessSignature\s+)\S+")

REDACTED = "***"


class SecretRedactionFilter(logging.Filter):
    """Filter that masks symmetric keys and SAS tokens in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with secrets masked. Never drops records."""
        message = record.getMessage()
        redacted = _SAS_PATTERN.sub(rf"\g<1>{REDACTED}", message)
        redacted = _KEY_PATTERN.sub(rf"\g<1>{REDACTED}", redacted)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with secret redaction."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "secret_redaction_filter": {
                "()": SecretRedactionFilter
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
                "filters": ["secret_redaction_filter"]
            }
        },
        "loggers": {
            "edgeregistry": {
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
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
