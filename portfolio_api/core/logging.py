"""
Structured logging configuration using python-json-logger.

JSON lines in production, a readable single-line format with DEBUG on.
A redaction filter on the handler masks bearer tokens, JWTs and bcrypt
hashes, so credential material never reaches the log stream even if a
message interpolates it by mistake.
"""

import logging
import re
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from portfolio_api.core.config import settings

REDACTED = "[REDACTED]"

_SECRET_PATTERNS = (
    re.compile(r"(?i)bearer\s+[A-Za-z0-9._~+/=-]+"),
    re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*"),
    re.compile(r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}"),
)

_HANDLER_NAME = "portfolio_api"


_traceback_formatter = logging.Formatter()


class SecretRedactionFilter(logging.Filter):
    """Mask credential-looking substrings in the message and any traceback."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None

        # Render the traceback now so formatters only ever see the redacted text
        if record.exc_info:
            record.exc_text = redact(_traceback_formatter.formatException(record.exc_info))
            record.exc_info = None
        elif record.exc_text:
            record.exc_text = redact(record.exc_text)
        if record.stack_info:
            record.stack_info = redact(record.stack_info)
        return True


def redact(text: str) -> str:
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(REDACTED, text)
    return text


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with service identity."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = settings.PROJECT_NAME
        log_record["version"] = settings.VERSION
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def build_handler(debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if debug:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    else:
        handler.setFormatter(CustomJsonFormatter("%(asctime)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"))
    handler.addFilter(SecretRedactionFilter())
    return handler


def setup_logging() -> None:
    """
    Configure the root logger once.
    Calling it again replaces the app handler instead of stacking another.
    """
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)

    root_logger.addHandler(build_handler(settings.DEBUG))
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    # Third-party noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)
    logging.getLogger("multipart").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
