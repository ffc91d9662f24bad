"""
Tests for log redaction and formatting.
"""

import json
import logging
import sys

from portfolio_api.core.config import settings
from portfolio_api.core.logging import REDACTED, CustomJsonFormatter, SecretRedactionFilter, redact
from portfolio_api.core.security import get_password_hash


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("portfolio_api.test", logging.INFO, __file__, 1, msg, args, None)


def test_redact_bearer_header() -> None:
    assert redact("Authorization: Bearer abc.def.ghi") == f"Authorization: {REDACTED}"


def test_redact_jwt(gate, test_user) -> None:
    token = gate.create_token(test_user)
    assert token not in redact(f"issued {token} for user")


def test_redact_bcrypt_hash() -> None:
    hashed = get_password_hash("pw")
    assert redact(f"hash={hashed}") == f"hash={REDACTED}"


def test_filter_rewrites_interpolated_args() -> None:
    record = _record("login with %s", "Bearer sometoken")
    assert SecretRedactionFilter().filter(record) is True
    assert record.getMessage() == f"login with {REDACTED}"


def test_filter_leaves_plain_messages() -> None:
    record = _record("User logged in: %s", "test@example.com")
    SecretRedactionFilter().filter(record)
    assert record.args == ("test@example.com",)


def test_json_formatter_fields() -> None:
    formatter = CustomJsonFormatter("%(asctime)s %(message)s")
    payload = json.loads(formatter.format(_record("hello")))
    assert payload["message"] == "hello"
    assert payload["service"] == settings.PROJECT_NAME
    assert payload["level"] == "INFO"
    assert payload["logger"] == "portfolio_api.test"


def _record_with_exception(exc: Exception) -> logging.LogRecord:
    try:
        raise exc
    except RuntimeError:
        record = logging.LogRecord(
            "portfolio_api.test", logging.ERROR, __file__, 1, "Unhandled error", None, sys.exc_info()
        )
    return record


def test_filter_redacts_traceback_plain_format() -> None:
    record = _record_with_exception(RuntimeError("upstream rejected Bearer leaked.token.value"))
    SecretRedactionFilter().filter(record)
    output = logging.Formatter("%(message)s").format(record)
    assert "leaked.token.value" not in output
    assert REDACTED in output
    assert "RuntimeError" in output


def test_filter_redacts_traceback_json_format() -> None:
    record = _record_with_exception(RuntimeError("upstream rejected Bearer leaked.token.value"))
    SecretRedactionFilter().filter(record)
    payload = json.loads(CustomJsonFormatter("%(asctime)s %(message)s").format(record))
    assert "leaked.token.value" not in payload["exc_info"]
    assert REDACTED in payload["exc_info"]
