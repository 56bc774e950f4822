"""Scrubs credentials from log events and API error text."""

import re
from typing import Any

REDACTED = "[REDACTED]"

_SECRET_PATTERNS = [
    re.compile(r"(Bearer\s+)([A-Za-z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(token\s+)(gh[pousr]_[A-Za-z0-9]+)", re.IGNORECASE),
    re.compile(r"(Authorization:\s*)(\S+)", re.IGNORECASE),
    re.compile(r"()(gh[pousr]_[A-Za-z0-9]{20,})"),
    re.compile(r"()(github_pat_[A-Za-z0-9_]{20,})"),
]

SENSITIVE_KEYS = ("authorization", "token", "password", "secret")


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(rf"\1{REDACTED}", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_mapping(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_mapping(obj: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``obj`` with sensitive keys blanked and string values scrubbed."""
    return {
        key: REDACTED if any(s in str(key).lower() for s in SENSITIVE_KEYS) else redact_value(value)
        for key, value in obj.items()
    }


def redaction_processor(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor applying :func:`redact_mapping` to every event."""
    return redact_mapping(event_dict)
