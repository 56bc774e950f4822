import math
import re

from pr_labeler.core.application.exceptions import ConfigurationError

_UNITS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024**2,
    "MB": 1024**2,
    "G": 1024**3,
    "GB": 1024**3,
}
_SIZE = re.compile(r"^(?P<number>\d+(?:\.\d+)?)\s*(?P<unit>[A-Za-z]*)$")
_TOO_LARGE_UNITS = re.compile(r"\d\s*[TPEZY]I?B?$", re.IGNORECASE)


def parse_size(value: str, *, field: str = "file_size_limit") -> int:
    """Convert ``"100KB"``, ``"1.5MB"``, ``"1K"`` or ``"2048"`` to bytes (1024 based)."""
    text = value.strip()
    if not text:
        raise ConfigurationError("Size cannot be empty", field=field)
    if text.startswith("-"):
        raise ConfigurationError(f"Size cannot be negative: {value!r}", field=field)
    if _TOO_LARGE_UNITS.search(text):
        raise ConfigurationError(f"TB and larger units are not supported: {value!r}", field=field)

    match = _SIZE.match(text)
    unit = match.group("unit").upper() if match else None
    if match is None or unit not in _UNITS:
        raise ConfigurationError(
            f'Invalid size format: {value!r}. Use formats like "100KB", "1.5MB", or plain numbers.',
            field=field,
        )
    return math.floor(float(match.group("number")) * _UNITS[unit] + 0.5)
