import re
from enum import StrEnum


class ChangeType(StrEnum):
    REFACTOR = "refactor"
    FIX = "fix"
    FEATURE = "feature"
    DOCS = "docs"
    TEST = "test"
    STYLE = "style"
    CHORE = "chore"
    UNKNOWN = "unknown"


_PREFIXES: dict[str, ChangeType] = {
    "feat": ChangeType.FEATURE,
    "feature": ChangeType.FEATURE,
    "fix": ChangeType.FIX,
    "refactor": ChangeType.REFACTOR,
    "docs": ChangeType.DOCS,
    "test": ChangeType.TEST,
    "tests": ChangeType.TEST,
    "style": ChangeType.STYLE,
    "chore": ChangeType.CHORE,
}

# type(scope)!: subject
_CONVENTIONAL = re.compile(r"^\s*(?P<type>[a-zA-Z]+)(?:\([^)]*\))?!?:\s")


def detect_change_type(subject: str) -> ChangeType:
    """Classify a commit subject by its conventional-commit prefix."""
    match = _CONVENTIONAL.match(subject)
    if not match:
        return ChangeType.UNKNOWN
    return _PREFIXES.get(match.group("type").lower(), ChangeType.UNKNOWN)
