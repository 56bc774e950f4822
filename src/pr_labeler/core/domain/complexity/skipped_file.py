from dataclasses import dataclass
from enum import StrEnum


class SkipReason(StrEnum):
    TOO_LARGE = "too_large"
    ANALYSIS_FAILED = "analysis_failed"
    TIMEOUT = "timeout"
    BINARY = "binary"
    ENCODING_ERROR = "encoding_error"
    SYNTAX_ERROR = "syntax_error"
    GENERAL = "general"


@dataclass(frozen=True, kw_only=True)
class SkippedFile:
    path: str
    reason: SkipReason
    details: str | None = None
