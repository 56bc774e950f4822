from dataclasses import dataclass, field
from enum import StrEnum


class ViolationKind(StrEnum):
    SIZE = "size"
    LINES = "lines"


class ViolationSeverity(StrEnum):
    CRITICAL = "critical"
    WARNING = "warning"


@dataclass(frozen=True, kw_only=True)
class Violation:
    file: str
    actual_value: int
    limit: int
    kind: ViolationKind
    severity: ViolationSeverity


@dataclass(kw_only=True)
class Violations:
    """Limit breaches found while measuring the pull request."""

    large_files: list[Violation] = field(default_factory=list)
    exceeds_file_lines: list[Violation] = field(default_factory=list)
    exceeds_additions: bool = False
    exceeds_file_count: bool = False

    @property
    def has_any(self) -> bool:
        return bool(
            self.large_files
            or self.exceeds_file_lines
            or self.exceeds_additions
            or self.exceeds_file_count
        )
