from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FileMetric:
    """Measured size and line count of a single analyzed file."""

    path: str
    size_bytes: int
    line_count: int
    additions: int
    deletions: int
