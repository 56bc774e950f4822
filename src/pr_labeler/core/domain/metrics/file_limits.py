from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class FileLimits:
    """Per-file and per-PR thresholds applied by the metrics extractor."""

    file_size_limit: int
    file_lines_limit: int
    max_added_lines: int
    max_file_count: int
    exclude_patterns: list[str] = field(default_factory=list)
