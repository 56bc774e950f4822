from dataclasses import dataclass, field

from pr_labeler.core.domain.complexity.file_complexity import FileComplexity
from pr_labeler.core.domain.complexity.skipped_file import SkippedFile


@dataclass(frozen=True, kw_only=True)
class ComplexityMetrics:
    """PR-wide complexity aggregate.

    ``analyzed_files`` counts syntax-error files (complexity 0) but never
    the entries of ``skipped_files``.
    """

    max_complexity: int
    avg_complexity: float
    analyzed_files: int
    files: list[FileComplexity] = field(default_factory=list)
    skipped_files: list[SkippedFile] = field(default_factory=list)
    syntax_error_files: list[str] = field(default_factory=list)
    truncated: bool = False
    total_pr_files: int | None = None
    has_config_context: bool = False
