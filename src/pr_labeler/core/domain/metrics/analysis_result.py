from dataclasses import dataclass, field

from pr_labeler.core.domain.metrics.file_metric import FileMetric
from pr_labeler.core.domain.metrics.violation import Violations


@dataclass(kw_only=True)
class AnalysisResult:
    """Aggregate output of the extraction stage.

    A path appears in at most one of the four file lists. ``total_additions``
    covers every changed file, excluded and binary ones included.
    """

    total_files: int
    total_additions: int = 0
    files_analyzed: list[FileMetric] = field(default_factory=list)
    files_excluded: list[str] = field(default_factory=list)
    files_skipped_binary: list[str] = field(default_factory=list)
    files_with_errors: list[str] = field(default_factory=list)
    violations: Violations = field(default_factory=Violations)
