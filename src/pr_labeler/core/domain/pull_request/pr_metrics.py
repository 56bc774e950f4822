from dataclasses import dataclass, field

from pr_labeler.core.domain.complexity.complexity_metrics import ComplexityMetrics
from pr_labeler.core.domain.metrics.file_metric import FileMetric
from pr_labeler.core.domain.metrics.violation import Violations


@dataclass(frozen=True, kw_only=True)
class PRMetrics:
    """Input of the rule engine.

    ``files`` are the measured (non-excluded) files while ``all_files`` is
    the full path list before exclusion, used for category and risk globs.
    """

    total_additions: int
    files: list[FileMetric] = field(default_factory=list)
    all_files: list[str] = field(default_factory=list)
    complexity: ComplexityMetrics | None = None
    violations: Violations = field(default_factory=Violations)
