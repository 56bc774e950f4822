from pr_labeler.core.domain.metrics.analysis_result import AnalysisResult
from pr_labeler.core.domain.metrics.file_limits import FileLimits
from pr_labeler.core.domain.metrics.file_metric import FileMetric
from pr_labeler.core.domain.metrics.violation import (
    Violation,
    ViolationKind,
    Violations,
    ViolationSeverity,
)

__all__ = [
    "AnalysisResult",
    "FileLimits",
    "FileMetric",
    "Violation",
    "ViolationKind",
    "ViolationSeverity",
    "Violations",
]
