from pr_labeler.core.domain.complexity.analysis_options import (
    DEFAULT_COMPLEXITY_EXCLUDES,
    DEFAULT_COMPLEXITY_EXTENSIONS,
    AnalysisOptions,
)
from pr_labeler.core.domain.complexity.complexity_metrics import ComplexityMetrics
from pr_labeler.core.domain.complexity.file_complexity import FileComplexity
from pr_labeler.core.domain.complexity.function_complexity import FunctionComplexity
from pr_labeler.core.domain.complexity.skipped_file import SkippedFile, SkipReason

__all__ = [
    "DEFAULT_COMPLEXITY_EXCLUDES",
    "DEFAULT_COMPLEXITY_EXTENSIONS",
    "AnalysisOptions",
    "ComplexityMetrics",
    "FileComplexity",
    "FunctionComplexity",
    "SkipReason",
    "SkippedFile",
]
