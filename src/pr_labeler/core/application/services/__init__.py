from pr_labeler.core.application.services.complexity_analyzer import ComplexityAnalyzer, aggregate_metrics
from pr_labeler.core.application.services.diff_retriever import DiffRetriever
from pr_labeler.core.application.services.failure_evaluator import evaluate_failures
from pr_labeler.core.application.services.file_metrics_extractor import FileMetricsExtractor
from pr_labeler.core.application.services.label_applicator import LabelApplicator
from pr_labeler.core.application.services.label_decision_engine import decide_labels

__all__ = [
    "ComplexityAnalyzer",
    "DiffRetriever",
    "FileMetricsExtractor",
    "LabelApplicator",
    "aggregate_metrics",
    "decide_labels",
    "evaluate_failures",
]
