from pr_labeler.core.application.exceptions.labeler_exceptions import (
    APIError,
    ComplexityAnalysisError,
    ConfigurationError,
    DiffError,
    FileAnalysisError,
    LabelerError,
    LabelPermissionError,
    LocalCommandError,
)

__all__ = [
    "APIError",
    "ComplexityAnalysisError",
    "ConfigurationError",
    "DiffError",
    "FileAnalysisError",
    "LabelPermissionError",
    "LabelerError",
    "LocalCommandError",
]
