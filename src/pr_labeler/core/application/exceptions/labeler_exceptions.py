"""Labeler exception hierarchy.

Stage failures raise from this tree so callers can branch on type rather
than on message text. Per-file failures are recorded in result objects
and never surface as exceptions.
"""

from typing import Any

from pr_labeler.core.domain.labels.label_update import LabelUpdate


class LabelerError(Exception):
    """Base exception for all labeler errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ConfigurationError(LabelerError):
    """Invalid settings or labeler YAML."""

    def __init__(self, message: str, *, field: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)
        self.field = field


class DiffError(LabelerError):
    """Neither the local repository nor the remote API produced a diff."""

    def __init__(self, message: str, *, source: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)
        self.source = source


class FileAnalysisError(LabelerError):
    """The metrics stage cannot run at all (e.g. the workspace is missing)."""

    def __init__(self, message: str, *, file: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)
        self.file = file


class ComplexityAnalysisError(LabelerError):
    def __init__(
        self,
        message: str,
        *,
        reason: str,
        filename: str | None = None,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.reason = reason
        self.filename = filename
        self.details = details


class LocalCommandError(LabelerError):
    """A git or wc subprocess could not be started or exited non-zero."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str],
        returncode: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.command = command
        self.returncode = returncode


class APIError(LabelerError):
    """A remote repository call failed."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        rate_limited: bool = False,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status = status
        self.rate_limited = rate_limited


class LabelPermissionError(APIError):
    """The token may not edit labels. Carries whatever was applied before the refusal."""

    def __init__(self, message: str, *, update: LabelUpdate, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, status=403, rate_limited=False, context=context)
        self.update = update
