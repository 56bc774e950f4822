"""Folds GitHub check runs into a four-slot CI summary."""

from collections.abc import Iterable
from typing import Any

from pr_labeler.core.domain.pull_request import CICheckStatus, CIStatus

_FAILED_CONCLUSIONS = frozenset({"failure", "timed_out", "action_required"})
_UNKNOWN_CONCLUSIONS = frozenset({"neutral", "cancelled", "skipped"})

# A run counts toward every slot whose keyword appears in its name.
CHECK_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tests": ("test", "pytest", "tox", "nox", "jest", "vitest", "integration"),
    "type_check": ("type", "mypy", "pyright", "tsc", "type-check"),
    "build": ("build", "compile", "wheel", "sdist"),
    "lint": ("lint", "ruff", "flake8", "pylint", "eslint", "black", "format"),
}


def map_conclusion(conclusion: str | None) -> CICheckStatus:
    if conclusion == "success":
        return CICheckStatus.PASSED
    if conclusion in _FAILED_CONCLUSIONS:
        return CICheckStatus.FAILED
    if conclusion in _UNKNOWN_CONCLUSIONS:
        return CICheckStatus.UNKNOWN
    return CICheckStatus.PENDING


def _slot_status(runs: list[dict[str, Any]], keywords: tuple[str, ...]) -> CICheckStatus:
    statuses = [
        map_conclusion(run.get("conclusion"))
        for run in runs
        if any(keyword in run["name"].lower() for keyword in keywords)
    ]
    if not statuses:
        return CICheckStatus.UNKNOWN
    if CICheckStatus.FAILED in statuses:
        return CICheckStatus.FAILED
    if all(status == CICheckStatus.PASSED for status in statuses):
        return CICheckStatus.PASSED
    if CICheckStatus.PENDING in statuses:
        return CICheckStatus.PENDING
    return CICheckStatus.UNKNOWN


def evaluate_ci_status(check_runs: Iterable[dict[str, Any]]) -> CIStatus | None:
    """Summarize check runs; ``None`` when no named run exists."""
    runs = [run for run in check_runs if isinstance(run.get("name"), str) and run["name"]]
    if not runs:
        return None
    return CIStatus(**{slot: _slot_status(runs, keywords) for slot, keywords in CHECK_KEYWORDS.items()})


def any_ci_failed(ci_status: CIStatus | None) -> bool:
    return ci_status is not None and CICheckStatus.FAILED in ci_status.checks()


def all_ci_passed(ci_status: CIStatus | None) -> bool:
    return ci_status is not None and all(check == CICheckStatus.PASSED for check in ci_status.checks())
