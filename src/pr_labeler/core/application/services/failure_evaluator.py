"""Turns limit breaches into run failures according to ``LabelerConfig.failures``."""

from pr_labeler.core.application.services.label_decision_engine import decide_size_label
from pr_labeler.core.domain.config import SIZE_TIERS, LabelerConfig
from pr_labeler.core.domain.metrics import Violations

SIZE_PREFIX = "size/"


def size_at_least(size: str, threshold: str) -> bool:
    """Compare tier names (``large`` or ``size/large``); unknown tiers never match."""
    size = size.removeprefix(SIZE_PREFIX)
    if size not in SIZE_TIERS or threshold not in SIZE_TIERS:
        return False
    return SIZE_TIERS.index(size) >= SIZE_TIERS.index(threshold)


def _pr_size(labels: list[str], total_additions: int, config: LabelerConfig) -> str:
    for label in labels:
        if label.startswith(SIZE_PREFIX):
            return label.removeprefix(SIZE_PREFIX)
    return decide_size_label(total_additions, config.size.thresholds).removeprefix(SIZE_PREFIX)


def evaluate_failures(
    violations: Violations, total_additions: int, labels: list[str], config: LabelerConfig
) -> list[str]:
    """One message per failure condition met, empty when the run should pass."""
    policy = config.failures
    failures: list[str] = []

    if policy.fail_on_large_files and violations.large_files:
        failures.append(f"{len(violations.large_files)} file(s) exceed the file size limit")
    if policy.fail_on_too_many_files and violations.exceeds_file_count:
        failures.append("The pull request changes more files than allowed")
    if policy.fail_on_large_files and violations.exceeds_file_lines:
        failures.append(f"{len(violations.exceeds_file_lines)} file(s) exceed the line limit")

    if policy.fail_on_pr_size is not None:
        if violations.exceeds_additions:
            failures.append("Total additions exceed the pull request limit")
        size = _pr_size(labels, total_additions, config)
        if size_at_least(size, policy.fail_on_pr_size):
            failures.append(f"Pull request size {size} reaches the failure threshold {policy.fail_on_pr_size}")

    return failures
