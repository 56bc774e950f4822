import pytest

from pr_labeler.core.application.services.failure_evaluator import evaluate_failures, size_at_least
from pr_labeler.core.domain.config import FailurePolicyConfig, LabelerConfig
from pr_labeler.core.domain.metrics import Violation, ViolationKind, Violations, ViolationSeverity

LARGE = Violation(
    file="assets/dump.sql", actual_value=500_000, limit=102_400, kind=ViolationKind.SIZE, severity=ViolationSeverity.CRITICAL
)
LONG = Violation(
    file="src/huge.py", actual_value=900, limit=500, kind=ViolationKind.LINES, severity=ViolationSeverity.WARNING
)


def _config(**policy: object) -> LabelerConfig:
    return LabelerConfig(failures=FailurePolicyConfig(**policy))


class TestSizeAtLeast:
    @pytest.mark.parametrize(
        ("size", "threshold", "expected"),
        [
            ("size/large", "medium", True),
            ("medium", "medium", True),
            ("size/small", "medium", False),
            ("xxlarge", "xlarge", True),
            ("huge", "small", False),
            ("large", "giant", False),
        ],
    )
    def test_tier_ordering(self, size: str, threshold: str, expected: bool) -> None:
        assert size_at_least(size, threshold) is expected


class TestEvaluateFailures:
    def test_default_policy_never_fails(self) -> None:
        violations = Violations(large_files=[LARGE], exceeds_file_count=True, exceeds_additions=True)
        assert evaluate_failures(violations, 9000, ["size/xxlarge"], LabelerConfig()) == []

    def test_large_files_cover_size_and_line_breaches(self) -> None:
        violations = Violations(large_files=[LARGE], exceeds_file_lines=[LONG])

        failures = evaluate_failures(violations, 10, ["size/small"], _config(fail_on_large_files=True))

        assert failures == [
            "1 file(s) exceed the file size limit",
            "1 file(s) exceed the line limit",
        ]

    def test_too_many_files(self) -> None:
        failures = evaluate_failures(
            Violations(exceeds_file_count=True), 10, [], _config(fail_on_too_many_files=True)
        )
        assert failures == ["The pull request changes more files than allowed"]

    def test_pr_size_uses_the_decided_size_label(self) -> None:
        failures = evaluate_failures(Violations(), 10, ["size/large"], _config(fail_on_pr_size="large"))
        assert failures == ["Pull request size large reaches the failure threshold large"]

    def test_pr_size_falls_back_to_additions_without_a_label(self) -> None:
        config = _config(fail_on_pr_size="medium")

        assert evaluate_failures(Violations(), 600, [], config) == [
            "Pull request size large reaches the failure threshold medium"
        ]
        assert evaluate_failures(Violations(), 100, [], config) == []

    def test_pr_size_policy_also_fails_on_excessive_additions(self) -> None:
        failures = evaluate_failures(
            Violations(exceeds_additions=True), 10, ["size/small"], _config(fail_on_pr_size="xxlarge")
        )
        assert failures == ["Total additions exceed the pull request limit"]

    def test_unknown_size_threshold_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="fail_on_pr_size"):
            FailurePolicyConfig(fail_on_pr_size="huge")
