"""Pure rule engine turning PR metrics into label decisions.

Nothing here performs I/O; CI and commit signals arrive as plain data.
"""

from pr_labeler.core.application.services.ci_status_evaluator import all_ci_passed, any_ci_failed
from pr_labeler.core.application.services.pattern_matcher import is_test_file, matches_any
from pr_labeler.core.domain.config import CategoryConfig, ComplexityThresholds, LabelerConfig, RiskConfig, SizeThresholds
from pr_labeler.core.domain.labels import (
    LabelCategory,
    LabelDecisions,
    LabelReasoning,
    NamespacePolicy,
    extract_namespace,
    matches_namespace_pattern,
)
from pr_labeler.core.domain.metrics import Violations
from pr_labeler.core.domain.pull_request import ChangeType, PRContext, PRMetrics, detect_change_type

RISK_HIGH = "risk/high"
RISK_MEDIUM = "risk/medium"

AUTO_NAMESPACE = "auto"
LARGE_FILES_LABEL = "auto/large-files"
TOO_MANY_LINES_LABEL = "auto/too-many-lines"
EXCESSIVE_CHANGES_LABEL = "auto/excessive-changes"
TOO_MANY_FILES_LABEL = "auto/too-many-files"


def decide_size_label(additions: int, thresholds: SizeThresholds) -> str:
    if additions < thresholds.small:
        return "size/small"
    if additions < thresholds.medium:
        return "size/medium"
    if additions < thresholds.large:
        return "size/large"
    if additions < thresholds.xlarge:
        return "size/xlarge"
    return "size/xxlarge"


def decide_complexity_label(complexity: int, thresholds: ComplexityThresholds) -> str | None:
    if complexity >= thresholds.high:
        return "complexity/high"
    if complexity >= thresholds.medium:
        return "complexity/medium"
    return None


def match_category(files: list[str], category: CategoryConfig) -> list[str]:
    return [
        path
        for path in files
        if matches_any(path, category.patterns) and not matches_any(path, category.exclude)
    ]


def decide_category_labels(files: list[str], categories: list[CategoryConfig]) -> list[LabelReasoning]:
    decisions = []
    for category in categories:
        matched = match_category(files, category)
        if matched:
            decisions.append(
                LabelReasoning(
                    label=category.label,
                    reason=f"{len(matched)} file(s) match category patterns",
                    category=LabelCategory.CATEGORY,
                    matched_files=matched,
                )
            )
    return decisions


def _context_free_risk(files: list[str], config: RiskConfig) -> LabelReasoning | None:
    has_tests = any(is_test_file(path, config.test_patterns) for path in files)
    core_files = [path for path in files if matches_any(path, config.core_paths)]
    if config.high_if_no_tests_for_core and core_files and not has_tests:
        return LabelReasoning(
            label=RISK_HIGH,
            reason="core functionality changed without test files",
            category=LabelCategory.RISK,
            matched_files=core_files,
        )
    config_files = [path for path in files if matches_any(path, config.config_files)]
    if config_files:
        return LabelReasoning(
            label=RISK_MEDIUM,
            reason="configuration files changed",
            category=LabelCategory.RISK,
            matched_files=config_files,
        )
    return None


def decide_risk_label(files: list[str], config: RiskConfig, context: PRContext | None = None) -> LabelReasoning | None:
    """Risk label for the change set.

    With CI context: a failed check means high risk, a pure refactor with
    green CI means no risk label, and a feature without tests on a core
    path means high risk. Anything else uses the file-only rules.
    """
    if config.use_ci_status and context is not None:
        if any_ci_failed(context.ci_status):
            return LabelReasoning(label=RISK_HIGH, reason="CI checks failed", category=LabelCategory.RISK)

        change_types = [detect_change_type(subject) for subject in context.commit_subjects]
        if change_types and all(t == ChangeType.REFACTOR for t in change_types) and all_ci_passed(context.ci_status):
            return None

        if ChangeType.FEATURE in change_types and config.high_if_no_tests_for_core:
            core_files = [path for path in files if matches_any(path, config.core_paths)]
            if core_files and not any(is_test_file(path, config.test_patterns) for path in files):
                return LabelReasoning(
                    label=RISK_HIGH,
                    reason="new feature on core paths without test files",
                    category=LabelCategory.RISK,
                    matched_files=core_files,
                )

    return _context_free_risk(files, config)


def decide_violation_labels(violations: Violations) -> list[LabelReasoning]:
    decisions = []
    if violations.large_files:
        decisions.append(
            LabelReasoning(
                label=LARGE_FILES_LABEL,
                reason=f"{len(violations.large_files)} file(s) exceed the size limit",
                category=LabelCategory.VIOLATION,
                matched_files=[v.file for v in violations.large_files],
            )
        )
    if violations.exceeds_file_lines:
        decisions.append(
            LabelReasoning(
                label=TOO_MANY_LINES_LABEL,
                reason=f"{len(violations.exceeds_file_lines)} file(s) exceed the line limit",
                category=LabelCategory.VIOLATION,
                matched_files=[v.file for v in violations.exceeds_file_lines],
            )
        )
    if violations.exceeds_additions:
        decisions.append(
            LabelReasoning(
                label=EXCESSIVE_CHANGES_LABEL, reason="total additions exceed the limit", category=LabelCategory.VIOLATION
            )
        )
    if violations.exceeds_file_count:
        decisions.append(
            LabelReasoning(
                label=TOO_MANY_FILES_LABEL, reason="changed file count exceeds the limit", category=LabelCategory.VIOLATION
            )
        )
    return decisions


def labels_to_remove(labels: list[str], policies: dict[str, NamespacePolicy]) -> list[str]:
    """Namespace tokens of ``labels`` governed by a replace policy, in first-seen order."""
    tokens: list[str] = []
    for label in labels:
        namespace = extract_namespace(label)
        if namespace is None or namespace in tokens:
            continue
        if any(
            policy == NamespacePolicy.REPLACE and matches_namespace_pattern(namespace, pattern)
            for pattern, policy in policies.items()
        ):
            tokens.append(namespace)
    return tokens


def decide_labels(metrics: PRMetrics, config: LabelerConfig, context: PRContext | None = None) -> LabelDecisions:
    reasoning: list[LabelReasoning] = []

    if config.size.enabled:
        label = decide_size_label(metrics.total_additions, config.size.thresholds)
        reasoning.append(
            LabelReasoning(
                label=label,
                reason=f"additions ({metrics.total_additions}) in {label.split('/')[1]} range",
                category=LabelCategory.SIZE,
            )
        )

    if config.complexity.enabled and metrics.complexity is not None:
        label = decide_complexity_label(metrics.complexity.max_complexity, config.complexity.thresholds)
        if label is not None:
            reasoning.append(
                LabelReasoning(
                    label=label,
                    reason=f"max complexity ({metrics.complexity.max_complexity}) reached threshold",
                    category=LabelCategory.COMPLEXITY,
                    matched_files=[
                        f.path for f in metrics.complexity.files if f.complexity == metrics.complexity.max_complexity
                    ],
                )
            )

    if config.category_labeling.enabled:
        reasoning.extend(decide_category_labels(metrics.all_files, config.categories))

    if config.risk.enabled:
        risk = decide_risk_label(metrics.all_files, config.risk, context)
        if risk is not None:
            reasoning.append(risk)

    cleared: list[str] = []
    if config.violations.enabled:
        reasoning.extend(decide_violation_labels(metrics.violations))
        cleared.append(AUTO_NAMESPACE)

    to_add = list(dict.fromkeys(r.label for r in reasoning))
    return LabelDecisions(
        labels_to_add=to_add,
        labels_to_remove=labels_to_remove(to_add, config.labels.namespace_policies),
        namespaces_to_clear=cleared,
        reasoning=reasoning,
    )
