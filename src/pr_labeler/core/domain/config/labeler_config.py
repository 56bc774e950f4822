from dataclasses import dataclass, field

from pr_labeler.core.domain.config.category_config import CategoryConfig
from pr_labeler.core.domain.config.default_categories import DEFAULT_CATEGORIES
from pr_labeler.core.domain.labels.namespace import NamespacePolicy

SIZE_TIERS: tuple[str, ...] = ("small", "medium", "large", "xlarge", "xxlarge")


@dataclass(frozen=True, kw_only=True)
class SizeThresholds:
    """Lower bounds of each tier above ``size/small``; ``xlarge`` opens ``xxlarge``."""

    small: int = 200
    medium: int = 500
    large: int = 1000
    xlarge: int = 3000

    def __post_init__(self) -> None:
        values = (self.small, self.medium, self.large, self.xlarge)
        if any(value < 0 for value in values):
            raise ValueError("Size thresholds must be non-negative.")
        if list(values) != sorted(values):
            raise ValueError("Size thresholds must satisfy small <= medium <= large <= xlarge.")


@dataclass(frozen=True, kw_only=True)
class SizeConfig:
    enabled: bool = True
    thresholds: SizeThresholds = field(default_factory=SizeThresholds)


@dataclass(frozen=True, kw_only=True)
class ComplexityThresholds:
    medium: int = 10
    high: int = 20

    def __post_init__(self) -> None:
        if self.medium < 0 or self.high < 0:
            raise ValueError("Complexity thresholds must be non-negative.")
        if self.medium > self.high:
            raise ValueError("Complexity threshold 'medium' must not exceed 'high'.")


@dataclass(frozen=True, kw_only=True)
class ComplexityConfig:
    enabled: bool = True
    thresholds: ComplexityThresholds = field(default_factory=ComplexityThresholds)
    extensions: list[str] | None = None
    exclude: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class CategoryLabelingConfig:
    enabled: bool = True


DEFAULT_TEST_PATTERNS: list[str] = [
    "**/test_*.py",
    "**/*_test.py",
    "**/conftest.py",
]


@dataclass(frozen=True, kw_only=True)
class RiskConfig:
    enabled: bool = True
    high_if_no_tests_for_core: bool = True
    core_paths: list[str] = field(default_factory=lambda: ["src/**"])
    config_files: list[str] = field(
        default_factory=lambda: [
            ".github/workflows/**",
            "pyproject.toml",
            "setup.cfg",
            "setup.py",
            "package.json",
        ]
    )
    test_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_TEST_PATTERNS))
    use_ci_status: bool = True


@dataclass(frozen=True, kw_only=True)
class ExcludeConfig:
    additional: list[str] = field(default_factory=list)


def _default_namespace_policies() -> dict[str, NamespacePolicy]:
    return {
        "size/*": NamespacePolicy.REPLACE,
        "category/*": NamespacePolicy.ADDITIVE,
        "complexity/*": NamespacePolicy.REPLACE,
        "risk/*": NamespacePolicy.REPLACE,
        "auto/*": NamespacePolicy.REPLACE,
    }


@dataclass(frozen=True, kw_only=True)
class LabelPolicyConfig:
    namespace_policies: dict[str, NamespacePolicy] = field(default_factory=_default_namespace_policies)


@dataclass(frozen=True, kw_only=True)
class RuntimeConfig:
    fail_on_error: bool = False
    dry_run: bool = False


@dataclass(frozen=True, kw_only=True)
class ViolationLabelingConfig:
    """Emit ``auto/`` labels for breached file and PR limits."""

    enabled: bool = True


@dataclass(frozen=True, kw_only=True)
class FailurePolicyConfig:
    fail_on_large_files: bool = False
    fail_on_too_many_files: bool = False
    fail_on_pr_size: str | None = None

    def __post_init__(self) -> None:
        if self.fail_on_pr_size is not None and self.fail_on_pr_size not in SIZE_TIERS:
            raise ValueError(f"fail_on_pr_size must be one of {', '.join(SIZE_TIERS)}, got {self.fail_on_pr_size!r}.")


@dataclass(frozen=True, kw_only=True)
class LabelerConfig:
    """Complete labeling rules. ``LabelerConfig()`` yields the built-in defaults."""

    size: SizeConfig = field(default_factory=SizeConfig)
    complexity: ComplexityConfig = field(default_factory=ComplexityConfig)
    category_labeling: CategoryLabelingConfig = field(default_factory=CategoryLabelingConfig)
    categories: list[CategoryConfig] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    risk: RiskConfig = field(default_factory=RiskConfig)
    exclude: ExcludeConfig = field(default_factory=ExcludeConfig)
    violations: ViolationLabelingConfig = field(default_factory=ViolationLabelingConfig)
    labels: LabelPolicyConfig = field(default_factory=LabelPolicyConfig)
    failures: FailurePolicyConfig = field(default_factory=FailurePolicyConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
