from pr_labeler.core.domain.config.category_config import CategoryConfig
from pr_labeler.core.domain.config.default_categories import DEFAULT_CATEGORIES
from pr_labeler.core.domain.config.default_excludes import DEFAULT_EXCLUDE_PATTERNS
from pr_labeler.core.domain.config.labeler_config import (
    DEFAULT_TEST_PATTERNS,
    SIZE_TIERS,
    CategoryLabelingConfig,
    ComplexityConfig,
    ComplexityThresholds,
    ExcludeConfig,
    FailurePolicyConfig,
    LabelerConfig,
    LabelPolicyConfig,
    RiskConfig,
    RuntimeConfig,
    SizeConfig,
    SizeThresholds,
    ViolationLabelingConfig,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_TEST_PATTERNS",
    "SIZE_TIERS",
    "CategoryConfig",
    "CategoryLabelingConfig",
    "ComplexityConfig",
    "ComplexityThresholds",
    "ExcludeConfig",
    "FailurePolicyConfig",
    "LabelPolicyConfig",
    "LabelerConfig",
    "RiskConfig",
    "RuntimeConfig",
    "SizeConfig",
    "SizeThresholds",
    "ViolationLabelingConfig",
]
