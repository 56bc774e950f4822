"""Pydantic schema of ``.github/pr-labeler.yml``.

Every field is optional; omitted keys keep the built-in defaults.
Unknown keys are rejected so typos surface as configuration errors.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pr_labeler.core.domain.labels import NamespacePolicy


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class SizeThresholdsSection(_Section):
    small: int | None = Field(default=None, ge=0)
    medium: int | None = Field(default=None, ge=0)
    large: int | None = Field(default=None, ge=0)
    xlarge: int | None = Field(default=None, ge=0)


class SizeSection(_Section):
    enabled: bool | None = None
    thresholds: SizeThresholdsSection | None = None


class ComplexityThresholdsSection(_Section):
    medium: int | None = Field(default=None, ge=0)
    high: int | None = Field(default=None, ge=0)


class ComplexitySection(_Section):
    enabled: bool | None = None
    metric: str | None = Field(default=None, pattern="^cyclomatic$")
    thresholds: ComplexityThresholdsSection | None = None
    extensions: list[str] | None = None
    exclude: list[str] | None = None


class CategorySection(_Section):
    label: str = Field(min_length=1)
    patterns: list[str] = Field(min_length=1)
    exclude: list[str] = Field(default_factory=list)


class CategoryLabelingSection(_Section):
    enabled: bool | None = None


class RiskSection(_Section):
    enabled: bool | None = None
    high_if_no_tests_for_core: bool | None = None
    core_paths: list[str] | None = None
    config_files: list[str] | None = None
    test_patterns: list[str] | None = None
    use_ci_status: bool | None = None


class ExcludeSection(_Section):
    additional: list[str] | None = None


class ViolationsSection(_Section):
    enabled: bool | None = None


class FailuresSection(_Section):
    fail_on_large_files: bool | None = None
    fail_on_too_many_files: bool | None = None
    fail_on_pr_size: Literal["small", "medium", "large", "xlarge", "xxlarge"] | None = None


class LabelsSection(_Section):
    namespace_policies: dict[str, NamespacePolicy] | None = None


class RuntimeSection(_Section):
    fail_on_error: bool | None = None
    dry_run: bool | None = None


class LabelerConfigFile(_Section):
    size: SizeSection | None = None
    complexity: ComplexitySection | None = None
    category_labeling: CategoryLabelingSection | None = Field(default=None, alias="categoryLabeling")
    categories: list[CategorySection] | None = None
    risk: RiskSection | None = None
    exclude: ExcludeSection | None = None
    violations: ViolationsSection | None = None
    labels: LabelsSection | None = None
    failures: FailuresSection | None = None
    runtime: RuntimeSection | None = None
