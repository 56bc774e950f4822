from pathlib import Path

import pytest

from pr_labeler.core.application.exceptions import ConfigurationError
from pr_labeler.core.domain.config import DEFAULT_CATEGORIES, LabelerConfig
from pr_labeler.core.domain.labels import NamespacePolicy
from pr_labeler.infrastructure.configuration import apply_overrides, load_labeler_config, parse_config_text
from pr_labeler.infrastructure.configuration.labeler_config_loader import MAX_CONFIG_SIZE

FULL_CONFIG = """\
size:
  thresholds:
    small: 100
    medium: 300
complexity:
  metric: cyclomatic
  thresholds:
    high: 30
  extensions: [".py", ".pyi"]
categoryLabeling:
  enabled: false
categories:
  - label: "area/api"
    patterns: ["api/**"]
    exclude: ["api/legacy/**"]
risk:
  core_paths: ["lib/**"]
  use_ci_status: false
exclude:
  additional: ["generated/**"]
labels:
  namespace_policies:
    "category/*": replace
    "area/*": replace
violations:
  enabled: false
failures:
  fail_on_large_files: true
  fail_on_pr_size: xlarge
runtime:
  dry_run: true
"""


class TestParseConfigText:
    def test_overrides_are_merged_with_defaults(self) -> None:
        config = parse_config_text(FULL_CONFIG)

        assert config.size.enabled
        assert config.size.thresholds.small == 100
        assert config.size.thresholds.medium == 300
        assert config.size.thresholds.xlarge == 3000
        assert config.complexity.thresholds.medium == 10
        assert config.complexity.thresholds.high == 30
        assert config.complexity.extensions == [".py", ".pyi"]
        assert not config.category_labeling.enabled
        assert [c.label for c in config.categories] == ["area/api"]
        assert config.categories[0].exclude == ["api/legacy/**"]
        assert config.risk.core_paths == ["lib/**"]
        assert config.risk.high_if_no_tests_for_core
        assert not config.risk.use_ci_status
        assert config.exclude.additional == ["generated/**"]
        assert config.labels.namespace_policies["category/*"] == NamespacePolicy.REPLACE
        assert config.labels.namespace_policies["area/*"] == NamespacePolicy.REPLACE
        assert config.labels.namespace_policies["size/*"] == NamespacePolicy.REPLACE
        assert config.runtime.dry_run
        assert not config.runtime.fail_on_error
        assert not config.violations.enabled
        assert config.failures.fail_on_large_files
        assert not config.failures.fail_on_too_many_files
        assert config.failures.fail_on_pr_size == "xlarge"

    def test_snake_case_section_name_is_accepted(self) -> None:
        config = parse_config_text("category_labeling:\n  enabled: false\n")
        assert not config.category_labeling.enabled

    @pytest.mark.parametrize("text", ["", "   \n", "# only a comment\n"])
    def test_empty_document_yields_defaults(self, text: str) -> None:
        assert parse_config_text(text) == LabelerConfig()

    def test_categories_default_when_omitted(self) -> None:
        assert parse_config_text("size:\n  enabled: false\n").categories == DEFAULT_CATEGORIES

    def test_non_monotonic_thresholds_are_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config_text("size:\n  thresholds:\n    small: 600\n")
        assert exc_info.value.field == "thresholds"

    def test_inverted_complexity_thresholds_are_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_config_text("complexity:\n  thresholds:\n    medium: 40\n")

    @pytest.mark.parametrize(
        "text",
        [
            "sizes:\n  enabled: true\n",
            "size:\n  thresholds:\n    small: -1\n",
            "complexity:\n  metric: halstead\n",
            "categories:\n  - label: x\n    patterns: []\n",
            "labels:\n  namespace_policies:\n    size/*: sometimes\n",
            "labels:\n  create_missing: true\n",
            "failures:\n  fail_on_pr_size: huge\n",
        ],
    )
    def test_schema_violations_are_configuration_errors(self, text: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid labeler config"):
            parse_config_text(text)

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            parse_config_text("size: [unclosed\n")

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            parse_config_text("- size\n- risk\n")


class TestLoadLabelerConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_labeler_config(tmp_path / "absent.yml") == LabelerConfig()

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "pr-labeler.yml"
        path.write_text("runtime:\n  fail_on_error: true\n")

        assert load_labeler_config(path).runtime.fail_on_error

    def test_oversized_file_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "pr-labeler.yml"
        path.write_text("#" * (MAX_CONFIG_SIZE + 1))

        with pytest.raises(ConfigurationError, match="exceeds"):
            load_labeler_config(path)


class TestApplyOverrides:
    def test_none_keeps_yaml_values(self) -> None:
        config = parse_config_text("risk:\n  enabled: false\n")
        assert apply_overrides(config) == config

    def test_toggles_win_over_yaml(self) -> None:
        config = parse_config_text("risk:\n  enabled: false\nruntime:\n  dry_run: true\n")

        overridden = apply_overrides(
            config, risk_enabled=True, size_enabled=False, dry_run=False, fail_on_error=True
        )

        assert overridden.risk.enabled
        assert not overridden.size.enabled
        assert not overridden.runtime.dry_run
        assert overridden.runtime.fail_on_error
        assert overridden.complexity == config.complexity

    def test_failure_policy_overrides(self) -> None:
        overridden = apply_overrides(
            LabelerConfig(),
            violations_enabled=False,
            fail_on_large_files=True,
            fail_on_too_many_files=True,
            fail_on_pr_size="large",
        )

        assert not overridden.violations.enabled
        assert overridden.failures.fail_on_large_files
        assert overridden.failures.fail_on_too_many_files
        assert overridden.failures.fail_on_pr_size == "large"

    def test_unknown_pr_size_override_is_a_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            apply_overrides(LabelerConfig(), fail_on_pr_size="gigantic")
        assert exc_info.value.field == "fail_on_pr_size"
