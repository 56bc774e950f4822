from dataclasses import replace
from pathlib import Path
from typing import Any, TypeVar

import structlog
import yaml
from pydantic import BaseModel, ValidationError

from pr_labeler.core.application.exceptions import ConfigurationError
from pr_labeler.core.domain.config import CategoryConfig, LabelerConfig
from pr_labeler.infrastructure.configuration.labeler_config_schema import LabelerConfigFile

logger = structlog.get_logger()

MAX_CONFIG_SIZE = 1024 * 1024

_T = TypeVar("_T")


def _merge(default: _T, section: BaseModel | None, **nested: Any) -> _T:
    """Overlay the explicitly set fields of ``section`` onto a default dataclass."""
    if section is None:
        return replace(default, **nested) if nested else default
    values = section.model_dump(exclude_none=True, exclude=set(nested) | {"metric"})
    return replace(default, **values, **nested)


def build_config(document: LabelerConfigFile) -> LabelerConfig:
    base = LabelerConfig()
    size = document.size
    complexity = document.complexity
    try:
        size_thresholds = _merge(base.size.thresholds, size.thresholds if size else None)
        complexity_thresholds = _merge(base.complexity.thresholds, complexity.thresholds if complexity else None)
    except ValueError as exc:
        raise ConfigurationError(str(exc), field="thresholds") from exc

    policies = dict(base.labels.namespace_policies)
    if document.labels is not None and document.labels.namespace_policies:
        policies.update(document.labels.namespace_policies)

    categories = base.categories
    if document.categories is not None:
        categories = [CategoryConfig(**c.model_dump()) for c in document.categories]

    return LabelerConfig(
        size=_merge(base.size, size, thresholds=size_thresholds),
        complexity=_merge(base.complexity, complexity, thresholds=complexity_thresholds),
        category_labeling=_merge(base.category_labeling, document.category_labeling),
        categories=categories,
        risk=_merge(base.risk, document.risk),
        exclude=_merge(base.exclude, document.exclude),
        violations=_merge(base.violations, document.violations),
        labels=_merge(base.labels, document.labels, namespace_policies=policies),
        failures=_merge(base.failures, document.failures),
        runtime=_merge(base.runtime, document.runtime),
    )


def parse_config_text(text: str, *, source: str = "<string>") -> LabelerConfig:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {source}: {exc}", field="labeler_config") from exc
    if raw is None:
        logger.warning("Labeler config is empty, using defaults", path=source)
        return LabelerConfig()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source} must contain a mapping at the top level", field="labeler_config")
    try:
        document = LabelerConfigFile.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid labeler config in {source}: {exc}", field="labeler_config") from exc
    return build_config(document)


def load_labeler_config(path: Path) -> LabelerConfig:
    """Read the labeler YAML; a missing file means built-in defaults."""
    if not path.is_file():
        logger.info("No labeler config found, using defaults", path=str(path))
        return LabelerConfig()
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigurationError(
            f"Labeler config exceeds {MAX_CONFIG_SIZE} bytes ({size})", field="labeler_config", context={"path": str(path)}
        )
    config = parse_config_text(path.read_text(encoding="utf-8"), source=str(path))
    logger.info("Labeler config loaded", path=str(path), categories=len(config.categories))
    return config


def apply_overrides(
    config: LabelerConfig,
    *,
    size_enabled: bool | None = None,
    complexity_enabled: bool | None = None,
    category_enabled: bool | None = None,
    risk_enabled: bool | None = None,
    dry_run: bool | None = None,
    violations_enabled: bool | None = None,
    fail_on_large_files: bool | None = None,
    fail_on_too_many_files: bool | None = None,
    fail_on_pr_size: str | None = None,
    fail_on_error: bool | None = None,
) -> LabelerConfig:
    """Environment toggles win over YAML; ``None`` leaves the YAML value."""

    def toggled(section: _T, value: bool | None, name: str = "enabled") -> _T:
        return section if value is None else replace(section, **{name: value})

    runtime = toggled(toggled(config.runtime, dry_run, "dry_run"), fail_on_error, "fail_on_error")
    failures = toggled(config.failures, fail_on_large_files, "fail_on_large_files")
    failures = toggled(failures, fail_on_too_many_files, "fail_on_too_many_files")
    if fail_on_pr_size is not None:
        try:
            failures = replace(failures, fail_on_pr_size=fail_on_pr_size)
        except ValueError as exc:
            raise ConfigurationError(str(exc), field="fail_on_pr_size") from exc
    return replace(
        config,
        size=toggled(config.size, size_enabled),
        complexity=toggled(config.complexity, complexity_enabled),
        category_labeling=toggled(config.category_labeling, category_enabled),
        risk=toggled(config.risk, risk_enabled),
        violations=toggled(config.violations, violations_enabled),
        failures=failures,
        runtime=runtime,
    )
