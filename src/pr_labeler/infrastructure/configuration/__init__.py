from pr_labeler.infrastructure.configuration.labeler_config_loader import (
    apply_overrides,
    load_labeler_config,
    parse_config_text,
)
from pr_labeler.infrastructure.configuration.labeler_settings import LabelerSettings
from pr_labeler.infrastructure.configuration.size_parser import parse_size

__all__ = ["LabelerSettings", "apply_overrides", "load_labeler_config", "parse_config_text", "parse_size"]
