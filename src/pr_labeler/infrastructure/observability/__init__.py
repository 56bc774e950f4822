from pr_labeler.infrastructure.observability.logger_factory_service import configure_logging, get_logger
from pr_labeler.infrastructure.observability.redaction_service import redact_mapping, redact_text

__all__ = ["configure_logging", "get_logger", "redact_mapping", "redact_text"]
