from pr_labeler.core.domain.labels.label_decisions import LabelDecisions
from pr_labeler.core.domain.labels.label_reasoning import LabelCategory, LabelReasoning
from pr_labeler.core.domain.labels.label_update import LabelUpdate
from pr_labeler.core.domain.labels.namespace import (
    NamespacePolicy,
    extract_namespace,
    matches_namespace_pattern,
    replace_namespaces,
)

__all__ = [
    "LabelCategory",
    "LabelDecisions",
    "LabelReasoning",
    "LabelUpdate",
    "NamespacePolicy",
    "extract_namespace",
    "matches_namespace_pattern",
    "replace_namespaces",
]
