from dataclasses import dataclass, field

from pr_labeler.core.domain.labels.label_reasoning import LabelReasoning


@dataclass(frozen=True, kw_only=True)
class LabelDecisions:
    """Labels the rule engine wants on the PR.

    ``labels_to_remove`` holds namespace tokens, not label names. They are
    resolved against the live label set when the decisions are applied.
    Every present label in a ``namespaces_to_clear`` namespace that is not
    in ``labels_to_add`` is removed, even when nothing from that namespace
    is being added.
    """

    labels_to_add: list[str] = field(default_factory=list)
    labels_to_remove: list[str] = field(default_factory=list)
    namespaces_to_clear: list[str] = field(default_factory=list)
    reasoning: list[LabelReasoning] = field(default_factory=list)
