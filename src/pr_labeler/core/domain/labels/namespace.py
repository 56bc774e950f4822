"""Label namespace helpers (``size`` in ``size/large``)."""

from enum import StrEnum

NAMESPACE_DELIMITER = "/"


class NamespacePolicy(StrEnum):
    REPLACE = "replace"
    ADDITIVE = "additive"


def extract_namespace(label: str, delimiter: str = NAMESPACE_DELIMITER) -> str | None:
    """Return the text before the first delimiter, or ``None`` when absent."""
    index = label.find(delimiter)
    if index == -1:
        return None
    return label[:index]


def matches_namespace_pattern(namespace: str, pattern: str) -> bool:
    """Compare a namespace with a policy key; ``size`` and ``size/*`` are equivalent."""
    normalized = pattern[:-2] if pattern.endswith("/*") else pattern
    return namespace == normalized


def replace_namespaces(policies: dict[str, NamespacePolicy]) -> list[str]:
    """Namespace tokens whose policy is exclusive."""
    return [
        matches_key[:-2] if matches_key.endswith("/*") else matches_key
        for matches_key, policy in policies.items()
        if policy == NamespacePolicy.REPLACE
    ]
