from dataclasses import dataclass, field
from enum import StrEnum


class LabelCategory(StrEnum):
    SIZE = "size"
    COMPLEXITY = "complexity"
    CATEGORY = "category"
    RISK = "risk"
    VIOLATION = "violation"


@dataclass(frozen=True, kw_only=True)
class LabelReasoning:
    label: str
    reason: str
    category: LabelCategory
    matched_files: list[str] = field(default_factory=list)
