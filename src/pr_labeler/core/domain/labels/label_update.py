from dataclasses import dataclass, field


@dataclass(kw_only=True)
class LabelUpdate:
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    api_call_count: int = 0
