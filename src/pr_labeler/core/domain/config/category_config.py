from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class CategoryConfig:
    """A category label applies when a path matches ``patterns`` and no ``exclude`` glob."""

    label: str
    patterns: list[str]
    exclude: list[str] = field(default_factory=list)
