from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FunctionComplexity:
    name: str
    complexity: int
    loc_range: tuple[int, int]
