from dataclasses import dataclass, field

from pr_labeler.core.domain.complexity.function_complexity import FunctionComplexity


@dataclass(frozen=True, kw_only=True)
class FileComplexity:
    """Cyclomatic complexity of one file, the sum over its functions.

    Files that fail to parse keep complexity 0 and ``is_syntax_error=True``.
    """

    path: str
    complexity: int
    functions: list[FunctionComplexity] = field(default_factory=list)
    is_syntax_error: bool = False
