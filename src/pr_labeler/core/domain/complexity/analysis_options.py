from dataclasses import dataclass, field

DEFAULT_COMPLEXITY_EXTENSIONS: list[str] = [".py"]

DEFAULT_COMPLEXITY_EXCLUDES: list[str] = [
    "**/dist/**",
    "**/build/**",
    "**/vendor/**",
    "**/.venv/**",
    "**/site-packages/**",
    "**/__pycache__/**",
    "**/tests/**",
    "**/test_*.py",
    "**/*_test.py",
    "**/conftest.py",
    "**/migrations/**",
    "**/*_pb2.py",
    "**/*_pb2_grpc.py",
]


@dataclass(frozen=True, kw_only=True)
class AnalysisOptions:
    concurrency: int = 8
    timeout: float = 60.0
    file_timeout: float = 5.0
    max_file_size: int = 1024 * 1024
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_COMPLEXITY_EXTENSIONS))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_COMPLEXITY_EXCLUDES))
