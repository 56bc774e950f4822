import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog

from pr_labeler.core.application.exceptions import APIError, FileAnalysisError
from pr_labeler.core.application.ports import LocalRepositoryPort, RepositoryPort
from pr_labeler.core.application.services.pattern_matcher import exclusion_patterns, is_excluded
from pr_labeler.core.domain.diff import ChangedFile
from pr_labeler.core.domain.metrics import (
    AnalysisResult,
    FileLimits,
    FileMetric,
    Violation,
    ViolationKind,
    ViolationSeverity,
)
from pr_labeler.core.domain.pull_request import PullRequestRef

logger = structlog.get_logger()

BINARY_EXTENSIONS = frozenset(
    {
        # images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".ico", ".webp", ".tiff",
        # video
        ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".mkv", ".m4v",
        # audio
        ".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a",
        # archives
        ".zip", ".tar", ".gz", ".bz2", ".xz", ".rar", ".7z", ".jar", ".whl",
        # executables
        ".exe", ".dll", ".so", ".dylib", ".bin", ".app", ".deb", ".rpm",
        # fonts
        ".ttf", ".otf", ".woff", ".woff2", ".eot",
        # documents
        ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
        # compiled
        ".pyc", ".pyo", ".class", ".o", ".a", ".lib", ".wasm",
        # databases
        ".db", ".sqlite", ".sqlite3",
    }
)

SAMPLE_BYTES = 8192
PRINTABLE_WINDOW = 512
NON_PRINTABLE_RATIO = 0.3
_TEXT_CONTROL_BYTES = frozenset({9, 10, 13})

MeasureFn = Callable[[str], Awaitable[int | None]]


def looks_binary(sample: bytes) -> bool:
    if b"\x00" in sample:
        return True
    window = sample[:PRINTABLE_WINDOW]
    if not window:
        return False
    non_printable = sum(1 for byte in window if (byte < 0x20 or byte > 0x7E) and byte not in _TEXT_CONTROL_BYTES)
    return non_printable / len(window) > NON_PRINTABLE_RATIO


def _read_sample(path: Path) -> bytes:
    with path.open("rb") as handle:
        return handle.read(SAMPLE_BYTES)


def _scan_lines(path: Path, max_lines: int) -> int:
    count = 0
    with path.open("r", encoding="utf-8", errors="replace", newline=None) as handle:
        for _ in handle:
            count += 1
            if count >= max_lines:
                break
    return count


async def first_result(providers: list[MeasureFn], path: str) -> int | None:
    """Run measurement providers in order; the first non-None answer wins."""
    for provider in providers:
        value = await provider(path)
        if value is not None:
            return value
    return None


class FileMetricsExtractor:
    """Measures byte size and line count of every changed file and flags limit breaches."""

    def __init__(
        self,
        workspace: Path,
        pr: PullRequestRef,
        remote: RepositoryPort | None = None,
        local: LocalRepositoryPort | None = None,
    ) -> None:
        self._workspace = workspace
        self._pr = pr
        self._remote = remote
        self._local = local

    async def analyze_files(self, files: list[ChangedFile], limits: FileLimits) -> AnalysisResult:
        if not self._workspace.is_dir():
            raise FileAnalysisError(
                f"Workspace not found: {self._workspace}", context={"workspace": str(self._workspace)}
            )

        logger.info("Analyzing files", total=len(files))
        result = AnalysisResult(total_files=len(files), total_additions=sum(f.additions for f in files))
        if len(files) > limits.max_file_count:
            result.violations.exceeds_file_count = True
            logger.warning("File count exceeds limit", count=len(files), limit=limits.max_file_count)

        patterns = exclusion_patterns(limits.exclude_patterns)
        max_lines = limits.file_lines_limit + 1
        for index, changed in enumerate(files):
            if index >= limits.max_file_count:
                logger.warning("Reached max file count, skipping the rest", limit=limits.max_file_count)
                break
            await self._process(changed, patterns, max_lines, limits, result)

        if result.total_additions > limits.max_added_lines:
            result.violations.exceeds_additions = True
            logger.warning("Total additions exceed limit", additions=result.total_additions, limit=limits.max_added_lines)

        logger.info(
            "File analysis complete",
            analyzed=len(result.files_analyzed),
            excluded=len(result.files_excluded),
            binary=len(result.files_skipped_binary),
            errors=len(result.files_with_errors),
        )
        return result

    async def _process(
        self,
        changed: ChangedFile,
        patterns: list[str],
        max_lines: int,
        limits: FileLimits,
        result: AnalysisResult,
    ) -> None:
        path = changed.path
        if is_excluded(path, patterns):
            result.files_excluded.append(path)
            return
        if await self.is_binary(path):
            logger.debug("Skipping binary file", path=path)
            result.files_skipped_binary.append(path)
            return

        try:
            size = await self.get_file_size(path)
            lines = await self.get_line_count(path, max_lines)
        except (OSError, APIError) as exc:
            logger.warning("Failed to measure file", path=path, error=str(exc))
            result.files_with_errors.append(path)
            return
        if size is None or lines is None:
            logger.warning("No measurement available for file", path=path, size=size, lines=lines)
            result.files_with_errors.append(path)
            return

        result.files_analyzed.append(
            FileMetric(path=path, size_bytes=size, line_count=lines, additions=changed.additions, deletions=changed.deletions)
        )
        if size > limits.file_size_limit:
            logger.warning("File exceeds size limit", path=path, size=size, limit=limits.file_size_limit)
            result.violations.large_files.append(
                Violation(
                    file=path,
                    actual_value=size,
                    limit=limits.file_size_limit,
                    kind=ViolationKind.SIZE,
                    severity=ViolationSeverity.CRITICAL,
                )
            )
        if lines > limits.file_lines_limit:
            logger.warning("File exceeds line limit", path=path, lines=lines, limit=limits.file_lines_limit)
            result.violations.exceeds_file_lines.append(
                Violation(
                    file=path,
                    actual_value=lines,
                    limit=limits.file_lines_limit,
                    kind=ViolationKind.LINES,
                    severity=ViolationSeverity.WARNING,
                )
            )

    # ── Binary detection ──

    async def is_binary(self, path: str) -> bool:
        if Path(path).suffix.lower() in BINARY_EXTENSIONS:
            return True
        try:
            sample = await asyncio.to_thread(_read_sample, self._workspace / path)
        except OSError as exc:
            logger.debug("Could not read file for binary detection", path=path, error=str(exc))
            return False
        return looks_binary(sample)

    # ── Size chain: filesystem, git object, contents API ──

    async def get_file_size(self, path: str) -> int | None:
        providers: list[MeasureFn] = [self._size_from_filesystem]
        if self._local is not None:
            providers.append(self._local.object_size)
        if self._remote is not None:
            providers.append(self._size_from_api)
        return await first_result(providers, path)

    async def _size_from_filesystem(self, path: str) -> int | None:
        target = self._workspace / path
        if not target.is_file():
            return None
        try:
            return target.stat().st_size
        except OSError as exc:
            logger.debug("Filesystem size unavailable", path=path, error=str(exc))
            return None

    async def _size_from_api(self, path: str) -> int | None:
        return await self._remote.get_file_size(self._pr, path)

    # ── Line chain: wc, streaming scan ──

    async def get_line_count(self, path: str, max_lines: int) -> int | None:
        """Line count capped at ``max_lines``; the scan stops reading once the cap is hit."""

        async def from_wc(p: str) -> int | None:
            if self._local is None:
                return None
            count = await self._local.count_lines(p)
            return None if count is None else min(count, max_lines)

        async def from_scan(p: str) -> int | None:
            target = self._workspace / p
            if not target.is_file():
                return None
            return await asyncio.to_thread(_scan_lines, target, max_lines)

        return await first_result([from_wc, from_scan], path)
