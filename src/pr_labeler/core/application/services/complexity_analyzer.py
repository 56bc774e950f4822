import asyncio
import math
import time
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

import structlog
from radon.complexity import cc_visit
from radon.visitors import Function

from pr_labeler.core.application.exceptions import ComplexityAnalysisError
from pr_labeler.core.application.services.pattern_matcher import matches_any
from pr_labeler.core.domain.complexity import (
    AnalysisOptions,
    ComplexityMetrics,
    FileComplexity,
    FunctionComplexity,
    SkippedFile,
    SkipReason,
)

logger = structlog.get_logger()

MAX_CONCURRENCY = 8
SLOW_BATCH_SECONDS = 10.0
CONFIG_CONTEXT_FILES = ("pyproject.toml", "setup.cfg")


def select_targets(paths: Iterable[str], options: AnalysisOptions) -> list[str]:
    """Paths with an analyzable extension that match no complexity exclude."""
    extensions = tuple(ext.lower() for ext in options.extensions)
    return [
        path
        for path in paths
        if path.lower().endswith(extensions) and not matches_any(path, options.exclude, match_base=True)
    ]


def measure_source(path: str, source: str) -> FileComplexity:
    try:
        blocks = cc_visit(source)
    except SyntaxError:
        return FileComplexity(path=path, complexity=0, is_syntax_error=True)
    functions = [
        FunctionComplexity(name=block.fullname, complexity=block.complexity, loc_range=(block.lineno, block.endline))
        for block in blocks
        if isinstance(block, Function)
    ]
    return FileComplexity(path=path, complexity=sum(f.complexity for f in functions), functions=functions)


def aggregate_metrics(results: list[FileComplexity]) -> ComplexityMetrics | None:
    """Max and one-decimal mean over analyzed files; None when nothing was analyzed."""
    analyzed = [r for r in results if r.complexity >= 0]
    if not analyzed:
        return None
    values = [r.complexity for r in analyzed]
    return ComplexityMetrics(
        max_complexity=max(values),
        avg_complexity=math.floor(sum(values) / len(values) * 10 + 0.5) / 10,
        analyzed_files=len(analyzed),
        files=analyzed,
        syntax_error_files=[r.path for r in analyzed if r.is_syntax_error],
    )


class ComplexityAnalyzer:
    """Cyclomatic complexity of Python sources via radon, bounded by a semaphore."""

    def __init__(self, workspace: Path) -> None:
        self._workspace = workspace

    async def analyze_files(
        self,
        paths: list[str],
        options: AnalysisOptions | None = None,
        *,
        total_pr_files: int | None = None,
        truncated: bool = False,
    ) -> ComplexityMetrics:
        options = options or AnalysisOptions()
        semaphore = asyncio.Semaphore(max(1, min(options.concurrency, MAX_CONCURRENCY)))

        async def bounded(path: str) -> FileComplexity | SkippedFile:
            async with semaphore:
                return await self.analyze_file(path, options)

        started = time.monotonic()
        outcomes = await self._run_batch({path: asyncio.create_task(bounded(path)) for path in paths}, options)
        elapsed = time.monotonic() - started
        if elapsed > SLOW_BATCH_SECONDS:
            logger.warning("Complexity analysis was slow", seconds=round(elapsed, 2), files=len(paths))

        results = [o for o in outcomes if isinstance(o, FileComplexity)]
        skipped = [o for o in outcomes if isinstance(o, SkippedFile)]
        for entry in skipped:
            logger.info("Complexity skipped file", path=entry.path, reason=str(entry.reason), details=entry.details)

        metrics = aggregate_metrics(results)
        if metrics is None:
            raise ComplexityAnalysisError(
                "No file could be analyzed for complexity",
                reason=SkipReason.GENERAL,
                context={"requested": len(paths), "skipped": len(skipped)},
            )
        logger.info(
            "Complexity analysis complete",
            analyzed=metrics.analyzed_files,
            skipped=len(skipped),
            max_complexity=metrics.max_complexity,
            avg_complexity=metrics.avg_complexity,
        )
        return replace(
            metrics,
            skipped_files=skipped,
            truncated=truncated,
            total_pr_files=total_pr_files,
            has_config_context=self._has_config_context(),
        )

    async def _run_batch(
        self, tasks: dict[str, asyncio.Task], options: AnalysisOptions
    ) -> list[FileComplexity | SkippedFile]:
        """Wait up to ``options.timeout``; files still running are cancelled and skipped as timeouts."""
        if not tasks:
            return []
        _, pending = await asyncio.wait(tasks.values(), timeout=options.timeout)
        if pending:
            logger.warning("Complexity batch deadline reached", seconds=options.timeout, unfinished=len(pending))
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        outcomes: list[FileComplexity | SkippedFile] = []
        for path, task in tasks.items():
            if task in pending:
                outcomes.append(
                    SkippedFile(path=path, reason=SkipReason.TIMEOUT, details=f"batch exceeded {options.timeout}s")
                )
            else:
                outcomes.append(task.result())
        return outcomes

    async def analyze_file(self, path: str, options: AnalysisOptions) -> FileComplexity | SkippedFile:
        target = self._workspace / path
        try:
            size = target.stat().st_size
            if size > options.max_file_size:
                return SkippedFile(path=path, reason=SkipReason.TOO_LARGE, details=f"{size} bytes")
            raw = await asyncio.to_thread(target.read_bytes)
        except OSError as exc:
            return SkippedFile(path=path, reason=SkipReason.ANALYSIS_FAILED, details=str(exc))

        if b"\x00" in raw:
            return SkippedFile(path=path, reason=SkipReason.BINARY)
        try:
            source = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            return SkippedFile(path=path, reason=SkipReason.ENCODING_ERROR, details=str(exc))

        try:
            result = await asyncio.wait_for(asyncio.to_thread(measure_source, path, source), timeout=options.file_timeout)
        except TimeoutError:
            return SkippedFile(path=path, reason=SkipReason.TIMEOUT, details=f"exceeded {options.file_timeout}s")
        except Exception as exc:
            logger.warning("Complexity analysis failed", path=path, error=str(exc))
            return SkippedFile(path=path, reason=SkipReason.ANALYSIS_FAILED, details=str(exc))

        if result.is_syntax_error:
            logger.info("Syntax error, counted as complexity 0", path=path)
        return result

    def _has_config_context(self) -> bool:
        return any((self._workspace / name).is_file() for name in CONFIG_CONTEXT_FILES)
