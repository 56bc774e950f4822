"""Labeling pipeline: Diff -> Metrics -> Complexity -> Context -> Decide -> Apply."""

import asyncio
from dataclasses import dataclass, field

import structlog
from structlog.contextvars import bind_contextvars

from pr_labeler.core.application.exceptions import APIError, ComplexityAnalysisError, LabelPermissionError
from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy
from pr_labeler.core.application.ports import RepositoryPort
from pr_labeler.core.application.services.ci_status_evaluator import evaluate_ci_status
from pr_labeler.core.application.services.complexity_analyzer import ComplexityAnalyzer, select_targets
from pr_labeler.core.application.services.diff_retriever import DiffRetriever
from pr_labeler.core.application.services.failure_evaluator import evaluate_failures
from pr_labeler.core.application.services.file_metrics_extractor import FileMetricsExtractor
from pr_labeler.core.application.services.label_applicator import LabelApplicator
from pr_labeler.core.application.services.label_decision_engine import decide_labels
from pr_labeler.core.application.workflows.base_workflow import BaseWorkflow
from pr_labeler.core.domain.complexity import AnalysisOptions, ComplexityMetrics
from pr_labeler.core.domain.config import LabelerConfig
from pr_labeler.core.domain.diff import DiffResult
from pr_labeler.core.domain.labels import LabelDecisions, LabelUpdate
from pr_labeler.core.domain.metrics import AnalysisResult, FileLimits
from pr_labeler.core.domain.pull_request import PRContext, PRMetrics, PullRequestRef

logger = structlog.get_logger()


@dataclass(frozen=True, kw_only=True)
class LabelingReport:
    diff: DiffResult
    analysis: AnalysisResult
    complexity: ComplexityMetrics | None
    context: PRContext | None
    decisions: LabelDecisions
    update: LabelUpdate | None
    failures: list[str] = field(default_factory=list)
    dry_run: bool = False


class PrLabelingWorkflow(BaseWorkflow):
    def __init__(
        self,
        diff_retriever: DiffRetriever,
        metrics_extractor: FileMetricsExtractor,
        complexity_analyzer: ComplexityAnalyzer,
        applicator: LabelApplicator,
        remote: RepositoryPort,
        config: LabelerConfig,
        limits: FileLimits,
        analysis_options: AnalysisOptions | None = None,
        retry_policy: RateLimitRetryPolicy | None = None,
    ) -> None:
        self._diff_retriever = diff_retriever
        self._metrics_extractor = metrics_extractor
        self._complexity_analyzer = complexity_analyzer
        self._applicator = applicator
        self._remote = remote
        self._config = config
        self._limits = limits
        self._analysis_options = analysis_options or AnalysisOptions()
        self._retry = retry_policy or RateLimitRetryPolicy()

    async def execute(self, pr: PullRequestRef) -> LabelingReport:
        bind_contextvars(repository=pr.full_name, pr_number=pr.number, event_type="workflow.pr_labeling")
        logger.info("PR labeling workflow started", head_sha=pr.head_sha)

        diff = await self._diff_retriever.get_diff_files(pr)
        analysis = await self._metrics_extractor.analyze_files(diff.files, self._limits)
        complexity = await self._step_complexity(analysis)
        context = await self._step_context(pr)

        metrics = PRMetrics(
            total_additions=analysis.total_additions,
            files=analysis.files_analyzed,
            all_files=[f.path for f in diff.files],
            complexity=complexity,
            violations=analysis.violations,
        )
        decisions = decide_labels(metrics, self._config, context)
        logger.info("Labels decided", labels=decisions.labels_to_add, replace=decisions.labels_to_remove)
        failures = evaluate_failures(analysis.violations, analysis.total_additions, decisions.labels_to_add, self._config)
        if failures:
            logger.warning("Failure conditions met", failures=failures)

        update = await self._step_apply(pr, decisions)
        logger.info("PR labeling workflow completed", dry_run=self._config.runtime.dry_run)
        return LabelingReport(
            diff=diff,
            analysis=analysis,
            complexity=complexity,
            context=context,
            decisions=decisions,
            update=update,
            failures=failures,
            dry_run=self._config.runtime.dry_run,
        )

    # ── Steps ─────────────────────────────────────────────────────────

    async def _step_complexity(self, analysis: AnalysisResult) -> ComplexityMetrics | None:
        if not self._config.complexity.enabled:
            return None
        targets = select_targets([f.path for f in analysis.files_analyzed], self._analysis_options)
        if not targets:
            logger.info("No files eligible for complexity analysis")
            return None
        try:
            return await self._complexity_analyzer.analyze_files(
                targets,
                self._analysis_options,
                total_pr_files=analysis.total_files,
                truncated=analysis.violations.exceeds_file_count,
            )
        except ComplexityAnalysisError as exc:
            if self._config.runtime.fail_on_error:
                raise
            logger.warning("Complexity metrics unavailable", reason=exc.reason, error=str(exc))
            return None

    async def _step_context(self, pr: PullRequestRef) -> PRContext | None:
        if not (self._config.risk.enabled and self._config.risk.use_ci_status):
            return None
        try:
            check_runs, subjects = await asyncio.gather(
                self._retry.run(lambda: self._remote.list_check_runs(pr)),
                self._retry.run(lambda: self._remote.list_commit_subjects(pr)),
            )
        except APIError as exc:
            logger.warning("CI context unavailable, using file-based risk rules", error=str(exc))
            return None
        return PRContext(ci_status=evaluate_ci_status(check_runs), commit_subjects=subjects)

    async def _step_apply(self, pr: PullRequestRef, decisions: LabelDecisions) -> LabelUpdate | None:
        if self._config.runtime.dry_run:
            logger.info("Dry run, labels not applied", labels=decisions.labels_to_add)
            return None
        try:
            update = await self._applicator.apply_labels(pr, decisions, self._config.labels)
        except LabelPermissionError as exc:
            logger.warning("Labels could not be applied", error=str(exc), skipped=exc.update.skipped)
            return exc.update
        except APIError as exc:
            if self._config.runtime.fail_on_error:
                raise
            logger.error("Label application failed", status=exc.status, error=str(exc))
            return None
        logger.info(
            "Labels applied",
            added=update.added,
            removed=update.removed,
            skipped=update.skipped,
            api_calls=update.api_call_count,
        )
        return update
