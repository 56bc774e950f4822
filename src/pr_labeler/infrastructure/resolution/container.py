"""Wires settings, adapters and services into a ready labeling workflow."""

from dataclasses import dataclass
from pathlib import Path

from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy
from pr_labeler.core.application.services import (
    ComplexityAnalyzer,
    DiffRetriever,
    FileMetricsExtractor,
    LabelApplicator,
)
from pr_labeler.core.application.workflows import PrLabelingWorkflow
from pr_labeler.core.domain.complexity import AnalysisOptions
from pr_labeler.core.domain.config import LabelerConfig
from pr_labeler.core.domain.metrics import FileLimits
from pr_labeler.core.domain.pull_request import PullRequestRef
from pr_labeler.infrastructure.configuration.labeler_config_loader import apply_overrides, load_labeler_config
from pr_labeler.infrastructure.configuration.labeler_settings import LabelerSettings
from pr_labeler.infrastructure.tools.git import GitCliAdapter
from pr_labeler.infrastructure.tools.vcs.github import GitHubHttpClient, GitHubRestAdapter


@dataclass(frozen=True, kw_only=True)
class LabelerRuntime:
    pr: PullRequestRef
    config: LabelerConfig
    workflow: PrLabelingWorkflow
    http_client: GitHubHttpClient


def load_config(settings: LabelerSettings) -> LabelerConfig:
    config_path = Path(settings.labeler_config_path)
    if not config_path.is_absolute():
        config_path = settings.github_workspace / config_path
    return apply_overrides(
        load_labeler_config(config_path),
        size_enabled=settings.size_enabled,
        complexity_enabled=settings.complexity_enabled,
        category_enabled=settings.category_enabled,
        risk_enabled=settings.risk_enabled,
        dry_run=settings.dry_run,
        fail_on_error=settings.fail_on_error,
        violations_enabled=settings.auto_labels_enabled,
        fail_on_large_files=settings.fail_on_large_files,
        fail_on_too_many_files=settings.fail_on_too_many_files,
        fail_on_pr_size=settings.fail_on_pr_size,
    )


def analysis_options(config: LabelerConfig) -> AnalysisOptions:
    defaults = AnalysisOptions()
    return AnalysisOptions(
        extensions=config.complexity.extensions or defaults.extensions,
        exclude=config.complexity.exclude if config.complexity.exclude is not None else defaults.exclude,
    )


def file_limits(settings: LabelerSettings, config: LabelerConfig) -> FileLimits:
    limits = settings.file_limits()
    return FileLimits(
        file_size_limit=limits.file_size_limit,
        file_lines_limit=limits.file_lines_limit,
        max_added_lines=limits.max_added_lines,
        max_file_count=limits.max_file_count,
        exclude_patterns=[*config.exclude.additional, *limits.exclude_patterns],
    )


def build_runtime(settings: LabelerSettings) -> LabelerRuntime:
    settings.validate_github_credentials()
    pr = settings.pull_request()
    config = load_config(settings)
    workspace = settings.github_workspace
    limits = file_limits(settings, config)

    http_client = GitHubHttpClient(settings)
    remote = GitHubRestAdapter(http_client)
    local = GitCliAdapter(workspace)
    retry_policy = RateLimitRetryPolicy()

    workflow = PrLabelingWorkflow(
        diff_retriever=DiffRetriever(remote, local, retry_policy),
        metrics_extractor=FileMetricsExtractor(workspace, pr, remote=remote, local=local),
        complexity_analyzer=ComplexityAnalyzer(workspace),
        applicator=LabelApplicator(remote, retry_policy),
        remote=remote,
        config=config,
        limits=limits,
        analysis_options=analysis_options(config),
        retry_policy=retry_policy,
    )
    return LabelerRuntime(pr=pr, config=config, workflow=workflow, http_client=http_client)
