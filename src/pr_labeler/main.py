import asyncio
import sys

from pydantic import ValidationError

from pr_labeler.core.application.exceptions import LabelerError
from pr_labeler.core.application.workflows import LabelingReport
from pr_labeler.infrastructure.configuration import LabelerSettings
from pr_labeler.infrastructure.observability import configure_logging, get_logger
from pr_labeler.infrastructure.resolution import build_runtime


async def _label(settings: LabelerSettings) -> LabelingReport:
    runtime = build_runtime(settings)
    try:
        return await runtime.workflow.execute(runtime.pr)
    finally:
        await runtime.http_client.aclose()


def run() -> None:
    """Console entry point: label the pull request described by the environment."""
    configure_logging()
    logger = get_logger("cli")
    try:
        settings = LabelerSettings()
    except ValidationError as exc:
        logger.error("Invalid labeler settings", error=str(exc))
        sys.exit(1)
    try:
        report = asyncio.run(_label(settings))
    except LabelerError as exc:
        logger.error("PR labeling failed", error_type=type(exc).__name__, error=str(exc), **exc.context)
        sys.exit(1)
    logger.info(
        "PR labeling finished",
        labels=report.decisions.labels_to_add,
        dry_run=report.dry_run,
        violations=report.analysis.violations.has_any,
    )
    if report.failures:
        logger.error("PR failed labeling policy", failures=report.failures)
        sys.exit(1)


if __name__ == "__main__":
    run()
