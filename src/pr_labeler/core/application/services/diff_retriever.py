import re
from typing import Any

import structlog

from pr_labeler.core.application.exceptions import APIError, DiffError, LocalCommandError
from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy
from pr_labeler.core.application.ports import LocalRepositoryPort, RepositoryPort
from pr_labeler.core.domain.diff import ChangedFile, ChangeStatus, DiffResult, DiffStrategy
from pr_labeler.core.domain.pull_request import PullRequestRef

logger = structlog.get_logger()

PER_PAGE = 100
MAX_PAGES = 100

_REMOTE_STATUSES: dict[str, ChangeStatus] = {
    "added": ChangeStatus.ADDED,
    "renamed": ChangeStatus.RENAMED,
    "copied": ChangeStatus.COPIED,
}

_RENAME_BRACES = re.compile(r"\{([^{}]*) => ([^{}]*)\}")


def resolve_renamed_path(path: str) -> str:
    """Destination of a numstat rename entry (`a => b` or `src/{old => new}/x.py`)."""
    if " => " not in path:
        return path
    if _RENAME_BRACES.search(path):
        return _RENAME_BRACES.sub(lambda m: m.group(2), path).replace("//", "/")
    return path.split(" => ", 1)[1]


def _status_from_counts(additions: int, deletions: int) -> ChangeStatus | None:
    if deletions == 0 and additions > 0:
        return ChangeStatus.ADDED
    if additions == 0 and deletions == 0:
        return ChangeStatus.RENAMED
    if additions == 0:
        return None
    return ChangeStatus.MODIFIED


def parse_numstat(output: str) -> list[ChangedFile]:
    """Parse ``git diff --numstat`` output, dropping malformed rows and pure deletions.

    Binary rows (``-\\t-\\tpath``) count as malformed.
    """
    files: list[ChangedFile] = []
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) != 3 or not parts[2].strip():
            continue
        try:
            additions, deletions = int(parts[0]), int(parts[1])
        except ValueError:
            continue
        status = _status_from_counts(additions, deletions)
        if status is None:
            continue
        files.append(ChangedFile(path=resolve_renamed_path(parts[2].strip()), additions=additions, deletions=deletions, status=status))
    return files


def map_remote_file(entry: dict[str, Any]) -> ChangedFile | None:
    raw_status = entry.get("status", "modified")
    if raw_status == "removed":
        return None
    return ChangedFile(
        path=entry["filename"],
        additions=int(entry.get("additions", 0)),
        deletions=int(entry.get("deletions", 0)),
        status=_REMOTE_STATUSES.get(raw_status, ChangeStatus.MODIFIED),
    )


class DiffRetriever:
    """Lists the files a PR adds or changes: local git first, hosting API second."""

    def __init__(
        self,
        remote: RepositoryPort,
        local: LocalRepositoryPort | None = None,
        retry_policy: RateLimitRetryPolicy | None = None,
    ) -> None:
        self._remote = remote
        self._local = local
        self._retry = retry_policy or RateLimitRetryPolicy()

    async def get_diff_files(self, pr: PullRequestRef) -> DiffResult:
        local_error = "local repository unavailable"
        if self._local is not None:
            try:
                files = parse_numstat(await self._local.numstat_diff(pr.base_sha, pr.head_sha))
                logger.info("Diff retrieved from local git", files=len(files))
                return DiffResult(files=files, strategy=DiffStrategy.LOCAL_GIT)
            except LocalCommandError as exc:
                local_error = str(exc)
                logger.warning("Local diff failed, falling back to API", error=local_error)

        try:
            files = await self._fetch_remote(pr)
        except APIError as exc:
            raise DiffError(
                f"Local git: {local_error}; GitHub API: {exc}",
                source="both",
                context={"pr_number": pr.number},
            ) from exc
        logger.info("Diff retrieved from GitHub API", files=len(files))
        return DiffResult(files=files, strategy=DiffStrategy.GITHUB_API)

    async def _fetch_remote(self, pr: PullRequestRef) -> list[ChangedFile]:
        files: list[ChangedFile] = []
        for page in range(1, MAX_PAGES + 1):
            entries = await self._retry.run(lambda: self._remote.list_pull_request_files(pr, page, PER_PAGE))
            if not entries:
                return files
            files.extend(changed for entry in entries if (changed := map_remote_file(entry)) is not None)
        logger.warning("PR file listing truncated", max_pages=MAX_PAGES, files=len(files))
        return files
