from typing import Any
from urllib.parse import quote

import httpx
import structlog

from pr_labeler.core.application.exceptions import APIError
from pr_labeler.core.application.ports import RepositoryPort
from pr_labeler.core.domain.pull_request import PullRequestRef
from pr_labeler.infrastructure.observability.redaction_service import redact_text
from pr_labeler.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient

logger = structlog.get_logger()

PAGE_SIZE = 100
MAX_CONTEXT_PAGES = 10


def is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == 429:
        return True
    if response.status_code != 403:
        return False
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    text = response.text.lower()
    return "rate limit" in text or "abuse" in text


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    message = payload.get("message", "") if isinstance(payload, dict) else response.text
    return redact_text(message or response.reason_phrase)


class GitHubRestAdapter(RepositoryPort):
    def __init__(self, client: GitHubHttpClient) -> None:
        self._client = client

    # ── Diff & content ──

    async def list_pull_request_files(self, pr: PullRequestRef, page: int, per_page: int = PAGE_SIZE) -> list[dict[str, Any]]:
        response = await self._request(
            "GET", f"{self._repo(pr)}/pulls/{pr.number}/files", params={"per_page": per_page, "page": page}
        )
        return response.json()

    async def get_file_size(self, pr: PullRequestRef, path: str) -> int | None:
        response = await self._request(
            "GET", f"{self._repo(pr)}/contents/{quote(path)}", params={"ref": pr.head_sha}, allow=(404,)
        )
        if response.status_code == 404:
            return None
        payload = response.json()
        if not isinstance(payload, dict) or payload.get("type") != "file":
            return None
        return int(payload["size"])

    # ── Labels ──

    async def list_labels(self, pr: PullRequestRef) -> list[str]:
        labels: list[str] = []
        for page in range(1, MAX_CONTEXT_PAGES + 1):
            response = await self._request(
                "GET", f"{self._repo(pr)}/issues/{pr.number}/labels", params={"per_page": PAGE_SIZE, "page": page}
            )
            batch = response.json()
            labels.extend(item["name"] for item in batch)
            if len(batch) < PAGE_SIZE:
                break
        return labels

    async def add_labels(self, pr: PullRequestRef, labels: list[str]) -> None:
        await self._request("POST", f"{self._repo(pr)}/issues/{pr.number}/labels", json_data={"labels": labels})

    async def remove_label(self, pr: PullRequestRef, label: str) -> None:
        await self._request("DELETE", f"{self._repo(pr)}/issues/{pr.number}/labels/{quote(label, safe='')}")

    # ── Context ──

    async def list_check_runs(self, pr: PullRequestRef) -> list[dict[str, Any]]:
        runs: list[dict[str, Any]] = []
        for page in range(1, MAX_CONTEXT_PAGES + 1):
            response = await self._request(
                "GET",
                f"{self._repo(pr)}/commits/{pr.head_sha}/check-runs",
                params={"per_page": PAGE_SIZE, "page": page},
            )
            batch = response.json().get("check_runs", [])
            runs.extend({"name": r.get("name"), "status": r.get("status"), "conclusion": r.get("conclusion")} for r in batch)
            if len(batch) < PAGE_SIZE:
                break
        return runs

    async def list_commit_subjects(self, pr: PullRequestRef) -> list[str]:
        subjects: list[str] = []
        for page in range(1, MAX_CONTEXT_PAGES + 1):
            response = await self._request(
                "GET", f"{self._repo(pr)}/pulls/{pr.number}/commits", params={"per_page": PAGE_SIZE, "page": page}
            )
            batch = response.json()
            for commit in batch:
                message = (commit.get("commit") or {}).get("message", "")
                subject = message.split("\n", 1)[0].strip()
                if subject:
                    subjects.append(subject)
            if len(batch) < PAGE_SIZE:
                break
        return subjects

    # ── Internals ──

    @staticmethod
    def _repo(pr: PullRequestRef) -> str:
        return f"/repos/{pr.owner}/{pr.repo}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        allow: tuple[int, ...] = (),
    ) -> httpx.Response:
        try:
            if method == "GET":
                response = await self._client.get(path, params=params)
            elif method == "POST":
                response = await self._client.post(path, json_data or {})
            else:
                response = await self._client.delete(path)
        except httpx.HTTPError as exc:
            raise APIError(f"{method} {path} failed: {redact_text(str(exc))}", context={"path": path}) from exc

        if response.is_success or response.status_code in allow:
            return response
        rate_limited = is_rate_limited(response)
        logger.debug("GitHub API error", method=method, path=path, status=response.status_code, rate_limited=rate_limited)
        raise APIError(
            f"{method} {path} returned {response.status_code}: {_error_message(response)}",
            status=response.status_code,
            rate_limited=rate_limited,
            context={"path": path},
        )
