from typing import Any

import httpx

from pr_labeler.infrastructure.configuration.labeler_settings import LabelerSettings

API_VERSION = "2022-11-28"


class GitHubHttpClient:
    """Thin async wrapper around one ``httpx.AsyncClient`` with GitHub auth headers."""

    def __init__(self, settings: LabelerSettings, timeout: float = 20.0) -> None:
        settings.validate_github_credentials()
        self.base_url = settings.github_api_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, headers=self._headers(settings), timeout=timeout)

    @staticmethod
    def _headers(settings: LabelerSettings) -> dict[str, str]:
        token = settings.github_token.get_secret_value() if settings.github_token else ""
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "pr-labeler",
        }

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        return await self._client.get(path, params=params)

    async def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        return await self._client.post(path, json=json_data)

    async def delete(self, path: str) -> httpx.Response:
        return await self._client.delete(path)

    async def aclose(self) -> None:
        await self._client.aclose()
