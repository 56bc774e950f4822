import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from pr_labeler.core.application.exceptions import ConfigurationError
from pr_labeler.core.domain.metrics import FileLimits
from pr_labeler.core.domain.pull_request import PullRequestRef
from pr_labeler.infrastructure.configuration.size_parser import parse_size


class LabelerSettings(BaseSettings):
    """Runtime settings read from the environment (GitHub Actions conventions)."""

    # ── GitHub ──
    github_token: SecretStr | None = Field(default=None, alias="GITHUB_TOKEN")
    github_repository: str = Field(default="", alias="GITHUB_REPOSITORY")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    github_event_path: Path | None = Field(default=None, alias="GITHUB_EVENT_PATH")
    github_workspace: Path = Field(default=Path("."), alias="GITHUB_WORKSPACE")

    # ── Pull request ──
    pr_number: int | None = Field(default=None, alias="PR_NUMBER")
    base_sha: str = Field(default="", alias="BASE_SHA")
    head_sha: str = Field(default="", alias="HEAD_SHA")

    # ── Limits ──
    file_size_limit: str = Field(default="100KB", alias="FILE_SIZE_LIMIT")
    file_lines_limit: int = Field(default=500, ge=0, alias="FILE_LINES_LIMIT")
    pr_additions_limit: int = Field(default=5000, ge=0, alias="PR_ADDITIONS_LIMIT")
    pr_files_limit: int = Field(default=50, ge=1, alias="PR_FILES_LIMIT")
    additional_exclude_patterns: Annotated[list[str], NoDecode] = Field(
        default_factory=list, alias="ADDITIONAL_EXCLUDE_PATTERNS"
    )

    # ── Labeling ──
    labeler_config_path: str = Field(default=".github/pr-labeler.yml", alias="LABELER_CONFIG_PATH")
    size_enabled: bool | None = Field(default=None, alias="SIZE_ENABLED")
    complexity_enabled: bool | None = Field(default=None, alias="COMPLEXITY_ENABLED")
    category_enabled: bool | None = Field(default=None, alias="CATEGORY_ENABLED")
    risk_enabled: bool | None = Field(default=None, alias="RISK_ENABLED")
    dry_run: bool | None = Field(default=None, alias="DRY_RUN")
    fail_on_error: bool | None = Field(default=None, alias="FAIL_ON_ERROR")

    # ── Limit violations ──
    auto_labels_enabled: bool | None = Field(default=None, alias="AUTO_LABELS_ENABLED")
    fail_on_large_files: bool | None = Field(default=None, alias="FAIL_ON_LARGE_FILES")
    fail_on_too_many_files: bool | None = Field(default=None, alias="FAIL_ON_TOO_MANY_FILES")
    fail_on_pr_size: Literal["small", "medium", "large", "xlarge", "xxlarge"] | None = Field(
        default=None, alias="FAIL_ON_PR_SIZE"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_ignore_empty=True, populate_by_name=True)

    @field_validator("additional_exclude_patterns", mode="before")
    @classmethod
    def split_patterns(cls, value: object) -> list[str]:
        """Accept comma or newline separated globs."""
        if isinstance(value, str):
            return [p.strip() for p in value.replace("\n", ",").split(",") if p.strip()]
        if isinstance(value, list):
            return value
        return []

    def validate_github_credentials(self) -> None:
        if self.github_token is None or not self.github_token.get_secret_value():
            raise ConfigurationError("GITHUB_TOKEN is required.", field="github_token")
        if self.github_repository.count("/") != 1:
            raise ConfigurationError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', got {self.github_repository!r}.",
                field="github_repository",
            )

    def file_limits(self) -> FileLimits:
        return FileLimits(
            file_size_limit=parse_size(self.file_size_limit),
            file_lines_limit=self.file_lines_limit,
            max_added_lines=self.pr_additions_limit,
            max_file_count=self.pr_files_limit,
            exclude_patterns=list(self.additional_exclude_patterns),
        )

    def pull_request(self) -> PullRequestRef:
        """PR coordinates from explicit variables, falling back to the Actions event payload."""
        event = self._load_event()
        pull = event.get("pull_request") or {}
        number = self.pr_number or pull.get("number") or event.get("number")
        base_sha = self.base_sha or (pull.get("base") or {}).get("sha", "")
        head_sha = self.head_sha or (pull.get("head") or {}).get("sha", "")
        if not number or not base_sha or not head_sha:
            raise ConfigurationError(
                "Pull request number, base and head SHA are required (PR_NUMBER, BASE_SHA, HEAD_SHA).",
                field="pr_number",
            )
        owner, repo = self.github_repository.split("/", 1)
        return PullRequestRef(owner=owner, repo=repo, number=int(number), base_sha=base_sha, head_sha=head_sha)

    def _load_event(self) -> dict[str, Any]:
        if self.github_event_path is None or not self.github_event_path.is_file():
            return {}
        try:
            return json.loads(self.github_event_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Unreadable GitHub event payload: {exc}", field="github_event_path") from exc
