import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from pr_labeler.core.application.exceptions import ConfigurationError
from pr_labeler.infrastructure.configuration import LabelerSettings

_ENV_NAMES = (
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_WORKSPACE",
    "PR_NUMBER",
    "BASE_SHA",
    "HEAD_SHA",
    "FILE_SIZE_LIMIT",
    "FILE_LINES_LIMIT",
    "PR_ADDITIONS_LIMIT",
    "PR_FILES_LIMIT",
    "ADDITIONAL_EXCLUDE_PATTERNS",
    "LABELER_CONFIG_PATH",
    "SIZE_ENABLED",
    "COMPLEXITY_ENABLED",
    "CATEGORY_ENABLED",
    "RISK_ENABLED",
    "DRY_RUN",
    "FAIL_ON_ERROR",
    "AUTO_LABELS_ENABLED",
    "FAIL_ON_LARGE_FILES",
    "FAIL_ON_TOO_MANY_FILES",
    "FAIL_ON_PR_SIZE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def _settings(**values: object) -> LabelerSettings:
    return LabelerSettings(_env_file=None, **values)


class TestFromEnvironment:
    def test_defaults(self) -> None:
        settings = _settings()

        assert settings.github_api_url == "https://api.github.com"
        assert settings.file_size_limit == "100KB"
        assert settings.file_lines_limit == 500
        assert settings.pr_additions_limit == 5000
        assert settings.pr_files_limit == 50
        assert settings.additional_exclude_patterns == []
        assert settings.labeler_config_path == ".github/pr-labeler.yml"
        assert settings.dry_run is None

    def test_reads_aliased_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "ghs_secret")
        monkeypatch.setenv("GITHUB_REPOSITORY", "acme/widgets")
        monkeypatch.setenv("FILE_LINES_LIMIT", "800")
        monkeypatch.setenv("DRY_RUN", "true")
        monkeypatch.setenv("RISK_ENABLED", "false")

        settings = _settings()

        assert settings.github_token is not None
        assert settings.github_token.get_secret_value() == "ghs_secret"
        assert settings.github_repository == "acme/widgets"
        assert settings.file_lines_limit == 800
        assert settings.dry_run is True
        assert settings.risk_enabled is False

    def test_exclude_patterns_split_on_commas_and_newlines(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADDITIONAL_EXCLUDE_PATTERNS", "gen/**, *.snap\nfixtures/**\n")

        assert _settings().additional_exclude_patterns == ["gen/**", "*.snap", "fixtures/**"]

    def test_failure_policy_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTO_LABELS_ENABLED", "false")
        monkeypatch.setenv("FAIL_ON_LARGE_FILES", "true")
        monkeypatch.setenv("FAIL_ON_PR_SIZE", "xlarge")

        settings = _settings()

        assert settings.auto_labels_enabled is False
        assert settings.fail_on_large_files is True
        assert settings.fail_on_too_many_files is None
        assert settings.fail_on_pr_size == "xlarge"

    def test_unknown_pr_size_threshold_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAIL_ON_PR_SIZE", "huge")

        with pytest.raises(ValidationError):
            _settings()

    def test_empty_values_fall_back_to_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILE_SIZE_LIMIT", "")

        assert _settings().file_size_limit == "100KB"


class TestCredentials:
    def test_missing_token(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(GITHUB_REPOSITORY="acme/widgets").validate_github_credentials()
        assert exc_info.value.field == "github_token"

    @pytest.mark.parametrize("repository", ["", "acme", "acme/widgets/extra"])
    def test_malformed_repository(self, repository: str) -> None:
        settings = _settings(GITHUB_TOKEN="t", GITHUB_REPOSITORY=repository)

        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate_github_credentials()
        assert exc_info.value.field == "github_repository"

    def test_valid_credentials(self) -> None:
        _settings(GITHUB_TOKEN="t", GITHUB_REPOSITORY="acme/widgets").validate_github_credentials()


class TestDerivedValues:
    def test_file_limits(self) -> None:
        settings = _settings(FILE_SIZE_LIMIT="1MB", PR_FILES_LIMIT=10, ADDITIONAL_EXCLUDE_PATTERNS="a/**,b/**")

        limits = settings.file_limits()

        assert limits.file_size_limit == 1048576
        assert limits.max_file_count == 10
        assert limits.max_added_lines == 5000
        assert limits.exclude_patterns == ["a/**", "b/**"]

    def test_pull_request_from_variables(self) -> None:
        settings = _settings(GITHUB_REPOSITORY="acme/widgets", PR_NUMBER=7, BASE_SHA="b", HEAD_SHA="h")

        pr = settings.pull_request()

        assert (pr.owner, pr.repo, pr.number, pr.base_sha, pr.head_sha) == ("acme", "widgets", 7, "b", "h")

    def test_pull_request_from_event_payload(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text(
            json.dumps({"pull_request": {"number": 12, "base": {"sha": "aaa"}, "head": {"sha": "bbb"}}})
        )
        settings = _settings(GITHUB_REPOSITORY="acme/widgets", GITHUB_EVENT_PATH=str(event))

        pr = settings.pull_request()

        assert pr.number == 12
        assert pr.base_sha == "aaa"
        assert pr.head_sha == "bbb"

    def test_explicit_variables_win_over_event(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"pull_request": {"number": 12, "base": {"sha": "aaa"}, "head": {"sha": "bbb"}}}))
        settings = _settings(GITHUB_REPOSITORY="acme/widgets", GITHUB_EVENT_PATH=str(event), HEAD_SHA="override")

        assert settings.pull_request().head_sha == "override"

    def test_missing_pull_request_coordinates(self) -> None:
        with pytest.raises(ConfigurationError, match="PR_NUMBER"):
            _settings(GITHUB_REPOSITORY="acme/widgets").pull_request()

    def test_unreadable_event_payload(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            _settings(GITHUB_REPOSITORY="acme/widgets", GITHUB_EVENT_PATH=str(event)).pull_request()
        assert exc_info.value.field == "github_event_path"
