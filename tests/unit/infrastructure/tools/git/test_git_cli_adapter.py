import shutil
import subprocess
from pathlib import Path

import pytest

from pr_labeler.core.application.exceptions import LocalCommandError
from pr_labeler.infrastructure.tools.git import GitCliAdapter

pytestmark = pytest.mark.skipif(
    shutil.which("git") is None or shutil.which("wc") is None, reason="git and wc are required"
)


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-c", "user.name=Labeler Tests", "-c", "user.email=tests@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture()
def repo(tmp_path: Path) -> tuple[Path, str, str]:
    """Two commits: the second edits a.txt and adds b.py."""
    _git(tmp_path, "init", "-q")
    (tmp_path / "a.txt").write_text("one\ntwo\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-q", "-m", "base")
    base = _git(tmp_path, "rev-parse", "HEAD")

    (tmp_path / "a.txt").write_text("one\ntwo\nthree\n")
    (tmp_path / "b.py").write_text("x = 1\ny = 2\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-q", "-m", "head")
    head = _git(tmp_path, "rev-parse", "HEAD")
    return tmp_path, base, head


class TestGitCliAdapter:
    @pytest.mark.asyncio
    async def test_numstat_diff(self, repo: tuple[Path, str, str]) -> None:
        path, base, head = repo

        output = await GitCliAdapter(path).numstat_diff(base, head)

        rows = sorted(line.split("\t") for line in output.splitlines())
        assert rows == [["1", "0", "a.txt"], ["2", "0", "b.py"]]

    @pytest.mark.asyncio
    async def test_unknown_revision_raises(self, repo: tuple[Path, str, str]) -> None:
        path, _, head = repo

        with pytest.raises(LocalCommandError) as exc_info:
            await GitCliAdapter(path).numstat_diff("0" * 40, head)

        assert exc_info.value.returncode not in (None, 0)
        assert exc_info.value.command[:2] == ["git", "diff"]

    @pytest.mark.asyncio
    async def test_object_size(self, repo: tuple[Path, str, str]) -> None:
        path, _, _ = repo
        adapter = GitCliAdapter(path)

        assert await adapter.object_size("b.py") == len("x = 1\ny = 2\n")
        assert await adapter.object_size("missing.py") is None

    @pytest.mark.asyncio
    async def test_count_lines(self, repo: tuple[Path, str, str]) -> None:
        path, _, _ = repo
        adapter = GitCliAdapter(path)

        assert await adapter.count_lines("a.txt") == 3
        assert await adapter.count_lines("missing.txt") is None

    @pytest.mark.asyncio
    async def test_missing_workspace(self, tmp_path: Path) -> None:
        with pytest.raises(LocalCommandError, match="Cannot run git"):
            await GitCliAdapter(tmp_path / "nope").numstat_diff("a", "b")
