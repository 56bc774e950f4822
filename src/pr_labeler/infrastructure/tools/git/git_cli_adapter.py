import asyncio
from pathlib import Path

import structlog

from pr_labeler.core.application.exceptions import LocalCommandError
from pr_labeler.core.application.ports import LocalRepositoryPort

logger = structlog.get_logger()


class GitCliAdapter(LocalRepositoryPort):
    """git and wc run as subprocesses inside the checked-out workspace."""

    def __init__(self, workspace: Path, timeout: float = 30.0) -> None:
        self._workspace = workspace
        self._timeout = timeout

    async def numstat_diff(self, base_sha: str, head_sha: str) -> str:
        return await self._run(
            ["git", "diff", "--numstat", "-M", "-C", "--diff-filter=ACMR", f"{base_sha}...{head_sha}"]
        )

    async def object_size(self, path: str) -> int | None:
        try:
            output = await self._run(["git", "ls-tree", "-l", "HEAD", "--", path])
        except LocalCommandError as exc:
            logger.debug("git ls-tree failed", path=path, error=str(exc))
            return None
        # <mode> blob <sha> <size>\t<path>
        meta = output.split("\t", 1)[0].split()
        if len(meta) != 4 or meta[1] != "blob" or not meta[3].isdigit():
            return None
        return int(meta[3])

    async def count_lines(self, path: str) -> int | None:
        try:
            output = await self._run(["wc", "-l", path])
        except LocalCommandError as exc:
            logger.debug("wc -l failed", path=path, error=str(exc))
            return None
        fields = output.split()
        if not fields or not fields[0].isdigit():
            return None
        return int(fields[0])

    async def _run(self, command: list[str]) -> str:
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                cwd=self._workspace,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise LocalCommandError(f"Cannot run {command[0]}: {exc}", command=command) from exc

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except TimeoutError as exc:
            proc.kill()
            await proc.wait()
            raise LocalCommandError(f"{command[0]} timed out after {self._timeout}s", command=command) from exc

        if proc.returncode != 0:
            raise LocalCommandError(
                f"{' '.join(command[:2])} exited with {proc.returncode}: {stderr.decode(errors='replace').strip()}",
                command=command,
                returncode=proc.returncode,
            )
        return stdout.decode(errors="replace")
