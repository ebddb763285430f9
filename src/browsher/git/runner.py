"""Process execution for read-only git queries."""

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Sequence

import structlog

from browsher.core.exceptions import GitNotAvailableError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Captured outcome of a single git invocation."""

    returncode: int
    stdout_lines: list[str] = field(default_factory=list)
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def first_line(self) -> str:
        """First stdout line, or an empty string when there is no output."""
        return self.stdout_lines[0] if self.stdout_lines else ""


class GitRunner(Protocol):
    """Runs ``git <args>`` and captures the result.

    Arguments are always passed as a discrete list, never through a shell.
    """

    def __call__(
        self, args: Sequence[str], cwd: str | Path | None = None
    ) -> GitResult: ...


def ensure_git_available() -> str:
    """Return the path of the git executable or raise if it is missing."""
    path = shutil.which("git")
    if path is None:
        raise GitNotAvailableError(
            "Git is not installed or not in PATH. browsher will not function."
        )
    return path


class SubprocessGitRunner:
    """Runs git through ``subprocess.run``."""

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def __call__(self, args: Sequence[str], cwd: str | Path | None = None) -> GitResult:
        command = [self._executable]
        if cwd is not None:
            command += ["-C", str(cwd)]
        command += list(args)

        logger.debug("Running git", args=list(args), cwd=str(cwd) if cwd else None)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise GitNotAvailableError(
                "Git is not installed or not in PATH.",
                details={"executable": self._executable},
            ) from e

        # git on Windows may emit CRLF line endings
        lines = [line.rstrip("\r") for line in completed.stdout.splitlines()]
        return GitResult(
            returncode=completed.returncode,
            stdout_lines=lines,
            stderr=completed.stderr.strip(),
        )
