"""Read-only git queries against a single working tree."""

import re
from pathlib import Path

import structlog

from browsher.core.exceptions import (
    NoBranchResolvedError,
    NoRemotesConfiguredError,
    NoSuchRemoteError,
    NoTagsFoundError,
    NotARepositoryError,
    VcsQueryFailedError,
)
from browsher.core.models.ref import CurrentRef, CurrentRefKind
from browsher.core.models.repository import FileState, RemoteDescriptor
from browsher.git.runner import GitResult, GitRunner, SubprocessGitRunner

logger = structlog.get_logger(__name__)

_HEAD_BRANCH_RE = re.compile(r"HEAD branch:\s*(.+)$")


def _existing_directory(start: str | Path) -> Path:
    """Nearest existing directory at or above ``start``."""
    path = Path(start).absolute()
    if path.is_file():
        path = path.parent
    while not path.exists() and path != path.parent:
        path = path.parent
    return path


class GitRepository:
    """A working tree root and the queries scoped to it.

    Uses subprocess + git CLI directly (no gitpython dependency).
    Nothing is cached: every call asks git again.
    """

    def __init__(self, root: str | Path, runner: GitRunner | None = None) -> None:
        self._root = Path(root)
        self._runner = runner or SubprocessGitRunner()

    @property
    def root(self) -> Path:
        return self._root

    @classmethod
    def discover(
        cls, start: str | Path | None = None, runner: GitRunner | None = None
    ) -> "GitRepository":
        """Find the working tree enclosing ``start`` (default: cwd)."""
        runner = runner or SubprocessGitRunner()
        cwd = _existing_directory(start if start is not None else Path.cwd())
        result = runner(["rev-parse", "--show-toplevel"], cwd=cwd)
        if not result.ok or not result.first_line:
            raise NotARepositoryError(
                "Not inside a Git repository.",
                details={"path": str(cwd), "stderr": result.stderr},
            )
        root = result.first_line
        logger.debug("Found repository root", root=root)
        return cls(root, runner)

    def find_root(self) -> Path:
        """Ask git for the top level of this working tree again."""
        return GitRepository.discover(self._root, self._runner).root

    def _run(self, *args: str, allow_failure: bool = False) -> GitResult:
        result = self._runner(list(args), cwd=self._root)
        if not result.ok and not allow_failure:
            raise VcsQueryFailedError(
                f"Git command failed: {result.stderr or 'exit status ' + str(result.returncode)}",
                details={"args": list(args), "returncode": result.returncode},
            )
        return result

    def list_remotes(self) -> list[str]:
        """Remote names in the order git reports them."""
        return [line for line in self._run("remote").stdout_lines if line]

    def get_default_remote(self) -> str:
        """The first configured remote."""
        remotes = self.list_remotes()
        if not remotes:
            raise NoRemotesConfiguredError("No remotes found in the repository.")
        return remotes[0]

    def get_remote_url(self, remote_name: str) -> str:
        """Configured URL of ``remote_name``."""
        result = self._run("config", "--get", f"remote.{remote_name}.url", allow_failure=True)
        if not result.ok or not result.first_line:
            raise NoSuchRemoteError(
                f"No remote named '{remote_name}' is set.",
                details={"remote": remote_name},
            )
        return result.first_line

    def get_remote(self, remote_name: str | None = None) -> RemoteDescriptor:
        name = remote_name or self.get_default_remote()
        return RemoteDescriptor(name=name, url=self.get_remote_url(name))

    def get_current_ref(self) -> CurrentRef:
        """Current branch, or the short commit hash on a detached HEAD."""
        result = self._run("symbolic-ref", "-q", "--short", "HEAD", allow_failure=True)
        if result.ok and result.first_line:
            return CurrentRef(value=result.first_line, kind=CurrentRefKind.BRANCH)

        result = self._run("rev-parse", "--short", "HEAD", allow_failure=True)
        if result.ok and result.first_line:
            return CurrentRef(value=result.first_line, kind=CurrentRefKind.COMMIT)

        raise VcsQueryFailedError(
            "Could not determine the current branch or commit hash.",
            details={"stderr": result.stderr},
        )

    def get_latest_tag(self) -> str:
        """Nearest tag reachable from HEAD."""
        result = self._run("describe", "--tags", "--abbrev=0", allow_failure=True)
        if not result.ok or not result.first_line:
            raise NoTagsFoundError(
                "Could not determine the latest tag.",
                details={"stderr": result.stderr},
            )
        return result.first_line

    def get_commit_hash(self, full: bool = True) -> str:
        """HEAD commit hash, full or abbreviated."""
        args = ["rev-parse", "HEAD"] if full else ["rev-parse", "--short", "HEAD"]
        commit = self._run(*args).first_line
        if not commit:
            raise VcsQueryFailedError("Could not determine the latest commit hash.")
        return commit

    def is_dirty(self, relative_path: str) -> bool:
        """True if the file has unstaged or staged changes.

        Comparing the index instead of HEAD keeps this working on a branch
        with no commits yet.
        """
        unstaged = self._run("diff", "--name-only", "--", relative_path)
        if any(unstaged.stdout_lines):
            return True
        staged = self._run("diff", "--name-only", "--cached", "--", relative_path)
        return any(staged.stdout_lines)

    def is_tracked(self, relative_path: str) -> bool:
        """True if git knows about the file."""
        result = self._run(
            "ls-files", "--error-unmatch", "--", relative_path, allow_failure=True
        )
        return result.ok

    def get_file_state(self, relative_path: str) -> FileState:
        tracked = self.is_tracked(relative_path)
        # Untracked files never show up in a diff
        dirty = self.is_dirty(relative_path) if tracked else False
        return FileState(tracked=tracked, dirty=dirty)

    def get_default_branch(self, remote_name: str) -> str:
        """Branch the remote advertises as its HEAD.

        Reads ``refs/remotes/<remote>/HEAD`` first and falls back to
        parsing ``git remote show``, which contacts the remote.
        """
        prefix = f"refs/remotes/{remote_name}/"
        result = self._run("symbolic-ref", "-q", f"{prefix}HEAD", allow_failure=True)
        if result.ok and result.first_line.startswith(prefix):
            branch = result.first_line[len(prefix):]
            if branch:
                return branch

        result = self._run("remote", "show", remote_name, allow_failure=True)
        if result.ok:
            for line in result.stdout_lines:
                match = _HEAD_BRANCH_RE.search(line)
                if match and match.group(1).strip() != "(unknown)":
                    return match.group(1).strip()
        else:
            logger.debug("git remote show failed", remote=remote_name, stderr=result.stderr)

        raise NoBranchResolvedError(
            "Could not determine the default branch.",
            details={"remote": remote_name},
        )
