"""Tests for the subprocess git runner."""

import subprocess

import pytest

from browsher.core.exceptions import GitNotAvailableError
from browsher.git import runner as runner_module
from browsher.git.runner import GitResult, SubprocessGitRunner, ensure_git_available


@pytest.mark.unit
class TestGitResult:
    def test_first_line(self) -> None:
        assert GitResult(returncode=0, stdout_lines=["a", "b"]).first_line == "a"
        assert GitResult(returncode=0).first_line == ""

    def test_ok(self) -> None:
        assert GitResult(returncode=0).ok
        assert not GitResult(returncode=1).ok


@pytest.mark.unit
class TestSubprocessGitRunner:
    def test_builds_argument_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = {}

        def fake_run(command, **kwargs):
            seen["command"] = command
            seen["kwargs"] = kwargs
            return subprocess.CompletedProcess(command, 0, stdout="main\r\nother\n", stderr="")

        monkeypatch.setattr(runner_module.subprocess, "run", fake_run)
        result = SubprocessGitRunner()(["symbolic-ref", "--short", "HEAD"], cwd="/my repo")

        assert seen["command"] == ["git", "-C", "/my repo", "symbolic-ref", "--short", "HEAD"]
        assert "shell" not in seen["kwargs"]
        assert result.stdout_lines == ["main", "other"]
        assert result.ok

    def test_without_cwd(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = {}

        def fake_run(command, **kwargs):
            seen["command"] = command
            return subprocess.CompletedProcess(command, 128, stdout="", stderr="fatal: nope\n")

        monkeypatch.setattr(runner_module.subprocess, "run", fake_run)
        result = SubprocessGitRunner()(["rev-parse", "--show-toplevel"])

        assert seen["command"] == ["git", "rev-parse", "--show-toplevel"]
        assert result.returncode == 128
        assert result.stderr == "fatal: nope"

    def test_missing_executable(self) -> None:
        with pytest.raises(GitNotAvailableError):
            SubprocessGitRunner("definitely-not-git-xyz")(["status"])


@pytest.mark.unit
class TestEnsureGitAvailable:
    def test_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runner_module.shutil, "which", lambda name: None)
        with pytest.raises(GitNotAvailableError):
            ensure_git_available()

    def test_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runner_module.shutil, "which", lambda name: "/usr/bin/git")
        assert ensure_git_available() == "/usr/bin/git"
