"""Pytest configuration and fixtures."""

import os
import subprocess
from pathlib import Path

import pytest
import structlog

from browsher.config.settings import Settings, get_settings
from tests.fakes import FakeGitRunner, RecordingNotifier, widget_runner


@pytest.fixture
def runner() -> FakeGitRunner:
    return widget_runner()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def settings() -> Settings:
    """Default settings, unaffected by the environment or a .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep BROWSHER_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("BROWSHER_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit and a GitHub remote."""
    repo_path = tmp_path / "widget"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "config", "commit.gpgsign", "false")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.py").write_text("print('hello')\nprint('bye')\n")
    (repo_path / "README.md").write_text("# Widget\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")
    _git(repo_path, "remote", "add", "origin", "git@github.com:acme/widget.git")

    return repo_path


@pytest.fixture
def git():
    """Run git inside a test repository."""
    return _git
