"""Tests for GitRepository against a real git checkout."""

from pathlib import Path

import pytest

from browsher.core.exceptions import NoSuchRemoteError, NoTagsFoundError, NotARepositoryError
from browsher.core.models.ref import CurrentRefKind
from browsher.git.repository import GitRepository


@pytest.mark.integration
class TestGitRepository:
    """Tests for GitRepository."""

    def test_discover_from_subdirectory(self, git_repo: Path) -> None:
        repository = GitRepository.discover(git_repo / "src")
        assert repository.root.resolve() == git_repo.resolve()

    def test_discover_from_file(self, git_repo: Path) -> None:
        repository = GitRepository.discover(git_repo / "src" / "main.py")
        assert repository.root.resolve() == git_repo.resolve()

    def test_not_a_repository(self, tmp_path: Path) -> None:
        plain = tmp_path / "plain"
        plain.mkdir()
        with pytest.raises(NotARepositoryError):
            GitRepository.discover(plain)

    def test_remotes(self, git_repo: Path, git) -> None:
        git(git_repo, "remote", "add", "upstream", "https://gitlab.com/acme/widget.git")
        repository = GitRepository.discover(git_repo)
        assert set(repository.list_remotes()) == {"origin", "upstream"}
        assert repository.get_remote_url("upstream") == "https://gitlab.com/acme/widget.git"

    def test_missing_remote(self, git_repo: Path) -> None:
        with pytest.raises(NoSuchRemoteError):
            GitRepository.discover(git_repo).get_remote_url("fork")

    def test_current_branch(self, git_repo: Path) -> None:
        current = GitRepository.discover(git_repo).get_current_ref()
        assert current.value == "main"
        assert current.kind == CurrentRefKind.BRANCH

    def test_detached_head(self, git_repo: Path, git) -> None:
        git(git_repo, "checkout", "--detach")
        repository = GitRepository.discover(git_repo)
        current = repository.get_current_ref()
        assert current.kind == CurrentRefKind.COMMIT
        assert repository.get_commit_hash().startswith(current.value)

    def test_commit_hash(self, git_repo: Path) -> None:
        repository = GitRepository.discover(git_repo)
        assert len(repository.get_commit_hash()) == 40  # Full SHA
        assert len(repository.get_commit_hash(full=False)) < 40

    def test_latest_tag(self, git_repo: Path, git) -> None:
        repository = GitRepository.discover(git_repo)
        with pytest.raises(NoTagsFoundError):
            repository.get_latest_tag()

        git(git_repo, "tag", "v1.0.0")
        assert repository.get_latest_tag() == "v1.0.0"

    def test_tracked_and_dirty(self, git_repo: Path, git) -> None:
        repository = GitRepository.discover(git_repo)
        assert repository.is_tracked("src/main.py") is True
        assert repository.is_dirty("src/main.py") is False

        (git_repo / "src" / "main.py").write_text("print('changed')\n")
        assert repository.is_dirty("src/main.py") is True

        git(git_repo, "add", "src/main.py")
        assert repository.is_dirty("src/main.py") is True

    def test_untracked(self, git_repo: Path) -> None:
        (git_repo / "notes.txt").write_text("scratch\n")
        state = GitRepository.discover(git_repo).get_file_state("notes.txt")
        assert state.tracked is False
        assert state.dirty is False

    def test_default_branch_from_remote_head(self, git_repo: Path, git) -> None:
        git(git_repo, "update-ref", "refs/remotes/origin/main", "HEAD")
        git(git_repo, "symbolic-ref", "refs/remotes/origin/HEAD", "refs/remotes/origin/main")
        assert GitRepository.discover(git_repo).get_default_branch("origin") == "main"


@pytest.mark.integration
def test_dirty_check_before_first_commit(tmp_path: Path, git) -> None:
    repo_path = tmp_path / "fresh"
    repo_path.mkdir()
    git(repo_path, "init")
    (repo_path / "new.py").write_text("x = 1\n")
    git(repo_path, "add", "new.py")

    repository = GitRepository.discover(repo_path)
    assert repository.is_tracked("new.py") is True
    assert repository.is_dirty("new.py") is True
