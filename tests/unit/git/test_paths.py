"""Tests for the path resolver."""

import pytest

from browsher.core.exceptions import FileOutsideRepositoryError, NoFileToOpenError
from browsher.git.paths import normalize_path, relative_path


@pytest.mark.unit
class TestRelativePath:
    """Tests for relative_path."""

    @pytest.mark.parametrize(
        "file_path,root,expected",
        [
            ("/repo/src/main.ts", "/repo", "src/main.ts"),
            ("/repo/src/main.ts", "/repo/", "src/main.ts"),
            ("/repo/README.md", "/repo", "README.md"),
            ("C:\\work\\repo\\src\\main.ts", "C:\\work\\repo", "src/main.ts"),
            ("C:\\work\\repo\\src\\main.ts", "C:/work/repo/", "src/main.ts"),
            ("/a/b/c/d/e.txt", "/a", "b/c/d/e.txt"),
        ],
    )
    def test_inside(self, file_path: str, root: str, expected: str) -> None:
        result = relative_path(file_path, root)
        assert result == expected
        assert not result.startswith("/")
        assert "\\" not in result

    @pytest.mark.parametrize(
        "file_path,root",
        [
            ("/other/main.ts", "/repo"),
            ("/repository/main.ts", "/repo"),
            ("/Repo/main.ts", "/repo"),
            ("/repo", "/repo"),
        ],
    )
    def test_outside(self, file_path: str, root: str) -> None:
        with pytest.raises(FileOutsideRepositoryError):
            relative_path(file_path, root)

    @pytest.mark.parametrize("file_path", [None, ""])
    def test_no_file(self, file_path: str | None) -> None:
        with pytest.raises(NoFileToOpenError):
            relative_path(file_path, "/repo")


@pytest.mark.unit
def test_normalize_path() -> None:
    assert normalize_path("a\\b\\c") == "a/b/c"
    assert normalize_path("a/b") == "a/b"
