"""Mapping absolute file paths to repository-relative paths."""

from pathlib import Path

from browsher.core.exceptions import FileOutsideRepositoryError, NoFileToOpenError


def normalize_path(path: str) -> str:
    """Use forward slashes regardless of platform."""
    return path.replace("\\", "/")


def relative_path(file_path: str | Path | None, root: str | Path) -> str:
    """Return ``file_path`` relative to ``root`` as a POSIX path.

    The check is an exact, case-sensitive prefix match on whole path
    components, so ``/repo`` does not contain ``/repository/file``.
    """
    if file_path is None or str(file_path) == "":
        raise NoFileToOpenError("No file to open.")

    file_str = normalize_path(str(file_path))
    root_str = normalize_path(str(root)).rstrip("/")

    if file_str == root_str or not file_str.startswith(root_str + "/"):
        raise FileOutsideRepositoryError(
            "File is not inside the Git repository.",
            details={"file": str(file_path), "root": str(root)},
        )

    return file_str[len(root_str):].lstrip("/")
