"""Git integration module for browsher."""

from browsher.git.paths import normalize_path, relative_path
from browsher.git.repository import GitRepository
from browsher.git.runner import GitResult, GitRunner, SubprocessGitRunner, ensure_git_available
from browsher.git.url_builder import (
    BUILTIN_PROVIDERS,
    build_url,
    extract_host,
    merged_providers,
    normalize_remote_url,
)

__all__ = [
    "BUILTIN_PROVIDERS",
    "GitRepository",
    "GitResult",
    "GitRunner",
    "SubprocessGitRunner",
    "build_url",
    "ensure_git_available",
    "extract_host",
    "merged_providers",
    "normalize_path",
    "normalize_remote_url",
    "relative_path",
]
