"""Custom exceptions for browsher."""

from typing import Any


class BrowsherError(Exception):
    """Base exception for browsher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BrowsherError):
    """Raised when settings or provider templates are invalid."""


class GitNotAvailableError(BrowsherError):
    """Raised when the git executable cannot be found."""


class VcsQueryFailedError(BrowsherError):
    """Raised when a git query exits with an unexpected status."""


class NotARepositoryError(BrowsherError):
    """Raised when no enclosing working tree is found."""


class NoSuchRemoteError(BrowsherError):
    """Raised when the requested remote is not configured."""


class NoRemotesConfiguredError(BrowsherError):
    """Raised when the repository has no remotes at all."""


class NoBranchResolvedError(BrowsherError):
    """Raised when every branch fallback is exhausted."""


class NoTagsFoundError(BrowsherError):
    """Raised when no tag is reachable from HEAD."""


class NoFileToOpenError(BrowsherError):
    """Raised when a file path is required but none was given."""


class FileOutsideRepositoryError(BrowsherError):
    """Raised when the file does not live inside the working tree."""


class FileNotTrackedError(BrowsherError):
    """Raised when line numbers are requested for an untracked file."""


class UnsupportedProviderError(BrowsherError):
    """Raised when the remote host has no provider template."""


class OpenCommandError(BrowsherError):
    """Raised when the URL could not be handed to a browser."""
