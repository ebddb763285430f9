"""Core domain models and exceptions for browsher."""

from browsher.core.exceptions import (
    BrowsherError,
    ConfigurationError,
    FileNotTrackedError,
    FileOutsideRepositoryError,
    GitNotAvailableError,
    NoBranchResolvedError,
    NoFileToOpenError,
    NoRemotesConfiguredError,
    NoSuchRemoteError,
    NoTagsFoundError,
    NotARepositoryError,
    OpenCommandError,
    UnsupportedProviderError,
    VcsQueryFailedError,
)
from browsher.core.models import (
    CurrentRef,
    CurrentRefKind,
    FileState,
    LineRange,
    PinKind,
    ProviderTemplate,
    RefSelection,
    RemoteDescriptor,
    ResolutionRequest,
    ResolvedURL,
)

__all__ = [
    # Models
    "CurrentRef",
    "CurrentRefKind",
    "FileState",
    "LineRange",
    "PinKind",
    "ProviderTemplate",
    "RefSelection",
    "RemoteDescriptor",
    "ResolutionRequest",
    "ResolvedURL",
    # Exceptions
    "BrowsherError",
    "ConfigurationError",
    "FileNotTrackedError",
    "FileOutsideRepositoryError",
    "GitNotAvailableError",
    "NoBranchResolvedError",
    "NoFileToOpenError",
    "NoRemotesConfiguredError",
    "NoSuchRemoteError",
    "NoTagsFoundError",
    "NotARepositoryError",
    "OpenCommandError",
    "UnsupportedProviderError",
    "VcsQueryFailedError",
]
