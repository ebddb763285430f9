"""Domain models for browsher."""

from browsher.core.models.lines import LineRange
from browsher.core.models.provider import ProviderTemplate
from browsher.core.models.ref import CurrentRef, CurrentRefKind, PinKind, RefSelection
from browsher.core.models.repository import FileState, RemoteDescriptor
from browsher.core.models.resolution import ResolutionRequest, ResolvedURL

__all__ = [
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
]
