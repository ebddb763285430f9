"""Resolution request and result models."""

from pydantic import BaseModel, ConfigDict

from browsher.core.models.lines import LineRange
from browsher.core.models.ref import PinKind, RefSelection
from browsher.core.models.repository import RemoteDescriptor


class ResolutionRequest(BaseModel):
    """Everything the caller knows when asking for a URL.

    Unset fields fall back to configuration defaults.
    """

    model_config = ConfigDict(frozen=True)

    file_path: str | None = None
    pin: PinKind | None = None
    ref: str | None = None
    line_range: LineRange | None = None
    remote: str | None = None


class ResolvedURL(BaseModel):
    """A generated URL plus the facts it was built from."""

    model_config = ConfigDict(frozen=True)

    url: str
    remote: RemoteDescriptor
    ref: RefSelection
    relative_path: str | None = None
    line_range: LineRange | None = None
    anchor_dropped: bool = False
