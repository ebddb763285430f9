"""Repository state models."""

from pydantic import BaseModel, ConfigDict


class RemoteDescriptor(BaseModel):
    """A configured git remote."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class FileState(BaseModel):
    """Point-in-time version control status of a single file."""

    model_config = ConfigDict(frozen=True)

    tracked: bool
    dirty: bool
