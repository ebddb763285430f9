"""Ref selection models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class PinKind(str, Enum):
    """What a generated URL is pinned to."""

    BRANCH = "branch"
    TAG = "tag"
    COMMIT = "commit"
    ROOT = "root"


class CurrentRefKind(str, Enum):
    """Shape of HEAD: a named branch or a detached commit."""

    BRANCH = "branch"
    COMMIT = "commit"


class RefSelection(BaseModel):
    """A pin kind together with the concrete ref embedded in the URL.

    ``value`` is None for root pins, and for unresolved selections
    that still need defaults applied.
    """

    model_config = ConfigDict(frozen=True)

    kind: PinKind
    value: str | None = None

    @model_validator(mode="after")
    def check_root_has_no_value(self) -> "RefSelection":
        if self.kind == PinKind.ROOT and self.value is not None:
            raise ValueError("root pins do not carry a ref")
        return self


class CurrentRef(BaseModel):
    """Where HEAD currently points."""

    model_config = ConfigDict(frozen=True)

    value: str
    kind: CurrentRefKind

    @property
    def is_branch(self) -> bool:
        return self.kind == CurrentRefKind.BRANCH
