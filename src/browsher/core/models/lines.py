"""Line range model."""

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:[-:,]\s*(\d+)\s*)?$")


class LineRange(BaseModel):
    """An inclusive, 1-based range of lines."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=1)
    end: int = Field(ge=1)

    @model_validator(mode="after")
    def check_order(self) -> "LineRange":
        if self.end < self.start:
            raise ValueError(f"end line {self.end} is before start line {self.start}")
        return self

    @property
    def is_single_line(self) -> bool:
        return self.start == self.end

    @classmethod
    def single(cls, line: int) -> "LineRange":
        return cls(start=line, end=line)

    @classmethod
    def from_selection(cls, first: int, last: int) -> "LineRange":
        """Build a range from a selection that may have been made bottom-up."""
        return cls(start=min(first, last), end=max(first, last))

    @classmethod
    def parse(cls, text: str) -> "LineRange":
        """Parse ``"10"``, ``"10-20"``, ``"10:20"`` or ``"10,20"``.

        A reversed range such as ``"20-12"`` is put back in order.
        """
        match = _RANGE_RE.match(text)
        if not match:
            raise ValueError(f"Invalid line range: {text!r}")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        return cls.from_selection(start, end)
