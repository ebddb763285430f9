"""Provider template models."""

from string import Formatter

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _count_fields(template: str) -> int:
    return sum(1 for _, field, _, _ in Formatter().parse(template) if field is not None)


def _require_fields(template: str, expected: int, what: str) -> str:
    try:
        found = _count_fields(template)
    except ValueError as e:
        raise ValueError(f"{what} is not a valid format string: {e}") from e
    if found != expected:
        raise ValueError(
            f"{what} must contain {expected} '{{}}' placeholder(s), found {found}: {template!r}"
        )
    return template


class ProviderTemplate(BaseModel):
    """How a hosting provider lays out file URLs and line anchors.

    Templates use positional ``str.format`` fields:

    - ``url_template``: base_url, ref, relative_path
    - ``single_line_format``: line
    - ``multi_line_format``: start, end
    """

    model_config = ConfigDict(frozen=True)

    url_template: str = Field(description="Template for a file URL")
    single_line_format: str = Field(description="Fragment for a single line")
    multi_line_format: str = Field(description="Fragment for a line range")

    @field_validator("url_template")
    @classmethod
    def check_url_template(cls, value: str) -> str:
        return _require_fields(value, 3, "url_template")

    @field_validator("single_line_format")
    @classmethod
    def check_single_line(cls, value: str) -> str:
        return _require_fields(value, 1, "single_line_format")

    @field_validator("multi_line_format")
    @classmethod
    def check_multi_line(cls, value: str) -> str:
        return _require_fields(value, 2, "multi_line_format")
