"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from browsher.core.exceptions import ConfigurationError
from browsher.core.models.provider import ProviderTemplate
from browsher.core.models.ref import PinKind


class Settings(BaseSettings):
    """Settings loaded from ``BROWSHER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BROWSHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"

    # Remotes and refs
    default_remote: str | None = None
    default_branch: str | None = None
    default_pin: PinKind = PinKind.COMMIT
    commit_length: int | None = Field(default=None, ge=4, le=40)

    # Line anchors
    allow_line_numbers_with_uncommitted_changes: bool = False

    # Opening
    open_cmd: str | None = None

    # Host -> template, merged over the built-in providers.
    # e.g. BROWSHER_PROVIDERS='{"git.example.com": {...}}'
    providers: dict[str, ProviderTemplate] = Field(default_factory=dict)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises ConfigurationError when the environment holds invalid values.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems),
            details={"errors": problems},
        ) from e
