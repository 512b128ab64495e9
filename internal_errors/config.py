"""Settings for the web integration, loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """internal-errors settings."""

    model_config = SettingsConfigDict(
        env_prefix="INTERNAL_ERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Response shaping
    expose_internal_details: bool = False
    internal_error_detail: str = Field(default="Internal server error", min_length=1)

    def validate_runtime_safety(self) -> None:
        """Refuse to leak internal error messages outside debug mode."""
        if self.expose_internal_details and not self.debug:
            msg = (
                "Unsafe configuration: INTERNAL_ERRORS_EXPOSE_INTERNAL_DETAILS "
                "requires INTERNAL_ERRORS_DEBUG"
            )
            raise ValueError(msg)
