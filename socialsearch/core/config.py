"""Search engine configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Highlight bounds are validated at load time.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_profile_fields() -> dict[str, str]:
    return {
        "description": "About me",
        "briefdescription": "Brief description",
        "location": "Location",
        "interests": "Interests",
        "skills": "Skills",
        "contactemail": "Email",
        "phone": "Telephone",
        "mobile": "Mobile phone",
        "website": "Website",
    }


class Settings(BaseSettings):
    """Search settings loaded from environment and .env.

    profile_fields and tag_names are JSON in the environment, e.g.
    PROFILE_FIELDS='{"phone": "Phone"}' and TAG_NAMES='["tags", "skills"]'.
    """

    # App
    app_name: str = "socialsearch"
    app_version: str = "1.0.0"
    debug: bool = False
    # Explicit level name (e.g. "WARNING"); overrides debug when set
    log_level: str | None = None

    # Database (reference executor). Empty means not configured.
    database_url: str = ""
    database_echo: bool = False

    # Searchable profile fields: shortname -> label, in display order
    profile_fields: dict[str, str] = Field(default_factory=_default_profile_fields)
    # Registered tag metadata names
    tag_names: list[str] = Field(default_factory=lambda: ["tags"])

    # Highlighting and truncation policy
    highlight_context_radius: int = 30
    highlight_max_length: int = 300
    matched_text_max_length: int = 297

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Accept standard logging level names, case-insensitively."""
        if v is None or not v.strip():
            return None
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got: {v}")
        return name

    @model_validator(mode="after")
    def validate_highlight_bounds(self) -> "Settings":
        """Validate highlight and truncation bounds.

        - highlight_context_radius must be >= 0.
        - highlight_max_length must leave room for two ellipses.
        - matched_text_max_length must be positive and below highlight_max_length.
        """
        if self.highlight_context_radius < 0:
            raise ValueError(
                f"highlight_context_radius must be >= 0, got: {self.highlight_context_radius}"
            )
        if self.highlight_max_length <= 6:
            raise ValueError(
                f"highlight_max_length must be greater than 6, got: {self.highlight_max_length}"
            )
        if not 0 < self.matched_text_max_length < self.highlight_max_length:
            raise ValueError(
                "matched_text_max_length must be positive and smaller than "
                f"highlight_max_length ({self.highlight_max_length}), "
                f"got: {self.matched_text_max_length}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
