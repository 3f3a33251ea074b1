"""Configuration management for the dependency scanner.

Loads configuration from environment variables using Pydantic models.
Provides sensible defaults for all settings while allowing override via
environment.

Provides:
- Config: Pydantic model with all application settings
- load_config: Factory function to create Config instance
"""

import os

from pydantic import BaseModel, ConfigDict, Field

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


def _env_int(name: str, default: int) -> int | str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    # Validated by the int field it populates
    return value.strip()


class Config(BaseModel):
    """Application configuration loaded from environment.

    Attributes:
        autoconf_analyzer_enabled: Whether the Autoconf analyzer runs at all
            (from DEPCHECK_AUTOCONF_ENABLED env)
        max_content_chars: Upper bound on the number of characters searched
            for AC_INIT per file; 0 disables the bound
            (from DEPCHECK_MAX_CONTENT_CHARS env)
    """

    model_config = ConfigDict(validate_assignment=True)

    # Analyzer enablement
    autoconf_analyzer_enabled: bool = Field(
        default_factory=lambda: _env_flag("DEPCHECK_AUTOCONF_ENABLED", True)
    )

    # Hardening
    max_content_chars: int = Field(
        default_factory=lambda: _env_int("DEPCHECK_MAX_CONTENT_CHARS", 1024 * 1024),
        ge=0,
        validate_default=True,
    )

    def is_enabled(self, setting_key: str) -> bool:
        """Look up an analyzer enablement flag by its setting key.

        Unknown keys are treated as enabled.

        Args:
            setting_key: Attribute name of the flag (e.g., "autoconf_analyzer_enabled")

        Returns:
            True if the analyzer should run
        """
        return bool(getattr(self, setting_key, True))


def load_config() -> Config:
    """Load configuration from environment.

    Returns:
        Populated Config instance
    """
    return Config()
