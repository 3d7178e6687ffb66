"""Library Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting is read from TAZKIYATECH_* environment variables or a .env file
    - get_settings() is cached (lru_cache): single instance per process
    - screen_density is always > 0

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with no environment
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAZKIYATECH_", env_file=".env", case_sensitive=False,
    )

    # Display: 1.0 is the 160 dpi baseline (mdpi)
    screen_density: float = 1.0

    @field_validator("screen_density")
    @classmethod
    def density_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("screen_density must be positive")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
