"""
Application Settings for University Matcher

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    CATALOG_PATH and MAJORS_PATH replace the bundled JSON data when set.
    """

    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Data overrides (bundled package data when unset)
    catalog_path: Optional[Path] = None
    majors_path: Optional[Path] = None

    # Reject majors that are not in the recognized list
    strict_major_validation: bool = True

    # Report
    report_title: str = "University Matching Report"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_data_paths(self) -> "Settings":
        """Override paths must point at existing files."""
        for field_name in ("catalog_path", "majors_path"):
            path = getattr(self, field_name)
            if path is not None and not path.is_file():
                raise ValueError(f"{field_name.upper()} does not exist: {path}")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
