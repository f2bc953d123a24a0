"""Configuration management using pydantic-settings.

Supports environment variables (prefixed with ``FEEDMARK_``) and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDMARK_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # XML loading
    xml_recover: bool = Field(
        default=True,
        description="Fall back to lxml's recovering parser when strict parsing fails",
    )
    xml_huge_tree: bool = Field(
        default=False,
        description="Lift lxml's depth and text size limits for very large feeds",
    )


settings = Settings()
