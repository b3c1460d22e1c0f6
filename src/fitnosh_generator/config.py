"""Configuration management - settings from env, layout from YAML."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port")
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("environment", "ENVIRONMENT", "NODE_ENV"),
        description="Deployment environment name",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Base URL used in image links; request base URL when unset",
    )

    # Service identity reported by health endpoints
    service_name: str = Field(default="fitnosh-instagram-generator")
    service_version: str = Field(default="1.0.0")

    # Image model (Google Gemini)
    google_api_key: str = Field(default="", description="Google AI API key, required")
    image_model: str = Field(
        default="gemini-2.0-flash-preview-image-generation",
        description="Model that returns text and image parts",
    )
    max_attempts: int = Field(default=3, ge=1, description="API calls per generation")
    retry_delay_seconds: float = Field(default=5.0, ge=0, description="Pause between attempts")

    # Files
    output_dir: Path = Field(default=Path("."), description="Directory for generated PNGs")
    logo_path: Path = Field(default=Path("street_nosh_logo.png"), description="Brand logo file")
    keep_latest: int = Field(default=10, ge=1, description="Generated files kept on disk")
    layout_config_dir: str = Field(default="", description="Directory holding layout.yaml")

    @property
    def api_key_configured(self) -> bool:
        return bool(self.google_api_key)


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_layout_config(config_dir_str: str = "") -> dict[str, Any]:
    """Load overlay layout from config. Missing file means built-in defaults."""
    if not config_dir_str:
        config_dir = Path(__file__).parent.parent.parent / "config"
    else:
        config_dir = Path(config_dir_str)
    return load_yaml_config(config_dir / "layout.yaml")
