"""Configuration management for cooknote.

Loads configuration from:
1. cooknote.yaml in current directory
2. ~/.config/cooknote/cooknote.yaml
3. Environment variables (COOKNOTE_* prefix)

Configuration only affects the command line tool; parsing and
serialization behave the same regardless of settings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ImagesConfig(BaseModel):
    """Image URL defaults."""

    extension: str = "png"

    @field_validator("extension")
    @classmethod
    def strip_leading_dot(cls, value: str) -> str:
        return value.lstrip(".") or "png"


class OutputConfig(BaseModel):
    """CLI output settings."""

    json_indent: int = Field(default=2, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(message)s"


class Config(BaseSettings):
    """Main configuration for cooknote."""

    model_config = SettingsConfigDict(
        env_prefix="COOKNOTE_",
        env_nested_delimiter="__",
    )

    images: ImagesConfig = Field(default_factory=ImagesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Path | None:
    """Find the configuration file.

    Searches in order:
    1. ./cooknote.yaml
    2. ~/.config/cooknote/cooknote.yaml
    """
    locations = [
        Path.cwd() / "cooknote.yaml",
        Path.home() / ".config" / "cooknote" / "cooknote.yaml",
    ]

    for path in locations:
        if path.exists():
            return path

    return None


def load_config() -> Config:
    """Load configuration from file and environment.

    Returns:
        Config: The loaded configuration.
    """
    config_data: dict[str, Any] = {}

    config_file = find_config_file()
    if config_file:
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

    # Short environment names for common settings
    env_overrides = {
        "COOKNOTE_IMAGE_EXTENSION": ("images", "extension"),
        "COOKNOTE_LOG_LEVEL": ("logging", "level"),
    }

    for env_var, path in env_overrides.items():
        value = os.environ.get(env_var)
        if value:
            section, key = path
            if section not in config_data:
                config_data[section] = {}
            config_data[section][key] = value

    return Config(**config_data)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The configuration instance.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
