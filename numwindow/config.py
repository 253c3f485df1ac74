from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.precision import Precision


DEFAULT_CONFIG_FILE = "numwindow.yaml"


class BufferConfig(BaseModel):
    capacity: int = Field(5, ge=0, description="Number of most recent values retained")
    precision: Precision = Field(default_factory=Precision)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"


class AppConfig(BaseModel):
    env: EnvSettings
    buffer: BufferConfig

    # Allow tests to pass a plain dict for env
    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        buffer = BufferConfig()
        if config_path is None:
            default_path = Path(DEFAULT_CONFIG_FILE)
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            try:
                buffer = BufferConfig(**raw)
            except (TypeError, ValidationError) as ve:
                raise ValueError(f"Invalid {Path(config_path).name}: {ve}")

        return AppConfig(env=env, buffer=buffer)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
