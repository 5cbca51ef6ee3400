"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from line_builder.context import Mode
from line_builder.utils.platform import get_config_dir


class LimitsConfig(BaseModel):
    """Platform cardinality limits checked at serialization time."""
    carousel_bubbles: int = 12
    quick_reply_items: int = 13


class BuilderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LINE_BUILDER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    mode: Mode = Mode.STANDARD
    # Raise RequiredFieldError for a Box without children instead of
    # emitting an empty contents array.
    strict_box_contents: bool = False
    limits: LimitsConfig = Field(default_factory=LimitsConfig)


def load_settings(config_path: str | Path | None = None) -> BuilderSettings:
    """Load settings from env vars, optionally overlaying a YAML config."""
    yaml_data: dict[str, Any] = {}

    # Determine config file path
    if config_path is None:
        config_path = os.environ.get("LINE_BUILDER_CONFIG")
    if config_path is None:
        default = get_config_dir() / "config.yaml"
        if default.exists():
            config_path = default

    # Load YAML if found
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                yaml_data = yaml.safe_load(f) or {}

    # Env vars take priority over YAML values
    env_data = BuilderSettings().model_dump(exclude_unset=True)
    return BuilderSettings(**_deep_merge(yaml_data, env_data))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@lru_cache(maxsize=1)
def get_settings() -> BuilderSettings:
    """Process-wide settings, loaded once."""
    return load_settings()
