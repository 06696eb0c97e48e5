"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "BLOCKMARK_"


class Settings(BaseModel):
    app_name:        str = "blockmark"
    log_level:       str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Root log level for the CLI")
    output_format:   str = Field(default="json", pattern="^(json|yaml)$", description="Serialization used by 'parse' output")
    indent:          int = Field(default=2, ge=0, description="Indentation for JSON/YAML output")
    fail_on_defects: bool = Field(default=True, description="Exit 1 from 'validate' when defects are found")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BLOCKMARK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
