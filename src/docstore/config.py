"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:        str  = "docstore"
    log_level:       str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                  description="Level for the docstore logger")
    replace_on_save: bool = Field(default=False, description="Replace a stored doc with the same id instead of appending")
    output_indent:   int  = Field(default=0, ge=0, description="JSON indent for CLI output; 0 = one line per doc")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    log_level is accepted in any case ("debug" and "DEBUG" are the same level).
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    data.update({
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"DOCSTORE_{name.upper()}"))
    })
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].strip().upper()
    return Settings(**data)
