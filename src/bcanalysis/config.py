from __future__ import annotations

"""Configuration utilities for bcanalysis.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the analysis defaults (time transform
and smoothing window) and logging options.  Instances can be populated from
environment variables or from YAML/JSON files with matching nested keys.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import AnalysisMode

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


DEFAULT_WINDOW = 15


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class AnalysisSettings(SectionModel):
    """Defaults for the before-closure analysis."""

    mode: AnalysisMode = AnalysisMode.SQUARE_ROOT_TIME
    window: int = Field(default=DEFAULT_WINDOW, ge=0)

    @field_validator("mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return AnalysisMode.parse(value)
        return value


class LoggingSettings(SectionModel):
    """Logging verbosity for the command line entry point."""

    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            value = logging.getLevelName(value)
        if isinstance(value, str):
            value = value.strip().upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"unknown logging level: {value!r}")
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="BCANALYSIS_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
