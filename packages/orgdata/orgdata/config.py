"""
Codec configuration.

``CodecConfig`` carries the time zone applied to offset-less timestamps, the
JSON indent used by ``dumps`` and the logging settings a host may pass to
``orgdata.logs.configure_logging``. Every field has a default, so an empty
YAML document is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class LoggingConfig(BaseModel):
    level: LogLevel = "info"
    format: Literal["json", "text"] = Field(
        default="json",
        description="json for machine-readable lines, text for the console renderer",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _lowercase_level(cls, value):
        return value.lower() if isinstance(value, str) else value


class CodecConfig(BaseModel):
    timezone: str = Field(
        default="UTC",
        description="Zone applied to timestamps that carry no UTC offset",
    )
    json_indent: int = Field(default=4, ge=0, description="Indent for dumps (0 = compact)")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def load_config(path: str | Path) -> CodecConfig:
    """Read a YAML codec config. The document must be a mapping (or empty)."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"codec config not found: {path}")

    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"codec config {path} must be a mapping, got {type(raw).__name__}")
    return CodecConfig.model_validate(raw)
