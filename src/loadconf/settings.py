"""Loader settings."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoaderSettings(BaseModel):
    """Options controlling where and how configuration files are read.

    The defaults reproduce the standard search list: ``.toml`` variants and the
    ``/etc/.config`` system directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    extension: str = Field(default=".toml", pattern=r"^\.[^/\\]+$")
    system_config_dir: Path = Field(default=Path("/etc/.config"))
    encoding: str = Field(default="utf-8")
    require_file: bool = Field(default=False)

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding '{value}'.") from exc
        return value


DEFAULT_SETTINGS = LoaderSettings()
