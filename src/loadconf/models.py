"""Pydantic models for candidate paths and configuration load errors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True, slots=True)
class CandidatePath:
    """A filesystem location checked for a configuration file.

    Attributes:
        position: 1-based priority; lower positions win.
        path: Location to read, relative to the working directory or absolute.
    """

    position: int
    path: Path


class ConfigNotFoundError(BaseModel):
    """No candidate file could be read and a file was required."""

    model_config = ConfigDict(extra="forbid")

    name: str
    searched: list[Path]
    message: str


class ConfigTomlError(BaseModel):
    """TOML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Parsed configuration does not fit the target model."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading an explicitly requested configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigTomlError | ConfigValidationError | ConfigIOError


class ConfigLoadError(Exception):
    """Raised by the non-``try_`` entry points when loading fails."""

    def __init__(self, error: ConfigError) -> None:
        self.error = error
        super().__init__(describe_error(error))


def describe_error(error: ConfigError) -> str:
    match error:
        case ConfigTomlError(path=path, line=line, column=column, message=message) if line is not None:
            return f"Invalid TOML in {path} at line {line}, column {column}: {message}"
        case ConfigTomlError(path=path, message=message):
            return f"Invalid TOML in {path}: {message}"
        case ConfigValidationError(path=path, field=field, message=message) if field:
            return f"Invalid configuration in {path} for '{field}': {message}"
        case ConfigValidationError(path=path, message=message):
            return f"Invalid configuration in {path}: {message}"
        case ConfigIOError(path=path, message=message):
            return f"Could not read configuration file {path}: {message}"
        case ConfigNotFoundError(message=message):
            return message
    raise TypeError(f"Unexpected configuration error: {error!r}")
