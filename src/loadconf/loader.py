"""File-based configuration loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result, is_err

from .logging import create_logger
from .merger import merge_over_default
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigTomlError,
    ConfigValidationError,
)
from .paths import HomeResolver, candidate_paths, default_home
from .protocol import ConfigLoader
from .settings import DEFAULT_SETTINGS, LoaderSettings

logger = create_logger("loader")


class FileConfigLoader(ConfigLoader):
    def __init__(
        self,
        settings: LoaderSettings | None = None,
        home_resolver: HomeResolver | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.home_resolver = home_resolver or default_home

    def try_load[T: BaseModel](
        self,
        name: str,
        default: T | type[T],
        path: str | PathLike[str] | None = None,
    ) -> Result[T, ConfigError]:
        base = _default_instance(default)

        if path is not None:
            return self._load_explicit(Path(path), base)

        candidates = candidate_paths(name, home=self.home_resolver, settings=self.settings)
        logger.debug("Searching for configuration", name=name, candidates=len(candidates))

        for candidate in candidates:
            try:
                raw = _read_bytes(candidate.path)
            except OSError as exc:
                logger.debug(
                    "Skipping configuration candidate",
                    position=candidate.position,
                    path=str(candidate.path),
                    reason=exc.strerror or str(exc),
                )
                continue

            logger.debug("Configuration file found", position=candidate.position, path=str(candidate.path))
            return self._parse_and_merge(candidate.path, raw, base)

        if self.settings.require_file:
            error = ConfigNotFoundError(
                name=name,
                searched=[candidate.path for candidate in candidates],
                message=f"No configuration file found for '{name}'.",
            )
            logger.error("Config load failed", name=name, error=error.message)
            return Err(error)

        logger.debug("No configuration file found, using defaults", name=name)
        return Ok(base)

    def load[T: BaseModel](
        self,
        name: str,
        default: T | type[T],
        path: str | PathLike[str] | None = None,
    ) -> T:
        result = self.try_load(name, default, path)
        if is_err(result):
            raise ConfigLoadError(result.err_value)
        return result.unwrap()

    def _load_explicit[T: BaseModel](self, path: Path, base: T) -> Result[T, ConfigError]:
        logger.debug("Loading configuration from explicit path", path=str(path))
        try:
            raw = _read_bytes(path)
        except OSError as exc:
            error = ConfigIOError(path=path, message=exc.strerror or str(exc))
            logger.error("Config load failed", path=str(path), error=error.message)
            return Err(error)

        return self._parse_and_merge(path, raw, base)

    def _parse_and_merge[T: BaseModel](self, path: Path, raw: bytes, base: T) -> Result[T, ConfigError]:
        parsed = self._parse_toml(path, raw)
        if is_err(parsed):
            logger.error("Config load failed", path=str(path), error=parsed.err_value.message)
            return parsed

        try:
            config = merge_over_default(base, parsed.unwrap())
        except ValidationError as exc:
            error = _validation_error(path, exc)
            logger.error("Config load failed", path=str(path), field=error.field, error=error.message)
            return Err(error)

        return Ok(config)

    def _parse_toml(self, path: Path, raw: bytes) -> Result[dict[str, Any], ConfigError]:
        try:
            text = raw.decode(self.settings.encoding)
        except UnicodeDecodeError as exc:
            return Err(
                ConfigTomlError(
                    path=path,
                    message=f"File is not valid {self.settings.encoding}: {exc.reason}",
                ),
            )

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            return Err(
                ConfigTomlError(
                    path=path,
                    line=getattr(exc, "lineno", None),
                    column=getattr(exc, "colno", None),
                    message=getattr(exc, "msg", None) or str(exc),
                ),
            )

        return Ok(data)


def _read_bytes(path: Path) -> bytes:
    with path.open("rb") as handle:
        return handle.read()


def _default_instance[T: BaseModel](default: T | type[T]) -> T:
    if isinstance(default, type):
        return default()
    return default


def _validation_error(path: Path, exc: ValidationError) -> ConfigValidationError:
    field = None
    message = str(exc)
    error_details = exc.errors()
    if error_details:
        first: Mapping[str, Any] = error_details[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        message = first.get("msg", message)
    return ConfigValidationError(path=path, field=field, message=message)


_default_loader = FileConfigLoader()


def try_load[T: BaseModel](
    name: str,
    default: T | type[T],
    path: str | PathLike[str] | None = None,
) -> Result[T, ConfigError]:
    """Find configuration ``name`` and merge it over ``default``.

    The first readable candidate from ``candidate_paths(name)`` wins. When
    ``path`` is given the search is skipped and that file must be readable.
    """
    return _default_loader.try_load(name, default, path)


def load[T: BaseModel](
    name: str,
    default: T | type[T],
    path: str | PathLike[str] | None = None,
) -> T:
    """Like ``try_load`` but raises ``ConfigLoadError`` if the file is malformed."""
    return _default_loader.load(name, default, path)
