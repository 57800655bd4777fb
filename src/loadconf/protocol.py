"""Configuration loader protocol."""

from os import PathLike
from typing import Protocol

from pydantic import BaseModel
from result import Result

from .models import ConfigError


class ConfigLoader(Protocol):
    """Protocol for locating and loading a named configuration."""

    def try_load[T: BaseModel](
        self,
        name: str,
        default: T | type[T],
        path: str | PathLike[str] | None = None,
    ) -> Result[T, ConfigError]:
        """Load configuration ``name`` merged over ``default``.

        Returns:
            Ok(T) with file values over defaults, or ``default`` itself when no
            candidate file could be read.
            Err(ConfigError) when a found file is malformed or does not fit ``T``.
        """
        ...

    def load[T: BaseModel](
        self,
        name: str,
        default: T | type[T],
        path: str | PathLike[str] | None = None,
    ) -> T:
        """Like ``try_load`` but raises ``ConfigLoadError`` on failure."""
        ...
