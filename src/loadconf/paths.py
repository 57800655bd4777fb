"""Candidate path enumeration for configuration files."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .constants import CONFIG_BASENAME, CONFIG_SUBDIR
from .models import CandidatePath
from .settings import DEFAULT_SETTINGS, LoaderSettings

type HomeResolver = Callable[[], Path | None]

# Home entries occupy positions 5-10; system entries always start at 11.
_HOME_START = 5
_SYSTEM_START = 11


def default_home() -> Path | None:
    """Return the current user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def candidate_paths(
    name: str,
    *,
    home: HomeResolver = default_home,
    settings: LoaderSettings = DEFAULT_SETTINGS,
) -> tuple[CandidatePath, ...]:
    """Build the ordered list of locations searched for configuration ``name``.

    Pure string construction: the filesystem is never consulted. When ``home``
    returns None the home-directory entries are left out and the rest keep
    their positions.
    """
    if not name:
        raise ValueError("Configuration name must be a non-empty string.")

    ext = settings.extension
    candidates = _numbered(
        1,
        [
            Path(name),
            Path(f"{name}{ext}"),
            Path(f".{name}"),
            Path(f".{name}{ext}"),
        ],
    )

    home_dir = home()
    if home_dir is not None:
        candidates += _numbered(_HOME_START, [home_dir / f".{name}", home_dir / f".{name}{ext}"])
        candidates += _numbered(_HOME_START + 2, _config_dir_variants(home_dir / CONFIG_SUBDIR, name, ext))

    candidates += _numbered(_SYSTEM_START, _config_dir_variants(settings.system_config_dir, name, ext))

    return tuple(candidates)


def _config_dir_variants(base: Path, name: str, ext: str) -> list[Path]:
    return [
        base / name,
        base / f"{name}{ext}",
        base / name / CONFIG_BASENAME,
        base / name / f"{CONFIG_BASENAME}{ext}",
    ]


def _numbered(start: int, paths: list[Path]) -> list[CandidatePath]:
    return [CandidatePath(position=start + offset, path=path) for offset, path in enumerate(paths)]
