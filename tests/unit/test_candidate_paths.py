from __future__ import annotations

from pathlib import Path

import pytest

from loadconf.models import CandidatePath
from loadconf.paths import candidate_paths, default_home
from loadconf.settings import LoaderSettings


def _home(path: Path | None):
    return lambda: path


def test_candidate_paths_full_list() -> None:
    paths = candidate_paths("testcfg", home=_home(Path("/home/test")))

    assert [candidate.path for candidate in paths] == [
        Path("testcfg"),
        Path("testcfg.toml"),
        Path(".testcfg"),
        Path(".testcfg.toml"),
        Path("/home/test/.testcfg"),
        Path("/home/test/.testcfg.toml"),
        Path("/home/test/.config/testcfg"),
        Path("/home/test/.config/testcfg.toml"),
        Path("/home/test/.config/testcfg/config"),
        Path("/home/test/.config/testcfg/config.toml"),
        Path("/etc/.config/testcfg"),
        Path("/etc/.config/testcfg.toml"),
        Path("/etc/.config/testcfg/config"),
        Path("/etc/.config/testcfg/config.toml"),
    ]
    assert [candidate.position for candidate in paths] == list(range(1, 15))


def test_candidate_paths_without_home_skips_home_entries() -> None:
    paths = candidate_paths("testcfg", home=_home(None))

    assert paths == (
        CandidatePath(1, Path("testcfg")),
        CandidatePath(2, Path("testcfg.toml")),
        CandidatePath(3, Path(".testcfg")),
        CandidatePath(4, Path(".testcfg.toml")),
        CandidatePath(11, Path("/etc/.config/testcfg")),
        CandidatePath(12, Path("/etc/.config/testcfg.toml")),
        CandidatePath(13, Path("/etc/.config/testcfg/config")),
        CandidatePath(14, Path("/etc/.config/testcfg/config.toml")),
    )


def test_candidate_paths_is_deterministic_and_pure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    home = _home(tmp_path / "home")

    first = candidate_paths("app", home=home)
    second = candidate_paths("app", home=home)

    assert first == second
    assert list(tmp_path.iterdir()) == []


def test_candidate_paths_honours_settings() -> None:
    settings = LoaderSettings(extension=".conf", system_config_dir=Path("/opt/etc"))

    paths = candidate_paths("app", home=_home(None), settings=settings)

    assert [str(candidate.path) for candidate in paths] == [
        "app",
        "app.conf",
        ".app",
        ".app.conf",
        "/opt/etc/app",
        "/opt/etc/app.conf",
        "/opt/etc/app/config",
        "/opt/etc/app/config.conf",
    ]


def test_candidate_paths_rejects_empty_name() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        candidate_paths("", home=_home(None))


def test_default_home_returns_none_when_unresolvable(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", _raise, raising=False)

    assert default_home() is None


def test_default_home_uses_path_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path, raising=False)

    assert default_home() == tmp_path
