"""loadconf - load a named TOML configuration file into a pydantic model.

The first readable file in the following list is used, falling back to the
default when none is found:

1. ``./{name}``
2. ``./{name}.toml``
3. ``./.{name}``
4. ``./.{name}.toml``
5. ``~/.{name}``
6. ``~/.{name}.toml``
7. ``~/.config/{name}``
8. ``~/.config/{name}.toml``
9. ``~/.config/{name}/config``
10. ``~/.config/{name}/config.toml``
11. ``/etc/.config/{name}``
12. ``/etc/.config/{name}.toml``
13. ``/etc/.config/{name}/config``
14. ``/etc/.config/{name}/config.toml``

By default, loadconf's internal logging is disabled. Call
``loadconf.enable_logging()`` to see which candidates were tried.
"""

from .loader import FileConfigLoader, load, try_load
from .logging import disable_library_logging, enable_library_logging
from .models import (
    CandidatePath,
    ConfigError,
    ConfigIOError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigTomlError,
    ConfigValidationError,
)
from .paths import candidate_paths, default_home
from .protocol import ConfigLoader
from .settings import LoaderSettings

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "CandidatePath",
    "ConfigError",
    "ConfigIOError",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigNotFoundError",
    "ConfigTomlError",
    "ConfigValidationError",
    "FileConfigLoader",
    "LoaderSettings",
    "candidate_paths",
    "default_home",
    "enable_logging",
    "load",
    "try_load",
]
