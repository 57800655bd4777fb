"""Logging utilities for loadconf using Loguru.

Logging is disabled by default when loadconf is imported as a library.
Applications that want to see which candidate files were tried can call
``loadconf.enable_logging()``; records are then written to their own handler,
leaving any handlers the application configured untouched.
"""

import sys
from typing import Literal, TextIO

import loguru
from loguru import logger

from loadconf.constants import APP_NAME

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO", sink: TextIO = sys.stderr) -> int:
    """Route loadconf records at ``level`` and above to ``sink``.

    Returns the handler id, which can be passed to ``logger.remove``.
    """
    logger.enable(APP_NAME)
    return logger.add(
        sink,
        level=level,
        format=_format_record,
        filter=APP_NAME,
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _format_record(record: "loguru.Record") -> str:
    """Render ``[scope] time | level | message | key=value ...``."""
    fields = {key: value for key, value in record["extra"].items() if key != "scope"}
    details = ""
    if fields:
        # Braces in values would be taken as format fields by loguru.
        rendered = " ".join(f"{key}={value}" for key, value in fields.items())
        details = " | " + rendered.replace("{", "{{").replace("}", "}}")

    return (
        f"[{APP_NAME}.{{extra[scope]}}] "
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{message}"
        f"{details}\n{{exception}}"
    )
