"""Centralized logging configuration for OpooPress."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "OPOOPRESS_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"
_MANAGED_FLAG: Final[str] = "_opoopress_managed"

console = Console()


def _resolve_level(level_name: str | None = None) -> int:
    """Return the logging level, preferring ``level_name`` over the environment."""

    name = (level_name or os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME)).upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _is_managed(handler: logging.Handler) -> bool:
    return getattr(handler, _MANAGED_FLAG, False)


def configure_logging(level_name: str | None = None) -> None:
    """Install the OpooPress Rich handler on the root logger, once.

    Later calls only adjust the level.
    """

    root_logger = logging.getLogger()

    if not any(_is_managed(handler) for handler in root_logger.handlers):
        root_logger.handlers.clear()
        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(handler, _MANAGED_FLAG, True)
        root_logger.addHandler(handler)

    root_logger.setLevel(_resolve_level(level_name))

    logging.captureWarnings(True)
