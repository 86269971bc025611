"""Validation and creation of the site directory layout."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from opoopress.config.site_config import SiteConfig
from opoopress.exceptions import InvalidDirectory

logger = logging.getLogger(__name__)

THEMES_DIR = "themes"


def check_directory(base_dir: Path, directory: str | None) -> Path | None:
    """Ensure ``base_dir / directory`` is a usable directory.

    Missing directories are created with their parents.

    Returns:
        The path when it was created by this call, else ``None``.

    Raises:
        InvalidDirectory: If the path exists but is not a readable and
            writable directory.

    """
    if not directory:
        return None

    path = base_dir / directory
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info("mkdir: %s", path)
        return path

    if not path.is_dir():
        raise InvalidDirectory(path, "not a directory")
    if not os.access(path, os.R_OK):
        raise InvalidDirectory(path, "not readable")
    if not os.access(path, os.W_OK):
        raise InvalidDirectory(path, "not writable")
    return None


def check_directory_list(base_dir: Path, directories: list[str]) -> list[Path]:
    created = []
    for directory in directories:
        path = check_directory(base_dir, directory)
        if path is not None:
            created.append(path)
    return created


def check_directories(base_dir: Path, config: SiteConfig | None = None) -> list[Path]:
    """Ensure the configured source, asset, plugin and theme directories exist.

    A site without any configuration file is left alone.

    Returns:
        Directories created by this call, in check order.

    """
    if config is None:
        config = SiteConfig(base_dir)

    if not config.config_files:
        logger.warning("No site config file.")
        return []

    created = check_directory_list(base_dir, config.get_list("source_dirs"))
    created += check_directory_list(base_dir, config.get_list("asset_dirs"))
    for directory in (config.get_str("plugin_dir"), THEMES_DIR):
        path = check_directory(base_dir, directory)
        if path is not None:
            created.append(path)
    return created


__all__ = ["THEMES_DIR", "check_directories", "check_directory", "check_directory_list"]
