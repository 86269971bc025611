"""YAML-backed site configuration store.

A site is configured by ``config.yml`` in its base directory, optionally
layered with ``config-*.yml`` overlay files. Locale variants
(``config_<locale>.yml``) are deliberately not discovered here: they only
become active once promoted to ``config.yml`` during initialization.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml

from opoopress.config.exceptions import ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yml"
CONFIG_FILE_ALT_NAME = "config.yaml"
OVERLAY_GLOB = "config-*.yml"

_T = TypeVar("_T")


def discover_config_files(base_dir: Path) -> tuple[Path, ...]:
    """Return the configuration files for ``base_dir`` in precedence order."""
    primary = base_dir / CONFIG_FILE_NAME
    if not primary.is_file():
        alternate = base_dir / CONFIG_FILE_ALT_NAME
        primary = alternate if alternate.is_file() else None

    files: list[Path] = [primary] if primary else []
    files.extend(sorted(path for path in base_dir.glob(OVERLAY_GLOB) if path.is_file()))
    return tuple(files)


def _merge(base: dict[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``update`` into ``base``, recursing into nested mappings."""
    for key, value in update.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            base[key] = _merge(dict(current), value)
        else:
            base[str(key)] = value
    return base


def _load_yaml(path: Path) -> Mapping[str, Any]:
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigParseError(path, e) from e

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        logger.warning("%s did not parse into a mapping; ignoring", path)
        return {}
    return payload


class SiteConfig(Mapping[str, Any]):
    """Merged view over a site's discovered configuration files."""

    def __init__(self, base_dir: Path, override: Mapping[str, Any] | None = None) -> None:
        self.base_dir = base_dir
        self.config_files = discover_config_files(base_dir)

        data: dict[str, Any] = {}
        for path in self.config_files:
            logger.debug("Loading site config from %s", path)
            _merge(data, _load_yaml(path))
        if override:
            _merge(data, override)
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        files = ", ".join(path.name for path in self.config_files)
        return f"SiteConfig(base_dir={self.base_dir!s}, files=[{files}])"

    @overload
    def get(self, key: str, default: None = None) -> Any | None: ...

    @overload
    def get(self, key: str, default: _T) -> Any | _T: ...

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_str(self, key: str) -> str | None:
        """Return ``key`` as a string, or ``None`` when unset."""
        value = self._data.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def get_list(self, key: str) -> list[str]:
        """Return ``key`` as a list of strings; a single string becomes a one-item list."""
        value = self._data.get(key)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return [str(value)]


__all__ = [
    "CONFIG_FILE_NAME",
    "SiteConfig",
    "discover_config_files",
]
