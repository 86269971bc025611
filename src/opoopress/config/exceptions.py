"""Custom exceptions for configuration handling."""

from __future__ import annotations

from pathlib import Path

from opoopress.exceptions import OpooPressError


class ConfigError(OpooPressError):
    """Base exception for all configuration-related errors."""


class ConfigParseError(ConfigError):
    """Raised when a discovered configuration file is not valid YAML."""

    def __init__(self, path: Path, original_exception: Exception) -> None:
        self.path = path
        super().__init__(f"Could not parse site configuration '{path}': {original_exception}")
        self.__cause__ = original_exception


class ConfigPromotionFailed(ConfigError):
    """Raised when a locale configuration file cannot replace ``config.yml``."""

    def __init__(self, source: Path, target: Path, original_exception: Exception) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Failed to promote '{source.name}' to '{target.name}': {original_exception}")
        self.__cause__ = original_exception
