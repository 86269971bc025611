"""Centralized exceptions for the OpooPress scaffolding core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class OpooPressError(Exception):
    """Base exception for all OpooPress errors."""


class PathTraversalError(OpooPressError):
    """Raised when a path would escape its intended directory."""


class InitializationError(OpooPressError):
    """Base exception for site initialization errors."""


class InvalidDirectory(InitializationError):
    """Raised when a required site path exists but is not a usable directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path} must be a valid directory ({reason}).")


class ScaffoldError(OpooPressError):
    """Base exception for content scaffolding errors."""


class MissingPattern(ScaffoldError):
    """Raised when no file pattern applies to a layout."""

    def __init__(self, layout: str, key: str) -> None:
        self.layout = layout
        self.key = key
        super().__init__(f"'{key}' not defined: no file pattern for layout '{layout}'.")


class MissingTemplate(ScaffoldError):
    """Raised when no body template applies to a layout."""

    def __init__(self, layout: str, key: str) -> None:
        self.layout = layout
        self.key = key
        super().__init__(f"'{key}' not defined: no body template for layout '{layout}'.")


class RenderFailure(ScaffoldError):
    """Raised when the template engine rejects a template or its context."""

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Failed to render template '{template}': {detail}")


class WriteFailure(ScaffoldError):
    """Raised when the destination file or its parents cannot be written."""

    def __init__(self, path: Path, original_exception: Exception) -> None:
        self.path = path
        super().__init__(f"Failed to write '{path}': {original_exception}")
        self.__cause__ = original_exception


class DestinationExists(ScaffoldError):
    """Raised when the destination exists and overwriting was disabled."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Refusing to overwrite existing file: {path}")


__all__ = [
    "DestinationExists",
    "InitializationError",
    "InvalidDirectory",
    "MissingPattern",
    "MissingTemplate",
    "OpooPressError",
    "PathTraversalError",
    "RenderFailure",
    "ScaffoldError",
    "WriteFailure",
]
