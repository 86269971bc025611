"""Initialization stage - site layout checks.

This package promotes locale configuration and makes sure the configured
directories exist.
"""

from .directories import check_directories, check_directory
from .locale_config import promote_locale_config
from .scaffolding import InitializationResult, initialize

__all__ = [
    "InitializationResult",
    "check_directories",
    "check_directory",
    "initialize",
    "promote_locale_config",
]
