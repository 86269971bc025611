"""Shared helpers for slugs, paths and dates."""

from opoopress.utils.dates import DATE_FORMAT, add_date_params, format_date
from opoopress.utils.paths import PathTraversalError, safe_path_join, slugify

__all__ = [
    "DATE_FORMAT",
    "PathTraversalError",
    "add_date_params",
    "format_date",
    "safe_path_join",
    "slugify",
]
