"""Date helpers for scaffolding contexts."""

from __future__ import annotations

from collections.abc import MutableMapping
from datetime import datetime
from typing import Any, Final

DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M"


def format_date(value: datetime) -> str:
    """Return ``value`` formatted as ``YYYY-MM-DD HH:MM``."""
    return value.strftime(DATE_FORMAT)


def add_date_params(context: MutableMapping[str, Any], value: datetime) -> None:
    """Expand ``value`` into permalink-style date fields on ``context``.

    Zero-padded strings are used for ``month``/``day`` so they can be dropped
    straight into file names; ``i_month``/``i_day`` carry the plain integers.

    Examples:
        >>> ctx = {}
        >>> add_date_params(ctx, datetime(2025, 3, 7, 9, 5, 2))
        >>> ctx["year"], ctx["month"], ctx["day"], ctx["i_month"]
        ('2025', '03', '07', 3)

    """
    context["year"] = value.strftime("%Y")
    context["short_year"] = value.strftime("%y")
    context["month"] = value.strftime("%m")
    context["i_month"] = value.month
    context["day"] = value.strftime("%d")
    context["i_day"] = value.day
    context["hour"] = value.strftime("%H")
    context["minute"] = value.strftime("%M")
    context["second"] = value.strftime("%S")


__all__ = ["DATE_FORMAT", "add_date_params", "format_date"]
