"""Rendering context assembly for new content files.

Contexts are plain dicts built in a fixed order so that later entries
override earlier ones: base seed, caller metadata, ``title``, ``name``,
``format``, then the date fields. Site-level entries (``site``, ``file`` and
the global ``opoopress`` block) are added only for body rendering.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import sys
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from opoopress.config.settings import DEFAULT_FORMAT
from opoopress.scaffold.defaults import is_blank
from opoopress.utils.dates import add_date_params, format_date

if TYPE_CHECKING:
    from opoopress.site import Site

logger = logging.getLogger(__name__)

GLOBAL_METADATA_KEY = "opoopress"


def system_properties() -> dict[str, str]:
    """Return the process environment plus a few platform properties.

    Platform keys use underscores so templates can reference them directly,
    e.g. ``{{ user_name }}``.
    """
    try:
        user_name = getpass.getuser()
    except (KeyError, OSError):
        user_name = ""

    properties = dict(os.environ)
    properties.update(
        {
            "os_name": platform.system(),
            "os_arch": platform.machine(),
            "os_version": platform.release(),
            "user_name": user_name,
            "user_home": str(Path.home()),
            "user_dir": os.getcwd(),
            "python_version": platform.python_version(),
            "file_separator": os.sep,
            "path_separator": os.pathsep,
            "line_separator": os.linesep,
            "file_encoding": sys.getfilesystemencoding(),
        }
    )
    return properties


def resolve_name(site: Site, title: str | None, name: str | None) -> str:
    """Return the slug used as ``name``, derived from ``title`` when no name is given."""
    if name is None:
        logger.info("Using title as post name.")
        name = title
    else:
        name = name.strip()
    return site.to_slug(name)


def resolve_format(format: str | None) -> str:
    return DEFAULT_FORMAT if is_blank(format) else format.strip()  # type: ignore[union-attr]


def build_context(
    *,
    base_context: Mapping[str, Any] | None,
    metadata: Mapping[str, Any] | None,
    title: str | None,
    name: str | None,
    format: str,
    now: datetime,
) -> dict[str, Any]:
    """Assemble the context shared by path and body rendering."""
    context: dict[str, Any] = {}
    if base_context:
        context.update(base_context)
    if metadata:
        context.update(metadata)
    if title is not None:
        context["title"] = title
    if name is not None:
        context["name"] = name
    context["format"] = format
    context["date"] = format_date(now)
    add_date_params(context, now)
    return context


def extend_for_body(context: Mapping[str, Any], site: Site, destination: Path) -> dict[str, Any]:
    """Return a copy of ``context`` with the site-level entries added."""
    body_context = dict(context)
    body_context["site"] = site
    body_context["file"] = destination
    body_context[GLOBAL_METADATA_KEY] = site.get(GLOBAL_METADATA_KEY)
    return body_context


__all__ = [
    "GLOBAL_METADATA_KEY",
    "build_context",
    "extend_for_body",
    "resolve_format",
    "resolve_name",
    "system_properties",
]
