"""Built-in scaffolding defaults and the cascade that picks between them.

Both the file pattern and the body template for a layout are chosen the
same way: an explicit value wins, then the ``new_<layout>`` (or
``new_<layout>_template``) site configuration key, then a built-in default.
Built-in defaults exist only for ``post`` and ``page``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from opoopress.exceptions import MissingPattern, MissingTemplate, ScaffoldError

ConfigLookup = Callable[[str], Any]

DEFAULT_NEW_POST_FILE: Final[str] = "source/_posts/{{ year }}-{{ month }}-{{ day }}-{{ name }}.{{ format }}"
DEFAULT_NEW_PAGE_FILE: Final[str] = "source/{{ name }}/index.{{ format }}"
DEFAULT_NEW_POST_TEMPLATE: Final[str] = "new_post.md.jinja"
DEFAULT_NEW_PAGE_TEMPLATE: Final[str] = "new_page.md.jinja"

BUILTIN_FILE_PATTERNS: Final[Mapping[str, str]] = {
    "post": DEFAULT_NEW_POST_FILE,
    "page": DEFAULT_NEW_PAGE_FILE,
}
BUILTIN_BODY_TEMPLATES: Final[Mapping[str, str]] = {
    "post": DEFAULT_NEW_POST_TEMPLATE,
    "page": DEFAULT_NEW_PAGE_TEMPLATE,
}


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def pattern_key(layout: str) -> str:
    return f"new_{layout}"


def template_key(layout: str) -> str:
    return f"new_{layout}_template"


def _cascade(
    explicit: str | None,
    lookup: ConfigLookup,
    key: str,
    builtins: Mapping[str, str],
    layout: str,
    error: type[MissingPattern] | type[MissingTemplate],
) -> str:
    if not is_blank(explicit):
        return explicit  # type: ignore[return-value]

    configured = lookup(key)
    if not is_blank(configured):
        return str(configured)

    builtin = builtins.get(layout)
    if builtin is None:
        raise error(layout, key)
    return builtin


def resolve_file_pattern(explicit: str | None, lookup: ConfigLookup, layout: str) -> str:
    """Return the file path pattern for ``layout``.

    Raises:
        MissingPattern: If nothing is given or configured and ``layout`` has
            no built-in pattern.

    """
    return _cascade(explicit, lookup, pattern_key(layout), BUILTIN_FILE_PATTERNS, layout, MissingPattern)


def resolve_body_template(explicit: str | None, lookup: ConfigLookup, layout: str) -> str:
    """Return the body template for ``layout``.

    Raises:
        MissingTemplate: If nothing is given or configured and ``layout`` has
            no built-in template.

    """
    return _cascade(explicit, lookup, template_key(layout), BUILTIN_BODY_TEMPLATES, layout, MissingTemplate)


@dataclass(frozen=True, slots=True)
class NamingResolution:
    """File pattern and body template chosen for one scaffolding request."""

    file_pattern: str
    body_template: str


def resolve_naming(
    layout: str,
    lookup: ConfigLookup,
    file_pattern: str | None = None,
    body_template: str | None = None,
) -> NamingResolution:
    """Resolve both halves of a request; the pattern is checked first."""
    if is_blank(layout):
        msg = "A layout is required to scaffold a new file."
        raise ScaffoldError(msg)
    return NamingResolution(
        file_pattern=resolve_file_pattern(file_pattern, lookup, layout),
        body_template=resolve_body_template(body_template, lookup, layout),
    )


__all__ = [
    "BUILTIN_BODY_TEMPLATES",
    "BUILTIN_FILE_PATTERNS",
    "DEFAULT_NEW_PAGE_FILE",
    "DEFAULT_NEW_PAGE_TEMPLATE",
    "DEFAULT_NEW_POST_FILE",
    "DEFAULT_NEW_POST_TEMPLATE",
    "ConfigLookup",
    "NamingResolution",
    "is_blank",
    "pattern_key",
    "resolve_body_template",
    "resolve_file_pattern",
    "resolve_naming",
    "template_key",
]
