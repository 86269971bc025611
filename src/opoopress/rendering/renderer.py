"""Jinja2 renderers used for scaffolding content files.

Two renderers cover the two template roles:

- :class:`StringRenderer` renders an inline template source. It is used for
  file path patterns, where unknown variables are left in the output
  verbatim instead of failing.
- :class:`TemplateRenderer` renders a named template looked up in the site,
  its active theme and the package defaults. A value that cannot be a
  template name (no directory part, no file suffix) is rendered as inline
  source instead. It is used for file bodies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from jinja2 import (
    BaseLoader,
    ChainableUndefined,
    ChoiceLoader,
    DebugUndefined,
    FileSystemLoader,
    Template,
    TemplateError,
    TemplateNotFound,
    Undefined,
    select_autoescape,
)
from jinja2.sandbox import SandboxedEnvironment

from opoopress.exceptions import RenderFailure

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_INLINE_MARKERS = ("{{", "{%", "{#", "\n")
_TEMPLATE_NAME = re.compile(r"/|\.\w+$")


@runtime_checkable
class Renderer(Protocol):
    """Anything that turns a template plus a context into text."""

    def render(self, template: str, context: Mapping[str, Any]) -> str: ...


def _environment(loader: BaseLoader | None = None, undefined: type[Undefined] = Undefined) -> SandboxedEnvironment:
    return SandboxedEnvironment(
        loader=loader,
        undefined=undefined,
        autoescape=select_autoescape(default_for_string=False),
        keep_trailing_newline=True,
    )


class _LiteralUndefined(ChainableUndefined, DebugUndefined):
    """Print unknown names, including attribute chains, as their own source."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        if name[:2] == "__":
            raise AttributeError(name)
        return type(self)(name=f"{self._undefined_name}.{name}")

    __getitem__ = __getattr__


class StringRenderer:
    """Render inline template sources, leaving unknown variables untouched."""

    def __init__(self, undefined: type[Undefined] = _LiteralUndefined) -> None:
        self.env = _environment(undefined=undefined)

    def render(self, template: str, context: Mapping[str, Any]) -> str:
        try:
            return self.env.from_string(template).render(dict(context))
        except TemplateError as e:
            raise RenderFailure(template, str(e)) from e


class TemplateRenderer:
    """Render named templates from the site, its theme and the built-in set."""

    def __init__(self, search_paths: list[Path] | None = None, *, include_builtin: bool = True) -> None:
        paths = [path for path in (search_paths or []) if path.is_dir()]
        if include_builtin:
            paths.append(BUILTIN_TEMPLATES_DIR)
        self.search_paths = paths
        self.env = _environment(ChoiceLoader([FileSystemLoader(str(path)) for path in paths]))

    @classmethod
    def for_site(cls, base_dir: Path, theme: str) -> TemplateRenderer:
        return cls([base_dir / "templates", base_dir / "themes" / theme / "templates"])

    def _load(self, template: str) -> Template:
        if any(marker in template for marker in _INLINE_MARKERS):
            return self.env.from_string(template)
        try:
            return self.env.get_template(template)
        except TemplateNotFound:
            if _TEMPLATE_NAME.search(template):
                raise
            logger.debug("No template named %s, rendering it as inline source", template)
            return self.env.from_string(template)

    def render(self, template: str, context: Mapping[str, Any]) -> str:
        try:
            compiled = self._load(template)
            return compiled.render(dict(context))
        except TemplateError as e:
            raise RenderFailure(template, str(e)) from e


__all__ = ["BUILTIN_TEMPLATES_DIR", "Renderer", "StringRenderer", "TemplateRenderer"]
