"""Create new content files from a file pattern and a body template."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from opoopress.exceptions import DestinationExists, RenderFailure, WriteFailure
from opoopress.rendering.renderer import Renderer, StringRenderer
from opoopress.scaffold.context import build_context, extend_for_body, resolve_format, resolve_name
from opoopress.scaffold.defaults import NamingResolution, resolve_naming
from opoopress.utils.paths import safe_path_join

if TYPE_CHECKING:
    from opoopress.site import Site

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NewFileRequest:
    """Caller input for one new content file."""

    layout: str
    title: str | None = None
    name: str | None = None
    format: str | None = None
    file_pattern: str | None = None
    body_template: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


class ScaffoldGenerator:
    """Render and write new content files for a site.

    ``path_renderer`` renders file patterns and defaults to a
    :class:`StringRenderer`; ``body_renderer`` renders bodies and defaults to
    the site's own renderer. ``base_context`` seeds every context at the
    lowest precedence.
    """

    def __init__(
        self,
        site: Site,
        *,
        path_renderer: Renderer | None = None,
        body_renderer: Renderer | None = None,
        base_context: Mapping[str, Any] | None = None,
        clock: Callable[[], datetime] = datetime.now,
        fail_if_exists: bool = False,
    ) -> None:
        self.site = site
        self.path_renderer = path_renderer or StringRenderer()
        self.body_renderer = body_renderer or site.renderer
        self.base_context = dict(base_context or {})
        self.clock = clock
        self.fail_if_exists = fail_if_exists

    def resolve(self, request: NewFileRequest) -> NamingResolution:
        return resolve_naming(request.layout, self.site.get, request.file_pattern, request.body_template)

    def create(self, request: NewFileRequest) -> Path:
        """Scaffold the file described by ``request`` and return its path."""
        name = resolve_name(self.site, request.title, request.name)
        file_format = resolve_format(request.format)
        naming = self.resolve(request)

        context = build_context(
            base_context=self.base_context,
            metadata=request.metadata,
            title=request.title,
            name=name,
            format=file_format,
            now=self.clock(),
        )

        destination = self.render_destination(naming.file_pattern, context)
        if self.fail_if_exists and destination.exists():
            raise DestinationExists(destination)

        body = self.body_renderer.render(naming.body_template, extend_for_body(context, self.site, destination))
        self._write(destination, body)

        logger.info("Write to file: %s", destination)
        return destination

    def render_destination(self, file_pattern: str, context: Mapping[str, Any]) -> Path:
        """Render ``file_pattern`` and resolve it inside the site base directory."""
        relative = self.path_renderer.render(file_pattern, context).strip()
        if not relative:
            raise RenderFailure(file_pattern, "file pattern rendered to an empty path")
        return safe_path_join(self.site.base_dir, relative)

    @staticmethod
    def _write(destination: Path, body: str) -> None:
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            out = destination.open("w", encoding="utf-8")
        except OSError as e:
            raise WriteFailure(destination, e) from e

        try:
            out.write(body)
            out.flush()
        except OSError as e:
            raise WriteFailure(destination, e) from e
        finally:
            # Flushed above; close failures are logged only.
            try:
                out.close()
            except OSError as e:
                logger.warning("Could not close %s: %s", destination, e)


def create_new_file(
    site: Site,
    layout: str,
    title: str | None = None,
    name: str | None = None,
    format: str | None = None,
    file_pattern: str | None = None,
    body_template: str | None = None,
    metadata: Mapping[str, Any] | None = None,
    **options: Any,
) -> Path:
    """Create a new ``layout`` file for ``site`` and return its path.

    Keyword ``options`` are passed to :class:`ScaffoldGenerator`
    (``base_context``, ``path_renderer``, ``body_renderer``, ``clock``,
    ``fail_if_exists``). An existing file at the destination is overwritten
    unless ``fail_if_exists`` is set.
    """
    request = NewFileRequest(
        layout=layout,
        title=title,
        name=name,
        format=format,
        file_pattern=file_pattern,
        body_template=body_template,
        metadata=dict(metadata or {}),
    )
    return ScaffoldGenerator(site, **options).create(request)


__all__ = ["NewFileRequest", "ScaffoldGenerator", "create_new_file"]
