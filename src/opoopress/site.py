"""The site a scaffolding request operates on."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from opoopress.config.site_config import SiteConfig
from opoopress.rendering.renderer import Renderer, TemplateRenderer
from opoopress.utils.paths import slugify

DEFAULT_THEME = "default"


class Site:
    """A site base directory together with its configuration and renderer.

    The scaffolding code only reads through a ``Site``: configuration lookups,
    slugs and body rendering all go through it.
    """

    def __init__(
        self,
        base_dir: Path,
        config: SiteConfig | None = None,
        renderer: Renderer | None = None,
        slugifier: Callable[[str | None], str] | None = None,
    ) -> None:
        self.base_dir = base_dir.expanduser().resolve()
        self.config = config if config is not None else SiteConfig(self.base_dir)
        self.theme = self.config.get_str("theme") or DEFAULT_THEME
        self.renderer = renderer if renderer is not None else TemplateRenderer.for_site(self.base_dir, self.theme)
        self._slugifier = slugifier or slugify

    @classmethod
    def load(cls, base_dir: Path, override: Mapping[str, Any] | None = None) -> Site:
        """Load the site at ``base_dir`` from its discovered configuration files."""
        base_dir = base_dir.expanduser().resolve()
        return cls(base_dir, SiteConfig(base_dir, override))

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def to_slug(self, text: str | None) -> str:
        return self._slugifier(text)

    def __repr__(self) -> str:
        return f"Site(base_dir={self.base_dir!s})"


__all__ = ["DEFAULT_THEME", "Site"]
