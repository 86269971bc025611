"""Template rendering for scaffolded content."""

from opoopress.rendering.renderer import BUILTIN_TEMPLATES_DIR, Renderer, StringRenderer, TemplateRenderer

__all__ = ["BUILTIN_TEMPLATES_DIR", "Renderer", "StringRenderer", "TemplateRenderer"]
