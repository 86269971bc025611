"""Content scaffolding: resolve defaults, assemble a context, render, write."""

from opoopress.scaffold.context import build_context, system_properties
from opoopress.scaffold.defaults import NamingResolution, resolve_body_template, resolve_file_pattern, resolve_naming
from opoopress.scaffold.generator import NewFileRequest, ScaffoldGenerator, create_new_file

__all__ = [
    "NamingResolution",
    "NewFileRequest",
    "ScaffoldGenerator",
    "build_context",
    "create_new_file",
    "resolve_body_template",
    "resolve_file_pattern",
    "resolve_naming",
    "system_properties",
]
