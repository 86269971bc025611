"""A module for OpooPress's command-line interface."""

from opoopress.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
