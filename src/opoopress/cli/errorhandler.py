"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from opoopress.config.exceptions import ConfigError, ConfigPromotionFailed
from opoopress.exceptions import (
    DestinationExists,
    InvalidDirectory,
    MissingPattern,
    MissingTemplate,
    OpooPressError,
    PathTraversalError,
    RenderFailure,
    WriteFailure,
)

console = Console(stderr=True)


def _fail(label: str, error: Exception, hint: str | None = None) -> None:
    console.print(f"[bold red]{label}:[/bold red] {escape(str(error))}")
    if hint:
        console.print(hint)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Turn OpooPress errors and invalid settings into a short message and exit code 1.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ValidationError as e:
        if debug:
            raise
        _fail("⚙️ Invalid Settings", e, "Check the [cyan]OPOOPRESS_*[/cyan] environment variables.")
        raise typer.Exit(1) from e
    except ConfigPromotionFailed as e:
        if debug:
            raise
        _fail("🌐 Locale Config Promotion Failed", e)
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        _fail("⚙️ Configuration Error", e)
        raise typer.Exit(1) from e
    except InvalidDirectory as e:
        if debug:
            raise
        _fail("🏗️ Site Structure Error", e, "Remove or fix the path, then run [cyan]opoopress init[/cyan] again.")
        raise typer.Exit(1) from e
    except (MissingPattern, MissingTemplate) as e:
        if debug:
            raise
        _fail(
            "🧩 Unknown Layout",
            e,
            f"Define [cyan]{escape(e.key)}[/cyan] in config.yml or pass it on the command line.",
        )
        raise typer.Exit(1) from e
    except RenderFailure as e:
        if debug:
            raise
        _fail("📝 Template Error", e)
        raise typer.Exit(1) from e
    except DestinationExists as e:
        if debug:
            raise
        _fail("📄 File Exists", e, "Drop [cyan]--no-clobber[/cyan] to overwrite it.")
        raise typer.Exit(1) from e
    except (WriteFailure, PathTraversalError) as e:
        if debug:
            raise
        _fail("💾 Write Error", e)
        raise typer.Exit(1) from e
    except OpooPressError as e:
        if debug:
            raise
        _fail("💥 Error", e)
        raise typer.Exit(1) from e
