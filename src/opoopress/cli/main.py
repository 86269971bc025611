"""Main Typer application for OpooPress."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel

from opoopress.cli.errorhandler import handle_cli_errors
from opoopress.config import OpooPressSettings
from opoopress.init import initialize
from opoopress.logging_setup import configure_logging
from opoopress.scaffold import create_new_file, system_properties
from opoopress.site import Site

app = typer.Typer(
    name="opoopress",
    help="Initialize OpooPress sites and scaffold new posts and pages",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    with handle_cli_errors():
        configure_logging(OpooPressSettings().log_level)


def _parse_meta(items: list[str]) -> dict[str, str]:
    meta: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            msg = f"Invalid --meta value '{item}', expected key=value"
            raise typer.BadParameter(msg)
        meta[key.strip()] = value
    return meta


@app.command()
def init(
    base_dir: Annotated[Path, typer.Argument(help="Site base directory")] = Path(),
    *,
    locale: Annotated[
        str | None, typer.Option("--locale", "-l", help="Locale of config_<locale>.yml to promote (e.g. zh_CN)")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Promote the locale config and create missing site directories."""
    with handle_cli_errors(debug=debug):
        settings = OpooPressSettings()
        result = initialize(base_dir, locale or settings.locale)

    if not result.config_files:
        console.print(
            Panel(
                f"[bold yellow]⚠️ No config.yml found in {result.base_dir}[/bold yellow]\n\n"
                "Directory checks were skipped.",
                title="📁 Site Not Configured",
                border_style="yellow",
            )
        )
        return

    lines = [f"📁 Site root: {result.base_dir}"]
    if result.promoted_config:
        lines.append(f"🌐 Promoted config: {result.promoted_config.name}")
    if result.created_dirs:
        lines.append("📂 Created directories:")
        lines.extend(f"  • {path.relative_to(result.base_dir)}" for path in result.created_dirs)
    else:
        lines.append("✅ All directories already present")
    console.print(Panel("\n".join(lines), title="🛠️ Initialization Complete", border_style="green"))


@app.command()
def new(
    layout: Annotated[str, typer.Argument(help="Content kind, e.g. post or page")],
    title: Annotated[str | None, typer.Argument(help="Title of the new file")] = None,
    *,
    name: Annotated[str | None, typer.Option("--name", "-n", help="Name used in the file path (slugged)")] = None,
    format: Annotated[str | None, typer.Option("--format", "-f", help="Content format, defaults to markdown")] = None,
    pattern: Annotated[str | None, typer.Option("--pattern", help="File path pattern template")] = None,
    template: Annotated[str | None, typer.Option("--template", "-t", help="Body template name or source")] = None,
    meta: Annotated[list[str] | None, typer.Option("--meta", "-m", help="Extra context as key=value")] = None,
    site_dir: Annotated[Path, typer.Option("--site", "-s", help="Site base directory")] = Path(),
    no_clobber: Annotated[bool, typer.Option("--no-clobber", help="Fail instead of overwriting")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Create a new post, page or other configured layout."""
    metadata = _parse_meta(meta or [])

    with handle_cli_errors(debug=debug):
        settings = OpooPressSettings()
        site = Site.load(site_dir)
        path = create_new_file(
            site,
            layout,
            title=title,
            name=name,
            format=format or settings.default_format,
            file_pattern=pattern,
            body_template=template,
            metadata=metadata,
            base_context=system_properties(),
            fail_if_exists=no_clobber or settings.fail_if_exists,
        )

    console.print(f"[green]Created {layout}:[/green] {path}")
