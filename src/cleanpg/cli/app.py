"""Root CLI application: clean a page, show the element policy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from cleanpg.core.config import load_config
from cleanpg.core.logs import setup_logging, shutdown_logging
from cleanpg.core.models import RenderConfig
from cleanpg.render import RenderError, clean_html
from cleanpg.render.policy import POLICIES, VOID_ELEMENTS
from cleanpg.utils.http import read_html

logger = logging.getLogger(__name__)

console = Console(stderr=True)
app = typer.Typer(
    name="cleanpg",
    help="Re-render a web page as plain, human-readable HTML.",
    no_args_is_help=True,
)


def _require_html_suffix(path: Optional[Path]) -> None:
    if path is not None and path.suffix != ".html":
        logger.critical("file [%s] must have .html extension", path)
        console.print(f"[red]File must have a .html extension:[/red] {path}")
        raise typer.Exit(1)


@app.command()
def clean(
    url: str = typer.Argument(..., help="URL of the page to clean"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="HTML file to render to [default=stdout]"),
    save: Optional[Path] = typer.Option(None, "-s", "--save", help="Save a copy of the source HTML document"),
    posth1: bool = typer.Option(False, "-p", "--posth1", help="Render body elements after first h1 tag"),
    nostyle: bool = typer.Option(False, "-n", "--nostyle", help="Do not automatically render tag-level embedded styles"),
    nolinks: bool = typer.Option(False, "-l", "--nolinks", help="Do not render links"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print extra debugging information"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="YAML config file"),
) -> None:
    """Fetch URL and write a cleanly formatted version of it."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(1)

    setup_logging(cfg.logging.log_file, verbose=verbose, level=cfg.logging.level)
    try:
        _require_html_suffix(output)
        _require_html_suffix(save)

        # Flags only switch toggles away from their defaults
        render_cfg = RenderConfig(
            canonical_mode=cfg.render.canonical_mode or posth1,
            inject_style=cfg.render.inject_style and not nostyle,
            render_links=cfg.render.render_links and not nolinks,
        )
        if render_cfg.canonical_mode:
            logger.info("processing body elements after first <h1> tag")
        if not render_cfg.inject_style:
            logger.info("skipping automatic tag-level style embedding")
        if not render_cfg.render_links:
            logger.info("not rendering links")

        try:
            source = read_html(url, cfg.http)
        except httpx.HTTPError as exc:
            logger.critical("Cannot read [%s]: %s", url, exc)
            console.print(f"[red]Could not read[/red] {url}: {exc}")
            raise typer.Exit(1)

        if save is not None:
            logger.info("saving a copy of the source document to %s", save)
            try:
                save.write_bytes(source)
            except OSError as exc:
                logger.critical("could not open save file [%s]: %s", save, exc)
                console.print(f"[red]Could not save source:[/red] {exc}")
                raise typer.Exit(1)

        try:
            cleaned = clean_html(source, render_cfg, parser=cfg.parser)
        except RenderError as exc:
            logger.critical("Could not clean [%s]: %s", url, exc)
            console.print(f"[red]Could not clean[/red] {url}: {exc}")
            raise typer.Exit(1)

        if output is None:
            typer.echo(cleaned, nl=False)
        else:
            try:
                output.write_text(cleaned, encoding="utf-8")
            except OSError as exc:
                logger.critical("could not open [%s]: %s", output, exc)
                console.print(f"[red]Could not write output:[/red] {exc}")
                raise typer.Exit(1)
        logger.info("created a clean version of %s", url)
    finally:
        shutdown_logging()


@app.command()
def policy() -> None:
    """Show the tags that survive cleaning and what is kept on them."""
    table = Table(title="Element Policy")
    table.add_column("Tag", style="cyan")
    table.add_column("Attributes", style="white")
    table.add_column("Style", justify="center")
    table.add_column("Void", justify="center")

    for tag, entry in POLICIES.items():
        table.add_row(
            tag,
            ", ".join(entry.attributes) or "[dim]-[/dim]",
            "[green]Yes[/green]" if entry.style else "[dim]No[/dim]",
            "[green]Yes[/green]" if tag in VOID_ELEMENTS else "[dim]No[/dim]",
        )

    Console().print(table)
