"""
Command line interface for the static-site generator.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from .build import BuildError, build_site
from .config import ConfigError, get_settings, load_config

console = Console(highlight=False, soft_wrap=True, emoji=False)
app = typer.Typer(help="Convert a tree of Markdown files into HTML under <root>/_build.")
logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_str = get_settings().resolved_log_level
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _print_progress(source: Path, target: Path) -> None:
    console.print(f"Converted: {source} -> {target}", markup=False)


@app.command()
def build(
    root: Path = typer.Argument(
        Path("."),
        help="Directory containing the Markdown sources.",
        show_default=True,
    ),
) -> None:
    """
    Rebuild <root>/_build from every Markdown file under root.
    """
    _configure_logging()

    try:
        config = load_config(root=root)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    logger.info("Building %s into %s", config.root, config.build_dir)
    try:
        build_site(config, on_converted=_print_progress)
    except BuildError as exc:
        console.print("[bold red]Error:[/] ", end="")
        console.print(str(exc), markup=False)
        raise typer.Exit(code=1) from exc

    console.print("Completed.", markup=False)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
