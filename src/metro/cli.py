"""CLI interface for metro using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from metro import __description__, __version__
from metro.config import MetroConfig, load_config
from metro.errors import MetroError
from metro.interpreter import Interpreter, to_string
from metro.script import load_script

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="metro",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"metro version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """metro - Render event scripts as metro-style text diagrams."""


def _load_config(config: Optional[Path]) -> MetroConfig:
    try:
        metro_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logging.basicConfig(level=metro_config.logging.level.to_logging())
    return metro_config


@app.command()
def render(
    script: Annotated[
        Path,
        typer.Argument(help="Event script (.json, .yaml or .yml)")
    ],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .metro.json)")
    ] = None,
) -> None:
    """Render an event script as a diagram."""
    metro_config = _load_config(config)

    try:
        events = load_script(script)
        rendered = to_string(events)
        if not metro_config.output.trailing_newline:
            rendered = rendered.removesuffix("\n")

        if out:
            output_file = out.resolve()
            data = rendered.encode(metro_config.output.encoding)
            output_file.write_bytes(data)
            console.print(f"[green]Diagram written:[/green] {output_file}")
        else:
            typer.echo(rendered, nl=False)

    except (MetroError, OSError, UnicodeEncodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def tracks(
    script: Annotated[
        Path,
        typer.Argument(help="Event script (.json, .yaml or .yml)")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .metro.json)")
    ] = None,
) -> None:
    """Show the tracks still live after an event script."""
    _load_config(config)

    try:
        events = load_script(script)
    except MetroError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    interpreter = Interpreter()
    row_count = sum(1 for _ in interpreter.iter_rows(events))
    logger.info(f"Rendered {row_count} rows")

    table = Table(title=f"Live tracks ({len(interpreter.tracks)})")
    table.add_column("Column", justify="right")
    table.add_column("Track", justify="right")
    for column, track_id in enumerate(interpreter.tracks):
        table.add_row(str(column), str(track_id))

    console.print(table)


if __name__ == "__main__":
    app()
