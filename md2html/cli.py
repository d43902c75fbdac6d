"""CLI entry point for md2html."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from md2html.config import Md2HtmlConfig, load_config
from md2html.converter import convert_file
from md2html.errors import ConversionError
from md2html.log import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="md2html",
    help="Convert a Markdown file to HTML.",
    add_completion=False,
)

err_console = Console(stderr=True, soft_wrap=True, highlight=False)

USAGE = (
    "USAGE: md2html [markdown file] [output file]\n"
    "The name of the output file will be the same with '.html' appended."
)


def _load_config() -> Md2HtmlConfig:
    try:
        return load_config()
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def main(
    markdown_file: Annotated[
        str | None, typer.Argument(help="Markdown file to convert", show_default=False)
    ] = None,
    output_file: Annotated[
        str | None,
        typer.Argument(help="Output file (default: <markdown file name>.html)", show_default=False),
    ] = None,
) -> None:
    """Convert MARKDOWN_FILE to HTML."""
    if markdown_file is None:
        typer.echo(USAGE)
        raise typer.Exit(1)

    cfg = _load_config()
    setup_logging(cfg)

    try:
        result = convert_file(markdown_file, output_file, config=cfg)
    except ConversionError as e:
        logger.debug("%s failed on %s", e.operation, e.path, exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.debug(
        "converted %s -> %s (%d -> %d bytes)",
        result.source_path,
        result.output_path,
        result.input_bytes,
        result.output_bytes,
    )


if __name__ == "__main__":
    app()
