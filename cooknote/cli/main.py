"""Main CLI entrypoint for cooknote.

Provides commands for inspecting and reformatting recipe files.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax

from cooknote import __version__
from cooknote.config import get_config
from cooknote.errors import CooknoteError
from cooknote.images import build_image_url
from cooknote.models import ImageURLOptions
from cooknote.parser import parse
from cooknote.serializer import serialize

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging with rich output."""
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format=config.logging.format,
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def read_source(source: TextIO) -> str:
    """Read recipe text from an open file, reporting decode failures."""
    try:
        return source.read()
    except UnicodeDecodeError as exc:
        raise click.UsageError(f"Cannot decode {source.name} as UTF-8.") from exc


@click.group()
@click.version_option(version=__version__, prog_name="cooknote")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cooknote - read and write Cooklang recipes."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        get_config().logging.level = "DEBUG"

    setup_logging()


@cli.command("parse")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--indent", type=int, default=None, help="JSON indent (default: from config)")
def parse_command(source: TextIO, indent: int | None) -> None:
    """Print the parsed structure of a recipe as JSON.

    SOURCE: Path to a .cook file, or - for stdin.
    """
    config = get_config()
    indent = config.output.json_indent if indent is None else indent

    recipe = parse(read_source(source))
    logger.debug("Parsed %s", source.name)
    click.echo(recipe.to_json(indent=indent or None))


@cli.command("format")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--highlight/--no-highlight", default=False, help="Syntax-highlight the output")
def format_command(source: TextIO, highlight: bool) -> None:
    """Rewrite a recipe in canonical form.

    Comments are dropped and quantities are normalized.

    SOURCE: Path to a .cook file, or - for stdin.
    """
    output = serialize(parse(read_source(source)))
    if highlight:
        console.print(Syntax(output, "text", word_wrap=True))
    else:
        click.echo(output, nl=False)


@cli.command("image")
@click.argument("name")
@click.option("--step", "-s", type=int, default=None, help="Step number")
@click.option(
    "--extension",
    "-e",
    default=None,
    help="Image file extension (default: from config)",
)
def image_command(name: str, step: int | None, extension: str | None) -> None:
    """Print the image file name for a recipe or one of its steps.

    NAME: Recipe name, without the .cook extension.
    """
    config = get_config()
    options = ImageURLOptions(step=step, extension=extension or config.images.extension)

    try:
        click.echo(build_image_url(name, options))
    except CooknoteError as e:
        err_console.print(f"[red]Error:[/] {e}")
        sys.exit(1)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
