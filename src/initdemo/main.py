from __future__ import annotations

import asyncio
import sys

import click
import typer
from rich.console import Console
from rich.text import Text

from . import __version__
from .reader import read_file

app = typer.Typer(add_completion=False, help="Init Demo CLI Tool: print the contents of a file.")
# Colour only on a real terminal; piped stderr ends up in the server's JSON.
err_console = Console(stderr=True, force_terminal=sys.stderr.isatty())


def _fail(message: str) -> None:
    err_console.print(Text(message, style="red"), soft_wrap=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def init_demo(
    file: str = typer.Option(None, "--file", "-f", metavar="<path>", help="Path to the input file."),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    if not file:
        _fail("Error: No file path provided. Use -f <path> to specify the file.")

    result = asyncio.run(read_file(file))
    if not result.ok:
        _fail(result.error_line)

    sys.stdout.write(result.content)
    sys.stdout.flush()


def run() -> None:
    # Click exits 2 on usage errors; every failure of this tool exits 1.
    try:
        code = app(prog_name="init-demo", standalone_mode=False)
    except click.ClickException as e:
        err_console.print(Text(f"Error: {e.format_message()}", style="red"), soft_wrap=True)
        raise SystemExit(1)
    except click.exceptions.Abort:
        raise SystemExit(1)
    raise SystemExit(code if isinstance(code, int) else 0)


if __name__ == "__main__":
    run()
