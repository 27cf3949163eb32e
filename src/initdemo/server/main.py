from __future__ import annotations

from pathlib import Path

import typer
import uvicorn
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config.loader import load_server_config
from ..config.models import ServerConfig
from .app import create_app

app = typer.Typer(add_completion=False, help="Serve the sample file over HTTP through the init-demo reader.")
console = Console()


def _build_config(
    config: Path | None,
    host: str | None,
    port: int | None,
    file: str | None,
    base_dir: Path | None,
    inline: bool | None,
) -> ServerConfig:
    try:
        cfg = load_server_config(cwd=Path.cwd(), explicit_path=config)
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    overrides: dict = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if file is not None:
        overrides["sample_file"] = file
    if base_dir is not None:
        overrides["base_dir"] = str(base_dir)
    if inline is not None:
        overrides["invoke"] = "inline" if inline else "process"
    try:
        cfg.apply(overrides, relative_to=Path.cwd())
    except ValueError as e:
        raise typer.BadParameter(str(e))
    return cfg


def _print_banner(cfg: ServerConfig) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_row("[bold green]listen[/bold green]", f"[bright_cyan]http://{cfg.host}:{cfg.port}[/bright_cyan]")
    table.add_row("[bold green]file[/bold green]", f"[bright_cyan]{cfg.sample_file}[/bright_cyan]")
    table.add_row("[bold green]base_dir[/bold green]", f"[bright_cyan]{cfg.base_dir}[/bright_cyan]")
    table.add_row("[bold green]invoke[/bold green]", f"[bright_cyan]{cfg.invoke}[/bright_cyan]")
    table.add_row("[bold green]config[/bold green]", f"[bright_cyan]{cfg.loaded_from or '(defaults)'}[/bright_cyan]")
    console.print(Align.center(Panel(table, title="[bold magenta]init-demo server[/bold magenta]", border_style="bright_blue")))


@app.command()
def serve(
    config: Path = typer.Option(None, "--config", help="YAML config path (default: ./initdemo.yaml if present)."),
    host: str = typer.Option(None, "--host", help="Interface to bind (default 0.0.0.0)."),
    port: int = typer.Option(None, "--port", help="Port to listen on (default 3000)."),
    file: str = typer.Option(None, "--file", "-f", help="Sample file handed to the reader (default sample.txt)."),
    base_dir: Path = typer.Option(None, "--base-dir", help="Directory the sample file is resolved against."),
    inline: bool = typer.Option(None, "--inline/--process", help="Read in-process instead of spawning the reader."),
):
    cfg = _build_config(config, host, port, file, base_dir, inline)
    _print_banner(cfg)
    console.print(f"Server is running on port {cfg.port}")
    uvicorn.run(create_app(cfg), host=cfg.host, port=cfg.port)


def run() -> None:
    app(prog_name="init-demo-server")


if __name__ == "__main__":
    run()
