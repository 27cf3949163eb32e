from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from ..config.models import ServerConfig
from ..reader import read_file
from ..util.subprocess import run_cmd_async
from .models import ResponseEnvelope

console = Console()


def default_reader_command() -> list[str]:
    return [sys.executable, "-m", "initdemo"]


@dataclass
class RequestHandler:
    """Serves the configured sample file by running the reader for each request."""

    config: ServerConfig

    def command(self) -> list[str]:
        base = list(self.config.reader_command or default_reader_command())
        return base + ["-f", self.config.sample_file]

    async def handle(self) -> tuple[int, ResponseEnvelope]:
        if self.config.invoke == "inline":
            return await self._handle_inline()
        return await self._handle_process()

    async def _handle_process(self) -> tuple[int, ResponseEnvelope]:
        env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
        try:
            res = await run_cmd_async(self.command(), cwd=str(self.config.base_dir), env=env)
        except OSError as e:
            details = f"failed to launch reader: {e}"
            console.print(f"[red]Error executing reader script:[/red] {escape(details)}", soft_wrap=True)
            return 500, ResponseEnvelope.failure(details)

        if not res.ok:
            console.print(
                f"[red]Error executing reader script (exit {res.returncode}):[/red] {escape(res.stderr.rstrip())}",
                soft_wrap=True,
            )
            return 500, ResponseEnvelope.failure(res.stderr)

        console.print(f"Reader script output: {escape(res.stdout)}", soft_wrap=True)
        return 200, ResponseEnvelope.success(res.stdout)

    async def _handle_inline(self) -> tuple[int, ResponseEnvelope]:
        result = await read_file(self.config.sample_file, cwd=self.config.base_dir)
        if not result.ok:
            console.print(f"[red]Error reading sample file:[/red] {escape(result.error_line)}", soft_wrap=True)
            return 500, ResponseEnvelope.failure(result.error_line + "\n")

        console.print(f"Reader output: {escape(result.content)}", soft_wrap=True)
        return 200, ResponseEnvelope.success(result.content)
