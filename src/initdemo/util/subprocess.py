from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

@dataclass
class CmdResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

async def run_cmd_async(
    cmd: Sequence[str],
    cwd: str,
    env: Optional[Mapping[str, str]] = None,
) -> CmdResult:
    """Spawn `cmd` and wait for it without blocking the event loop.

    Raises OSError when the process cannot be launched. There is no timeout:
    a hung child keeps the caller waiting.
    """
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=cwd,
        env=dict(env) if env is not None else None,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    out, err = await proc.communicate()
    return CmdResult(
        proc.returncode if proc.returncode is not None else -1,
        out.decode("utf-8", errors="replace"),
        err.decode("utf-8", errors="replace"),
    )
