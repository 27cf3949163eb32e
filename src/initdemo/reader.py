from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .util.fs import (
    MissingArgumentError,
    NotFoundError,
    ReadFailedError,
    check_exists,
    read_text,
    resolve_path,
)


class FailureKind(str, Enum):
    MISSING_ARGUMENT = "MissingArgument"
    NOT_FOUND = "NotFound"
    READ_ERROR = "ReadError"


@dataclass
class ReadResult:
    """Outcome of one read: either `content` or a `failure` with its message."""

    content: str = ""
    failure: FailureKind | None = None
    message: str = ""
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def error_line(self) -> str:
        # Same wording the CLI writes to stderr.
        if self.failure is FailureKind.READ_ERROR:
            return f"Error reading file: {self.message}"
        return f"Error: {self.message}"


async def read_file(path_str: str | None, cwd: Path | None = None) -> ReadResult:
    """Validate `path_str`, resolve it against `cwd` and read it as UTF-8.

    The existence check is synchronous; the read itself runs in a worker
    thread so the event loop stays free.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    try:
        p = resolve_path(base, path_str or "")
    except MissingArgumentError as e:
        return ReadResult(failure=FailureKind.MISSING_ARGUMENT, message=str(e))

    try:
        check_exists(p)
    except NotFoundError as e:
        return ReadResult(failure=FailureKind.NOT_FOUND, message=str(e), path=p)

    try:
        text = await asyncio.to_thread(read_text, p)
    except ReadFailedError as e:
        return ReadResult(failure=FailureKind.READ_ERROR, message=str(e), path=p)
    return ReadResult(content=text, path=p)
