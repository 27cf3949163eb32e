from __future__ import annotations
import os
from pathlib import Path

class FsError(RuntimeError):
    pass

class MissingArgumentError(FsError):
    pass

class NotFoundError(FsError):
    def __init__(self, path: Path):
        super().__init__(f'File not found at path "{path}"')
        self.path = path

class ReadFailedError(FsError):
    def __init__(self, path: Path, reason: str):
        super().__init__(reason)
        self.path = path

def resolve_path(cwd: Path, path_str: str) -> Path:
    if not path_str:
        raise MissingArgumentError("No file path provided. Use -f <path> to specify the file.")
    p = Path(path_str)
    if not p.is_absolute():
        p = Path(cwd) / p
    # normpath only: symlinks stay as the caller named them
    return Path(os.path.normpath(p.absolute()))

def check_exists(path: Path) -> Path:
    if not path.exists():
        raise NotFoundError(path)
    return path

def read_text(path: Path) -> str:
    """Strict UTF-8 read; newlines are returned untouched."""
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailedError(path, _describe(e)) from e

def _describe(e: Exception) -> str:
    if isinstance(e, OSError) and e.strerror:
        name = e.filename if e.filename is not None else ""
        return f"{e.strerror}: {name}" if name else e.strerror
    return str(e)
