from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

INVOKE_MODES = ("process", "inline")


@dataclass
class ServerConfig:
    """Settings for the HTTP wrapper.

    Defaults reproduce the fixed behaviour: port 3000, `sample.txt` read from
    the working directory by a spawned reader process.
    """

    host: str = "0.0.0.0"
    port: int = 3000
    sample_file: str = "sample.txt"
    base_dir: Path = field(default_factory=Path.cwd)
    invoke: str = "process"
    # argv prefix for the reader; `-f <sample_file>` is appended
    reader_command: list[str] | None = None

    loaded_from: Path | None = None

    def apply(self, obj: dict[str, Any], *, relative_to: Path) -> None:
        """Overlay values from a parsed config mapping, validating each one."""
        if "host" in obj:
            host = obj["host"]
            if not isinstance(host, str) or not host.strip():
                raise ValueError("server.host must be a non-empty string.")
            self.host = host.strip()

        if "port" in obj:
            port = obj["port"]
            if isinstance(port, str) and port.strip().isdigit():
                port = int(port.strip())
            if isinstance(port, bool) or not isinstance(port, int) or not (0 < port < 65536):
                raise ValueError(f"server.port must be an integer in 1..65535, got {obj['port']!r}.")
            self.port = port

        if "sample_file" in obj:
            sf = obj["sample_file"]
            if not isinstance(sf, str) or not sf.strip():
                raise ValueError("server.sample_file must be a non-empty string.")
            self.sample_file = sf.strip()

        if "base_dir" in obj:
            bd = obj["base_dir"]
            if not isinstance(bd, str) or not bd.strip():
                raise ValueError("server.base_dir must be a non-empty string.")
            p = Path(bd.strip()).expanduser()
            self.base_dir = p if p.is_absolute() else (relative_to / p).resolve()

        if "invoke" in obj:
            mode = obj["invoke"]
            if mode not in INVOKE_MODES:
                raise ValueError(f"server.invoke must be one of {', '.join(INVOKE_MODES)}; got {mode!r}.")
            self.invoke = mode

        if "reader_command" in obj:
            cmd = obj["reader_command"]
            if cmd is not None and (
                not isinstance(cmd, list) or not cmd or not all(isinstance(x, str) for x in cmd)
            ):
                raise ValueError("server.reader_command must be a non-empty list of strings.")
            self.reader_command = [str(x) for x in cmd] if cmd else None
