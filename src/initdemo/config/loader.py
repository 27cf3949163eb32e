from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir

from .models import ServerConfig

APP_NAME = "initdemo"

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(cwd: Path) -> list[Path]:
    # project-level (higher priority)
    return [
        cwd / ".initdemo.yaml",
        cwd / "initdemo.yaml",
    ]


def _global_candidate_paths() -> list[Path]:
    cfg_dir = Path(user_config_dir(APP_NAME))
    return [cfg_dir / "initdemo.yaml"]


def _expand_env_placeholders(s: str) -> str:
    def repl(m: re.Match) -> str:
        var = m.group(1)
        val = os.getenv(var)
        if val is None:
            raise ValueError(f"Config placeholder '${{{var}}}' not found in environment.")
        return val

    return _ENV_PATTERN.sub(repl, s)


def _expand(obj: Any) -> Any:
    if isinstance(obj, str):
        return _expand_env_placeholders(obj)
    if isinstance(obj, list):
        return [_expand(x) for x in obj]
    if isinstance(obj, dict):
        return {k: _expand(v) for k, v in obj.items()}
    return obj


def _load_yaml(p: Path) -> dict[str, Any]:
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a mapping.")
    server = data.get("server", {}) or {}
    if not isinstance(server, dict):
        raise ValueError(f"{p}: 'server:' must be a mapping.")
    return _expand(server)


def load_server_config(*, cwd: Path, explicit_path: Path | None = None) -> ServerConfig:
    """Load server config.

    Merge order: defaults < global < project < explicit_path. Relative
    `base_dir` values resolve against the directory of the file declaring them.
    """
    cfg = ServerConfig(base_dir=cwd)

    for p in _global_candidate_paths():
        if p.is_file():
            cfg.apply(_load_yaml(p), relative_to=p.parent)
            cfg.loaded_from = p

    for p in _candidate_paths(cwd):
        if p.is_file():
            cfg.apply(_load_yaml(p), relative_to=p.parent)
            cfg.loaded_from = p
            break  # first match wins for project-level

    if explicit_path is not None:
        p = explicit_path.expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Config YAML not found: {p}")
        cfg.apply(_load_yaml(p), relative_to=p.parent)
        cfg.loaded_from = p

    return cfg
