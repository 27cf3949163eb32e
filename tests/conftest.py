from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
SAMPLE_TEXT = "This is a sample demo file.\n"


@pytest.fixture(autouse=True)
def _importable_from_children(monkeypatch):
    # Spawned `python -m initdemo` processes must find the package even
    # when it is not installed.
    existing = os.environ.get("PYTHONPATH")
    path = str(SRC_DIR) if not existing else os.pathsep.join([str(SRC_DIR), existing])
    monkeypatch.setenv("PYTHONPATH", path)
    monkeypatch.setenv("PYTHONIOENCODING", "utf-8")


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    (tmp_path / "sample.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def run_cli():
    def _run(*args: str, cwd: Path) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "initdemo", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=dict(os.environ),
        )

    return _run
