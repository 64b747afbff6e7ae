"""Shared fixtures and helpers for lineecho tests."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from lineecho.helpers import reload_config

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop LINEECHO_* variables so every test starts from the defaults."""
    for key in list(os.environ):
        if key.startswith("LINEECHO_"):
            monkeypatch.delenv(key, raising=False)
    reload_config()
    yield
    monkeypatch.undo()
    reload_config()


def _run_module(
    *args: object,
    stdin: str | bytes | None = None,
    timeout: float = 20.0,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess:
    """Execute ``python -m lineecho …`` from the repository root."""
    cmd = [sys.executable, "-m", "lineecho", *map(str, args)]

    env_vars = os.environ.copy() if env is None else env.copy()
    existing_path = env_vars.get("PYTHONPATH", "")
    path_parts = [str(REPO_ROOT)]
    if existing_path:
        path_parts.append(existing_path)
    env_vars["PYTHONPATH"] = os.pathsep.join(path_parts)

    if isinstance(stdin, bytes):
        # Raw bytes keep the interpreter's own stdio error handler
        return subprocess.run(
            cmd,
            cwd=REPO_ROOT,
            input=stdin,
            capture_output=True,
            timeout=timeout,
            env=env_vars,
        )
    env_vars.setdefault("PYTHONIOENCODING", "utf-8")
    return subprocess.run(
        cmd,
        cwd=REPO_ROOT,
        input=stdin if stdin is not None else "",
        text=True,
        capture_output=True,
        timeout=timeout,
        encoding="utf-8",
        errors="replace",
        env=env_vars,
    )


@pytest.fixture
def run_module() -> Callable[..., subprocess.CompletedProcess]:
    """Black-box runner for the installed module."""
    return _run_module
