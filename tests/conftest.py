"""Shared pytest fixtures and test helpers for deptctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from deptctl.services.interpreter import Interpreter


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir so no stray deptctl.toml is found."""
    monkeypatch.delenv("DEPTCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


STAFF_SCRIPT = [
    "add Sam to HR",
    "add Kyle to Finance",
    "add Annie to Finance",
    "add Bobby to Sales",
]


@pytest.fixture
def staff_script() -> list[str]:
    """Commands of the four-employee scenario."""
    return list(STAFF_SCRIPT)


@pytest.fixture
def interpreter() -> Interpreter:
    """Interpreter over an empty directory."""
    return Interpreter()


@pytest.fixture
def staffed_interpreter(interpreter: Interpreter) -> Interpreter:
    """Interpreter after the four-employee scenario has been entered."""
    for line in STAFF_SCRIPT:
        result = interpreter.execute(line)
        assert result.ok, result.error
    return interpreter


