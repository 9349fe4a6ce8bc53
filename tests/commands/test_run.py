"""Tests for the run command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from deptctl.cli import cli


class TestRunScript:
    def test_runs_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        script = tmp_path / "staff.txt"
        script.write_text("add Sam to HR\nadd Kyle to Finance\nlist\n")
        result = cli_runner.invoke(cli, ["run", str(script)])
        assert result.exit_code == 0
        assert result.stdout.endswith("Finance\n\tKyle\n\nHR\n\tSam\n\n")

    def test_reads_stdin_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run"], input="add Sam to HR\nlist HR\n")
        assert result.exit_code == 0
        assert result.stdout == "Successfully added Sam into HR.\nSam\n"

    def test_stops_at_quit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "-"], input="add Sam to HR\nquit\nlist\n")
        assert result.exit_code == 0
        assert result.stdout == "Successfully added Sam into HR.\n"

    def test_no_banner(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run"], input="list\n")
        assert "Giggle" not in result.stdout

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["run", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2


class TestRunIllegalLines:
    def test_reported_with_line_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run"], input="add Sam to HR\n\nadd Kyle to Finance extra\nlist\n")
        assert result.exit_code == 0
        assert result.stderr == "line 3: Found too many tokens for the add command.\n"
        assert result.stdout.endswith("HR\n\tSam\n\n")

    def test_strict_exits_on_first_illegal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "--strict"], input="delete Sam\nadd Sam to HR\n")
        assert result.exit_code == 1
        assert result.stderr == "line 1: Unknown command.\n"
        assert result.stdout == ""

    def test_json_includes_line_meta(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "run"], input="add Sam to hr\n")
        payload = json.loads(result.stderr)
        assert payload["meta"] == {"line": 1}
        assert payload["error"]["message"] == "Department not found."
