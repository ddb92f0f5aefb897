#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the envar command-line interface."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
import pytest

from envar.cli import main as cli_main
from envar.commands import select_validator
from envar.validators import OPTIONAL, OPTIONAL_NON_EMPTY, REQUIRED, REQUIRED_NON_EMPTY


@pytest.fixture
def runner(clean_environ: pytest.MonkeyPatch) -> CliRunner:
    return CliRunner()


class TestCliGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "get" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["--version"])
        assert result.exit_code == 0
        assert "envar version" in result.output


class TestCheckCommand:
    """Test suite for 'envar check'."""

    def test_reports_sources(self, runner: CliRunner, secret_file: Path) -> None:
        result = runner.invoke(
            cli_main,
            ["check", "ENVAR_TEST", "SECRET", "PORT", "--default", "PORT=8080"],
            env={"ENVAR_TEST": "direct", "SECRET_FILE": str(secret_file)},
        )
        assert result.exit_code == 0, result.output
        assert "ENVAR_TEST: environment" in result.output
        assert "SECRET: file" in result.output
        assert "PORT: default" in result.output
        assert "s3cr3t" not in result.output

    def test_missing_required_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["check", "SECRET"])
        assert result.exit_code == 1

    def test_missing_optional_passes(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["check", "SECRET", "--optional"])
        assert result.exit_code == 0
        assert "SECRET: none" in result.output

    def test_unreadable_file_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli_main,
            ["check", "SECRET", "--default", "SECRET=fallback"],
            env={"SECRET_FILE": "/nonexistent/path"},
        )
        assert result.exit_code == 1

    def test_non_empty_rejects_empty_default(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["check", "PORT", "--non-empty", "--default", "PORT="])
        assert result.exit_code == 1

    def test_bad_default_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["check", "PORT", "--default", "PORT"])
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output


class TestGetCommand:
    """Test suite for 'envar get'."""

    def test_prints_file_value_verbatim(self, runner: CliRunner, secret_file: Path) -> None:
        result = runner.invoke(cli_main, ["get", "SECRET"], env={"SECRET_FILE": str(secret_file)})
        assert result.exit_code == 0
        assert result.stdout == "s3cr3t\n"

    def test_prints_default(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["get", "PORT", "--default", "8080"])
        assert result.exit_code == 0
        assert result.stdout == "8080"

    def test_optional_without_value(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["get", "SECRET", "--optional"])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_nul_byte_file_fails_cleanly(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "nul.txt"
        path.write_bytes(b"a\x00b")
        result = runner.invoke(cli_main, ["get", "SECRET"], env={"SECRET_FILE": str(path)})
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)

    def test_required_without_value(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_main, ["get", "SECRET"])
        assert result.exit_code == 1


class TestSelectValidator:
    def test_flag_combinations(self) -> None:
        assert select_validator(False, False) is REQUIRED
        assert select_validator(False, True) is REQUIRED_NON_EMPTY
        assert select_validator(True, False) is OPTIONAL
        assert select_validator(True, True) is OPTIONAL_NON_EMPTY


# 🌍🔑🔚
