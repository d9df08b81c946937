# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the install and run commands."""

from __future__ import annotations

from pathlib import Path

import click
from typer.testing import CliRunner

from hookgate.cli.app import app
from hookgate.cli.typer_ext import option_sort_key
from hookgate.constants import HOOK_MARKER


def test_install_cli_writes_hook(git_repo: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(git_repo), "--no-emoji"])

    assert result.exit_code == 0
    hook = git_repo / ".git" / "hooks" / "pre-commit"
    assert HOOK_MARKER in hook.read_text(encoding="utf-8")
    assert "Installed pre-commit hook" in result.stdout
    assert "✅" not in result.stdout


def test_install_cli_outside_repository_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Not a git repository" in result.stdout
    assert not (tmp_path / ".git").exists()


def test_install_cli_dry_run(git_repo: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(git_repo), "--dry-run"])

    assert result.exit_code == 0
    assert "DRY RUN" in result.stdout
    assert not (git_repo / ".git" / "hooks" / "pre-commit").exists()


def test_install_cli_uses_configured_metadata_dir(tmp_path: Path) -> None:
    (tmp_path / ".vcs").mkdir()
    (tmp_path / ".hookgate.toml").write_text('metadata_dir = ".vcs"\n', encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert (tmp_path / ".vcs" / "hooks" / "pre-commit").is_file()


def test_run_cli_passes(tmp_path: Path, make_script, python_tool, write_pyproject) -> None:
    script = make_script("quiet", 'print("hidden output")\n')
    write_pyproject(tmp_path, commands=[script], tool=python_tool)
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 0
    assert "Pre-commit passed!" in result.stdout
    assert "hidden output" not in result.stdout


def test_run_cli_verbose_flag_streams_output(tmp_path: Path, make_script, python_tool, write_pyproject) -> None:
    script = make_script("loud", 'print("shown output")\n')
    write_pyproject(tmp_path, commands=[script], tool=python_tool)
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--verbose"])

    assert result.exit_code == 0
    assert "shown output" in result.stdout


def test_run_cli_failure_exits_one(tmp_path: Path, make_script, python_tool, write_pyproject) -> None:
    script = make_script("broken", 'import sys\nprint("assertion details")\nsys.exit(2)\n')
    write_pyproject(tmp_path, commands=[script], tool=python_tool)
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "assertion details" in result.stdout
    assert "--no-verify" in result.stdout


def test_run_cli_with_no_commands_passes(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert "Pre-commit passed!" in result.stdout


def test_run_cli_reports_config_errors(tmp_path: Path) -> None:
    (tmp_path / ".hookgate.toml").write_text("verbose = 'sometimes'\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Invalid hookgate configuration" in result.stdout


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "install" in result.stdout
    assert "run" in result.stdout


def test_option_sort_key_orders_by_long_name_with_help_last() -> None:
    params = [
        click.Option(["--root", "-r"]),
        click.Option(["--help"], is_flag=True),
        click.Option(["--emoji/--no-emoji"]),
        click.Option(["-c", "--config"]),
    ]

    ordered = sorted(params, key=option_sort_key)

    assert [param.name for param in ordered] == ["config", "emoji", "root", "help"]
    assert option_sort_key(params[2]) == (False, "emoji")


def test_subcommand_help_lists_options_alphabetically() -> None:
    result = CliRunner().invoke(app, ["install", "--help"])

    assert result.exit_code == 0
    out = result.stdout
    positions = [out.index(flag) for flag in ("--dry-run", "--emoji", "--metadata-dir", "--root", "--help")]
    assert positions == sorted(positions)
