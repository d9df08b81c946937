# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for sequential, fail-fast command execution."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from hookgate.cli.shared import build_cli_logger
from hookgate.config import HookgateConfig
from hookgate.runner import CommandOutcome, run_all, run_commands


class FakeExecutor:
    """Record executed commands and return scripted exit codes."""

    def __init__(self, returncodes: dict[str, int], outputs: dict[str, str] | None = None) -> None:
        self.returncodes = returncodes
        self.outputs = outputs or {}
        self.calls: list[str] = []

    def __call__(
        self,
        command: str,
        *,
        tool: Sequence[str],
        verbose: bool,
        sink,
        timeout: float | None = None,
        cwd: Path | None = None,
    ) -> CommandOutcome:
        self.calls.append(command)
        output = self.outputs.get(command, "")
        if verbose and output:
            sink(output)
        return CommandOutcome(
            command=command,
            argv=(*tool, command),
            returncode=self.returncodes.get(command, 0),
            output=output,
            streamed=verbose,
        )


@pytest.fixture
def logger():
    return build_cli_logger(emoji=False)


def test_fail_fast_stops_after_first_failure(logger, capsys: pytest.CaptureFixture[str]) -> None:
    executor = FakeExecutor({"a": 0, "b": 1, "c": 0})
    config = HookgateConfig(commands=["a", "b", "c"])

    summary = run_commands(config, logger=logger, executor=executor)

    assert executor.calls == ["a", "b"]
    assert summary.exit_code == 1
    assert not summary.passed
    assert summary.failure is not None
    assert summary.failure.command == "b"
    out = capsys.readouterr().out
    assert "a ran successfully." in out
    assert "Pre-commit failed on `b`." in out
    assert "--no-verify" in out
    assert "Pre-commit passed!" not in out


def test_all_pass_reports_banner_after_commands(logger, capsys: pytest.CaptureFixture[str]) -> None:
    executor = FakeExecutor({"a": 0, "b": 0})

    exit_code = run_all(HookgateConfig(commands=["a", "b"]), logger=logger, executor=executor)

    assert exit_code == 0
    assert executor.calls == ["a", "b"]
    out = capsys.readouterr().out
    assert out.index("Pre-commit running...") < out.index("a ran successfully.")
    assert out.index("a ran successfully.") < out.index("b ran successfully.")
    assert out.index("b ran successfully.") < out.index("Pre-commit passed!")


def test_empty_command_list_passes(logger, capsys: pytest.CaptureFixture[str]) -> None:
    executor = FakeExecutor({})

    assert run_all(HookgateConfig(), logger=logger, executor=executor) == 0
    assert executor.calls == []
    assert "Pre-commit passed!" in capsys.readouterr().out


def test_quiet_mode_prints_output_of_failing_command_only(logger, capsys: pytest.CaptureFixture[str]) -> None:
    executor = FakeExecutor({"lint": 0, "test": 1}, outputs={"lint": "lint-noise\n", "test": "test-trace\n"})

    run_all(HookgateConfig(commands=["lint", "test"]), logger=logger, executor=executor)

    out = capsys.readouterr().out
    assert "lint-noise" not in out
    assert out.count("test-trace") == 1


def test_verbose_mode_does_not_repeat_streamed_output(logger, capsys: pytest.CaptureFixture[str]) -> None:
    executor = FakeExecutor({"lint": 0, "test": 1}, outputs={"lint": "lint-noise\n", "test": "test-trace\n"})

    run_all(HookgateConfig(commands=["lint", "test"], verbose=True), logger=logger, executor=executor)

    out = capsys.readouterr().out
    assert out.count("lint-noise") == 1
    assert out.count("test-trace") == 1


def test_config_is_forwarded_to_executor(logger, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def executor(command: str, **kwargs: object) -> CommandOutcome:
        seen.update(kwargs)
        return CommandOutcome(command=command, argv=(command,), returncode=0)

    config = HookgateConfig(commands=["x"], tool=["poetry", "run"], timeout=5)
    run_all(config, logger=logger, executor=executor, cwd=tmp_path)

    assert seen["tool"] == ["poetry", "run"]
    assert seen["timeout"] == 5
    assert seen["verbose"] is False
    assert seen["cwd"] == tmp_path


def test_real_commands_fail_fast(logger, make_script, python_tool, tmp_path: Path) -> None:
    sentinel = tmp_path / "third-ran"
    first = make_script("first", 'print("first ok")\n')
    second = make_script("second", 'import sys\nprint("second broke")\nsys.exit(1)\n')
    third = make_script("third", f"from pathlib import Path\nPath({str(sentinel)!r}).write_text('x')\n")
    config = HookgateConfig(commands=[first, second, third], tool=python_tool)

    assert run_all(config, logger=logger) == 1
    assert not sentinel.exists()


def test_real_verbose_run_streams_successful_output(
    logger, make_script, python_tool, capsys: pytest.CaptureFixture[str]
) -> None:
    script = make_script("hello", 'print("hello from command")\n')

    assert run_all(HookgateConfig(commands=[script], tool=python_tool, verbose=True), logger=logger) == 0
    assert "hello from command" in capsys.readouterr().out

    assert run_all(HookgateConfig(commands=[script], tool=python_tool), logger=logger) == 0
    assert "hello from command" not in capsys.readouterr().out


def test_undecodable_output_fails_the_run_cleanly(
    logger, make_script, python_tool, capsys: pytest.CaptureFixture[str]
) -> None:
    script = make_script("latin1", 'import sys\nsys.stdout.buffer.write(b"caf\\xe9\\n")\nsys.exit(1)\n')

    assert run_all(HookgateConfig(commands=[script], tool=python_tool), logger=logger) == 1
    out = capsys.readouterr().out
    assert "caf\ufffd" in out
    assert f"Pre-commit failed on `{script}`." in out


def test_non_executable_command_fails_the_run(logger, make_script, tmp_path: Path) -> None:
    sentinel = tmp_path / "after-ran"
    blocked = Path(make_script("blocked", 'print("blocked")\n'))
    blocked.chmod(0o644)
    after = make_script("after", f"from pathlib import Path\nPath({str(sentinel)!r}).write_text('x')\n")
    config = HookgateConfig(commands=[str(blocked), after], tool=[])

    assert run_all(config, logger=logger) == 1
    assert not sentinel.exists()
