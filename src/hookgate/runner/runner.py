# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential, fail-fast execution of the configured pre-commit commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..config.models import HookgateConfig
from ..constants import BYPASS_ADVICE
from .executor import OutputSink, execute_command
from .models import CommandOutcome, RunLogger, RunStatus, RunSummary

CommandExecutor = Callable[..., CommandOutcome]


def run_commands(
    config: HookgateConfig,
    *,
    logger: RunLogger,
    executor: CommandExecutor = execute_command,
    cwd: Path | None = None,
) -> RunSummary:
    """Run every configured command in order, stopping at the first failure.

    Args:
        config: Resolved configuration listing the commands to execute.
        logger: Output surface for progress, streamed output, and errors.
        executor: Callable running one command; replaced in tests.
        cwd: Working directory for the commands.

    Returns:
        RunSummary: Outcomes of the commands that ran and the failure, if any.
    """

    logger.info("Pre-commit running...")
    summary = RunSummary()
    sink: OutputSink = logger.stream
    for command in config.commands:
        outcome = executor(
            command,
            tool=config.tool,
            verbose=config.verbose,
            sink=sink,
            timeout=config.timeout,
            cwd=cwd,
        )
        summary.outcomes.append(outcome)
        if outcome.status is RunStatus.SUCCESS:
            logger.ok(f"{command} ran successfully.")
            continue

        if not outcome.streamed and outcome.output:
            logger.echo(outcome.output.rstrip("\n"))
        summary.failure = outcome.to_failure()
        logger.fail(f"Pre-commit failed on `{command}`.")
        logger.warn(BYPASS_ADVICE)
        return summary

    logger.ok("Pre-commit passed!")
    return summary


def run_all(
    config: HookgateConfig,
    *,
    logger: RunLogger,
    executor: CommandExecutor = execute_command,
    cwd: Path | None = None,
) -> int:
    """Run the configured commands and return the exit status for the hook.

    Returns:
        int: ``0`` when every command passed (or none were configured), ``1`` otherwise.
    """

    return run_commands(config, logger=logger, executor=executor, cwd=cwd).exit_code


__all__ = ["CommandExecutor", "run_all", "run_commands"]
