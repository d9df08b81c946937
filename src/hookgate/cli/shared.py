# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging and exit handling)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

import typer

from ..errors import HookgateError
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji)

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def stream(self, chunk: str) -> None:
        """Write subprocess output exactly as produced, flushing immediately."""

        typer.echo(chunk, nl=False)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.

    Returns:
        CLILogger: Logger routing messages through the shared Rich consoles.
    """

    return CLILogger(use_emoji=emoji)


def exit_with_error(exc: HookgateError, *, logger: CLILogger) -> NoReturn:
    """Report ``exc`` on a single line and terminate with its exit status.

    Raises:
        typer.Exit: Always raised with ``exc.exit_code``.
    """

    logger.fail(str(exc))
    raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["CLILogger", "build_cli_logger", "exit_with_error"]
