# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses and protocols describing command runner results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from ..constants import EXIT_FAILURE, EXIT_SUCCESS
from ..errors import CommandFailure


class RunStatus(StrEnum):
    """Outcome of a single configured command."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of executing one configured command."""

    command: str
    argv: tuple[str, ...]
    returncode: int
    output: str = ""
    streamed: bool = False
    timed_out: bool = False

    @property
    def status(self) -> RunStatus:
        """Return whether the command succeeded."""

        return RunStatus.SUCCESS if self.returncode == 0 else RunStatus.FAILURE

    def to_failure(self) -> CommandFailure:
        """Return a :class:`CommandFailure` describing this outcome."""

        return CommandFailure(self.command, returncode=self.returncode, output=self.output)


@dataclass(slots=True)
class RunSummary:
    """Aggregate of every command executed during a run, in execution order."""

    outcomes: list[CommandOutcome] = field(default_factory=list)
    failure: CommandFailure | None = None

    @property
    def passed(self) -> bool:
        """Return ``True`` when no command failed."""

        return self.failure is None

    @property
    def exit_code(self) -> int:
        """Return the process exit status matching the run outcome."""

        return EXIT_SUCCESS if self.passed else EXIT_FAILURE


class RunLogger(Protocol):
    """Output surface consumed by the runner."""

    def info(self, message: str) -> None: ...

    def ok(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def echo(self, message: str) -> None: ...

    def stream(self, chunk: str) -> None: ...


__all__ = ["CommandOutcome", "RunLogger", "RunStatus", "RunSummary"]
