# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execute a single configured command and capture its combined output."""

from __future__ import annotations

import errno
import subprocess  # nosec B404
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..constants import EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND
from ..subprocess_utils import open_merged_process
from .models import CommandOutcome

OutputSink = Callable[[str], None]


def tokenize(command: str) -> list[str]:
    """Split ``command`` on whitespace into a program and its arguments."""

    return command.split()


def build_argv(command: str, tool: Sequence[str]) -> list[str]:
    """Return the argument vector used to run ``command`` through ``tool``.

    Args:
        command: Configured command string, e.g. ``"pytest -q"``.
        tool: Prefix naming the enclosing build tool, e.g. ``["python", "-m"]``.

    Returns:
        list[str]: Tool prefix followed by the tokenised command.
    """

    return [*tool, *tokenize(command)]


@dataclass(slots=True)
class _Watchdog:
    """Kill a process once its time budget is exhausted."""

    process: subprocess.Popen[str]
    fired: bool = False

    def __call__(self) -> None:
        self.fired = True
        self.process.kill()


def execute_command(
    command: str,
    *,
    tool: Sequence[str],
    verbose: bool,
    sink: OutputSink,
    timeout: float | None = None,
    cwd: Path | None = None,
) -> CommandOutcome:
    """Run ``command`` synchronously with stderr merged into stdout.

    Output is always captured. When ``verbose`` is set every line is also passed
    to ``sink`` as soon as the process produces it.

    Args:
        command: Configured command string.
        tool: Prefix naming the enclosing build tool.
        verbose: Stream output live through ``sink``.
        sink: Callable receiving output chunks in verbose mode.
        timeout: Optional number of seconds after which the process is killed.
        cwd: Working directory for the process.

    Returns:
        CommandOutcome: Exit status and combined output of the command.
    """

    argv = build_argv(command, tool)
    try:
        process = open_merged_process(argv, cwd=cwd)
    except OSError as exc:
        return CommandOutcome(
            command=command,
            argv=tuple(argv),
            returncode=_launch_failure_code(exc),
            output=f"{exc}\n",
        )

    watchdog = _Watchdog(process)
    timer = threading.Timer(timeout, watchdog) if timeout is not None else None
    if timer is not None:
        timer.daemon = True
        timer.start()
    try:
        output = _drain(process, verbose=verbose, sink=sink)
        returncode = process.wait()
    finally:
        if timer is not None:
            timer.cancel()

    timed_out = watchdog.fired and returncode != 0
    if timed_out:
        output += f"Command timed out after {timeout:g}s\n"
    return CommandOutcome(
        command=command,
        argv=tuple(argv),
        returncode=returncode,
        output=output,
        streamed=verbose,
        timed_out=timed_out,
    )


def _launch_failure_code(exc: OSError) -> int:
    """Map a failure to start a process onto the conventional shell exit status."""

    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return EXIT_NOT_FOUND
    # EACCES, ENOEXEC and anything else that stops exec on an existing file.
    return EXIT_NOT_EXECUTABLE


def _drain(process: subprocess.Popen[str], *, verbose: bool, sink: OutputSink) -> str:
    """Read ``process`` output to EOF, forwarding lines to ``sink`` when verbose."""

    if process.stdout is None:
        return ""
    chunks: list[str] = []
    with process.stdout:
        for line in process.stdout:
            chunks.append(line)
            if verbose:
                sink(line)
    return "".join(chunks)


__all__ = ["OutputSink", "build_argv", "execute_command", "tokenize"]
