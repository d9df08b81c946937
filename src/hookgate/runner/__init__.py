# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command runner invoked from the installed pre-commit hook."""

from __future__ import annotations

from .executor import build_argv, execute_command, tokenize
from .models import CommandOutcome, RunLogger, RunStatus, RunSummary
from .runner import run_all, run_commands

__all__ = [
    "CommandOutcome",
    "RunLogger",
    "RunStatus",
    "RunSummary",
    "build_argv",
    "execute_command",
    "run_all",
    "run_commands",
    "tokenize",
]
