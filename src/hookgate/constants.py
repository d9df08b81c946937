# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by the installer, runner, and CLI."""

from __future__ import annotations

from typing import Final

HOOK_NAME: Final[str] = "pre-commit"
HOOKS_DIRNAME: Final[str] = "hooks"
DEFAULT_METADATA_DIR: Final[str] = ".git"
HOOK_MODE: Final[int] = 0o755

# Written into the hook body and searched for to detect a prior install.
HOOK_MARKER: Final[str] = "hookgate run"

CONFIG_FILENAME: Final[str] = ".hookgate.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "hookgate"

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_NOT_EXECUTABLE: Final[int] = 126
EXIT_NOT_FOUND: Final[int] = 127

BYPASS_ADVICE: Final[str] = "Commit again with --no-verify to skip the pre-commit checks."

__all__ = [
    "BYPASS_ADVICE",
    "CONFIG_FILENAME",
    "DEFAULT_METADATA_DIR",
    "EXIT_FAILURE",
    "EXIT_NOT_EXECUTABLE",
    "EXIT_NOT_FOUND",
    "EXIT_SUCCESS",
    "HOOKS_DIRNAME",
    "HOOK_MARKER",
    "HOOK_MODE",
    "HOOK_NAME",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION",
]
