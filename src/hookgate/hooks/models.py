# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing hook targets and installation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from ..constants import DEFAULT_METADATA_DIR, HOOK_NAME, HOOKS_DIRNAME


class InstallOutcome(StrEnum):
    """Enumerate the results of a single installer run."""

    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    WOULD_INSTALL = "would_install"


@dataclass(frozen=True, slots=True)
class HookTarget:
    """Describe where the pre-commit hook lives for a repository root."""

    root: Path
    metadata_dir: str = DEFAULT_METADATA_DIR

    @property
    def metadata_path(self) -> Path:
        """Return the version-control metadata directory."""

        return self.root / self.metadata_dir

    @property
    def hooks_dir(self) -> Path:
        """Return the directory holding git hooks."""

        return self.metadata_path / HOOKS_DIRNAME

    @property
    def resolved_path(self) -> Path:
        """Return the on-disk path of the pre-commit hook file."""

        return self.hooks_dir / HOOK_NAME


@dataclass(slots=True)
class InstallResult:
    """Outcome from attempting to install the pre-commit hook."""

    path: Path
    outcome: InstallOutcome

    @property
    def changed(self) -> bool:
        """Return ``True`` when the hook file was written."""

        return self.outcome is InstallOutcome.INSTALLED


__all__ = ["HookTarget", "InstallOutcome", "InstallResult"]
