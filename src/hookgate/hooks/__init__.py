# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pre-commit hook installation services."""

from __future__ import annotations

from .installer import install_hook
from .models import HookTarget, InstallOutcome, InstallResult
from .template import contains_marker, load_hook_template

__all__ = [
    "HookTarget",
    "InstallOutcome",
    "InstallResult",
    "contains_marker",
    "install_hook",
    "load_hook_template",
]
