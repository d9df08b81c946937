# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Access to the hook body bundled with the package."""

from __future__ import annotations

from importlib import resources

from ..constants import HOOK_MARKER, HOOK_NAME


def load_hook_template() -> str:
    """Return the pre-commit script appended into the hook file.

    Returns:
        str: Template text containing :data:`~hookgate.constants.HOOK_MARKER`.
    """

    return (resources.files(__package__) / "templates" / HOOK_NAME).read_text(encoding="utf-8")


def contains_marker(content: str) -> bool:
    """Return whether ``content`` already invokes the hookgate runner."""

    return HOOK_MARKER in content


__all__ = ["contains_marker", "load_hook_template"]
