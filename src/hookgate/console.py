# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by every hookgate output helper."""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def _build_console(color: bool, emoji: bool, tty: bool) -> Console:
    styled = color and tty
    return Console(
        color_system="auto" if styled else None,
        force_terminal=tty,
        no_color=not styled,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def console_for(*, color: bool, emoji: bool) -> Console:
    """Return the console matching the colour and emoji preferences.

    Consoles are cached per preference pair and per TTY state, because git runs
    hooks without a terminal while ``hookgate install`` usually has one.

    Args:
        color: ``True`` when ANSI colour output is wanted.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Console writing to the current ``sys.stdout``.
    """

    return _build_console(color, emoji, detect_tty())


__all__ = ["console_for", "detect_tty"]
