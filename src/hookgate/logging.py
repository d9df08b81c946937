# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status lines with optional colour and emoji prefixes."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from rich.text import Text

from .console import console_for, detect_tty


class Level(StrEnum):
    """Kinds of status line printed by the installer and runner."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


# Prefix glyph and Rich style per level.
_PRESENTATION: Final[dict[Level, tuple[str, str]]] = {
    Level.INFO: ("ℹ️ ", "magenta"),
    Level.OK: ("✅ ", "green"),
    Level.WARN: ("⚠️ ", "yellow"),
    Level.FAIL: ("❌ ", "red"),
}


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def emit(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as a single status line for ``level``.

    Args:
        level: Status kind selecting the prefix and style.
        msg: Message text.
        use_emoji: Whether to prefix the line with the level's glyph.
        use_color: Explicit colour flag; ``None`` colours only on a TTY.
    """

    symbol, style = _PRESENTATION[level]
    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(f"{emoji(symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    console_for(color=color_enabled, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["Level", "emit", "emoji", "fail", "info", "ok", "warn"]
