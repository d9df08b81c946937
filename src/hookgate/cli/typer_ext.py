# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application whose help screens list options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click
import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

HELP_OPTION: str = "help"


def option_sort_key(param: Parameter) -> tuple[bool, str]:
    """Return the key ordering ``param`` within the Options section.

    Options sort by their first long name with dashes and case ignored, so
    ``--emoji/--no-emoji`` files under ``emoji``. ``--help`` always comes last.
    """

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    label = (long_names or names or [param.name or ""])[0].lstrip("-").lower()
    return label == HELP_OPTION, label


class SortedTyperCommand(TyperCommand):
    """Command rendering arguments first, then options in :func:`option_sort_key` order."""

    def format_help(self, ctx: Context, formatter: HelpFormatter) -> None:
        # Typer's Rich renderer lays out options itself; click's path goes through format_options.
        click.Command.format_help(self, ctx, formatter)

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[tuple[bool, str], tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if param.param_type_name == "argument":
                arguments.append(record)
            else:
                options.append((option_sort_key(param), record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            options.sort(key=lambda entry: entry[0])
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in options])


class SortedTyperGroup(TyperGroup):
    """Group whose subcommands default to :class:`SortedTyperCommand`."""

    command_class = SortedTyperCommand

    def format_help(self, ctx: Context, formatter: HelpFormatter) -> None:
        click.Group.format_help(self, ctx, formatter)


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application registering every command as a :class:`SortedTyperCommand`."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("cls", SortedTyperGroup)
        super().__init__(*args, **kwargs)

    def command(self, name: str | None = None, **kwargs: Any) -> Callable[[CommandCallback], CommandCallback]:
        kwargs.setdefault("cls", SortedTyperCommand)
        return super().command(name, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` built with ``kwargs``."""

    return SortedTyper(**kwargs)


__all__ = ["SortedTyper", "SortedTyperCommand", "SortedTyperGroup", "create_typer", "option_sort_key"]
