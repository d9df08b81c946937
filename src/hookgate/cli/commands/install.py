# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing the pre-commit hook."""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ...config import load_config
from ...errors import HookgateError
from ...hooks import InstallOutcome, install_hook
from ..shared import build_cli_logger, exit_with_error
from ..typer_ext import SortedTyper

ROOT_OPTION = Annotated[Path, typer.Option("--root", "-r", help="Repository root.")]
METADATA_DIR_OPTION = Annotated[
    str | None,
    typer.Option(
        "--metadata-dir",
        help="Version-control metadata directory (defaults to the configured value, usually .git).",
    ),
]
DRY_RUN_OPTION = Annotated[bool, typer.Option("--dry-run", help="Show actions without modifying files.")]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path
    metadata_dir: str | None
    dry_run: bool
    emoji: bool

    @classmethod
    def from_cli(cls, root: Path, metadata_dir: str | None, *, dry_run: bool, emoji: bool) -> "InstallCLIOptions":
        """Return options parsed from CLI arguments."""

        return cls(root=root.resolve(), metadata_dir=metadata_dir, dry_run=dry_run, emoji=emoji)


def install_command(
    root: ROOT_OPTION = Path("."),
    metadata_dir: METADATA_DIR_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install the hookgate pre-commit hook for the current repository.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = InstallCLIOptions.from_cli(root, metadata_dir, dry_run=dry_run, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        resolved_dir = options.metadata_dir or load_config(options.root).config.metadata_dir
        result = install_hook(
            options.root,
            metadata_dir=resolved_dir,
            dry_run=options.dry_run,
            use_emoji=options.emoji,
        )
    except HookgateError as exc:
        exit_with_error(exc, logger=logger)

    if result.outcome is InstallOutcome.WOULD_INSTALL:
        logger.warn(f"DRY RUN: would append the hookgate script to {result.path}")
    raise typer.Exit(code=0)


def register(app: SortedTyper) -> None:
    """Register the ``install`` command on ``app``."""

    app.command(name="install", help="Install the pre-commit hook into .git/hooks.")(install_command)


__all__ = ["InstallCLIOptions", "install_command", "register"]
