# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command executed by the installed pre-commit hook."""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ...config import load_config
from ...errors import ConfigError
from ...runner import run_all
from ..shared import build_cli_logger, exit_with_error
from ..typer_ext import SortedTyper

ROOT_OPTION = Annotated[Path, typer.Option("--root", "-r", help="Project root holding the configuration.")]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file to use instead of .hookgate.toml."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Stream command output even when the configuration disables it."),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]


@dataclass(slots=True)
class RunCLIOptions:
    """Capture CLI options for a pre-commit run."""

    root: Path
    config_file: Path | None
    verbose: bool
    emoji: bool

    @classmethod
    def from_cli(
        cls,
        root: Path,
        config_file: Path | None,
        *,
        verbose: bool,
        emoji: bool,
    ) -> "RunCLIOptions":
        """Return options parsed from CLI arguments."""

        resolved_config = config_file.resolve() if config_file is not None else None
        return cls(root=root.resolve(), config_file=resolved_config, verbose=verbose, emoji=emoji)


def run_command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Run the configured commands, stopping at the first failure.

    Raises:
        typer.Exit: Always raised with ``0`` when every command passed, ``1`` otherwise.
    """

    options = RunCLIOptions.from_cli(root, config, verbose=verbose, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        loaded = load_config(
            options.root,
            config_file=options.config_file,
            overrides={"verbose": True} if options.verbose else None,
        )
    except ConfigError as exc:
        exit_with_error(exc, logger=logger)

    raise typer.Exit(code=run_all(loaded.config, logger=logger, cwd=options.root))


def register(app: SortedTyper) -> None:
    """Register the ``run`` command on ``app``."""

    app.command(name="run", help="Run the configured pre-commit commands.")(run_command)


__all__ = ["RunCLIOptions", "register", "run_command"]
