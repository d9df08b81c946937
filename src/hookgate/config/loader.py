# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence and traceability."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import CONFIG_FILENAME, PYPROJECT_FILENAME
from ..errors import ConfigError
from .models import HookgateConfig
from .sources import ConfigSource, DefaultConfigSource, PyProjectConfigSource, TomlConfigSource


class ConfigLoadResult(BaseModel):
    """Container bundling a resolved config with the sources that shaped it."""

    model_config = ConfigDict(validate_assignment=True)

    config: HookgateConfig
    sources: list[str] = Field(default_factory=list)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence.

    Later sources override earlier ones field by field; explicit overrides
    passed to :meth:`load` win over every source.
    """

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    def load(self, overrides: Mapping[str, Any] | None = None) -> ConfigLoadResult:
        """Merge all sources and validate the result.

        Args:
            overrides: Field values supplied by the caller, typically CLI flags.

        Returns:
            ConfigLoadResult: Validated configuration plus contributing sources.

        Raises:
            ConfigError: Raised when a source is unreadable or a value is invalid.
        """

        merged: dict[str, Any] = {}
        contributed: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged.update(fragment)
            contributed.append(source.describe())
        if overrides:
            merged.update({key: value for key, value in overrides.items() if value is not None})
            contributed.append("Command-line overrides")
        try:
            config = HookgateConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(_format_validation_error(exc)) from exc
        return ConfigLoadResult(config=config, sources=contributed)


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> ConfigLoadResult:
    """Resolve configuration for ``root`` from defaults, pyproject, and TOML files.

    Args:
        root: Project root containing ``pyproject.toml`` and ``.hookgate.toml``.
        config_file: Explicit TOML file replacing ``.hookgate.toml``; must exist.
        overrides: Field values that take precedence over every file.
        env: Environment used to expand ``$VAR`` references.

    Returns:
        ConfigLoadResult: Validated configuration plus contributing sources.
    """

    toml_source = (
        TomlConfigSource(config_file, required=True, env=env)
        if config_file is not None
        else TomlConfigSource(root / CONFIG_FILENAME, env=env)
    )
    loader = ConfigLoader(
        [
            DefaultConfigSource(),
            PyProjectConfigSource(root / PYPROJECT_FILENAME, env=env),
            toml_source,
        ]
    )
    return loader.load(overrides)


def _format_validation_error(exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "config"
        details.append(f"{location}: {error['msg']}")
    return "Invalid hookgate configuration: " + "; ".join(details)


__all__ = ["ConfigLoadResult", "ConfigLoader", "load_config"]
