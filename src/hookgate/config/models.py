# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model consumed by the installer and command runner."""

from __future__ import annotations

import sys

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_METADATA_DIR


def default_tool() -> list[str]:
    """Return the default command prefix: the current interpreter's ``-m`` switch."""

    return [sys.executable, "-m"]


class HookgateConfig(BaseModel):
    """Commands to run before each commit and how to run them."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    commands: list[str] = Field(default_factory=list)
    verbose: bool = False
    tool: list[str] = Field(default_factory=default_tool)
    timeout: float | None = Field(default=None, gt=0)
    metadata_dir: str = DEFAULT_METADATA_DIR

    @field_validator("commands")
    @classmethod
    def _validate_commands(cls, value: list[str]) -> list[str]:
        cleaned: list[str] = []
        for index, command in enumerate(value):
            stripped = command.strip()
            if not stripped:
                raise ValueError(f"commands[{index}] must not be blank")
            cleaned.append(stripped)
        return cleaned

    @field_validator("tool", mode="before")
    @classmethod
    def _split_tool(cls, value: object) -> object:
        # ``tool = "poetry run"`` is accepted as shorthand for ``["poetry", "run"]``.
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("metadata_dir")
    @classmethod
    def _validate_metadata_dir(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("metadata_dir must not be blank")
        return value.strip()


__all__ = ["HookgateConfig", "default_tool"]
