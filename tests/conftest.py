# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

ScriptFactory = Callable[[str, str], str]


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Return a project root containing an empty ``.git`` directory."""

    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def make_script(tmp_path: Path) -> ScriptFactory:
    """Return a factory writing Python scripts and yielding their command string."""

    scripts = tmp_path / "scripts"
    scripts.mkdir(exist_ok=True)

    def _make(name: str, body: str) -> str:
        path = scripts / f"{name}.py"
        path.write_text(dedent(body), encoding="utf-8")
        return str(path)

    return _make


@pytest.fixture
def python_tool() -> list[str]:
    """Return a tool prefix that runs scripts with the current interpreter."""

    return [sys.executable]


PyProjectWriter = Callable[..., Path]


def _write_pyproject(root: Path, *, commands: list[str], verbose: bool = False, tool: list[str] | None = None) -> Path:
    lines = ["[tool.hookgate]", f"commands = {json.dumps(commands)}", f"verbose = {json.dumps(verbose)}"]
    if tool is not None:
        lines.append(f"tool = {json.dumps(tool)}")
    path = root / "pyproject.toml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_pyproject() -> PyProjectWriter:
    """Return a helper writing a ``pyproject.toml`` with a ``[tool.hookgate]`` table."""

    return _write_pyproject
