# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import ConfigLoader, ConfigLoadResult, load_config
from .models import HookgateConfig, default_tool
from .sources import ConfigSource, DefaultConfigSource, PyProjectConfigSource, TomlConfigSource

__all__ = [
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "HookgateConfig",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_tool",
    "load_config",
]
