# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing the project pre-commit hook."""

from __future__ import annotations

from pathlib import Path

from ..constants import DEFAULT_METADATA_DIR, HOOK_MODE
from ..errors import FileAccessError, NotAVersionControlRepo
from ..logging import info, ok
from .models import HookTarget, InstallOutcome, InstallResult
from .template import contains_marker, load_hook_template


def install_hook(
    root: Path,
    *,
    metadata_dir: str = DEFAULT_METADATA_DIR,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Append the hookgate invocation to ``<metadata_dir>/hooks/pre-commit``.

    Existing hook content is preserved and the script body is only written when
    the hook does not already invoke the runner, so repeated installs are safe.

    Args:
        root: Repository root whose hook should be installed.
        metadata_dir: Name of the version-control metadata directory.
        dry_run: When ``True`` report the planned action without touching files.
        use_emoji: Whether progress lines may include emoji glyphs.

    Returns:
        InstallResult: Hook path together with the installation outcome.

    Raises:
        NotAVersionControlRepo: Raised when ``root/metadata_dir`` is missing.
        FileAccessError: Raised when the hook file cannot be read, written, or chmod-ed.
    """

    target = HookTarget(root=root.resolve(), metadata_dir=metadata_dir)
    hook_path = target.resolved_path
    info(f"Looking for {metadata_dir} at {hook_path}", use_emoji=use_emoji)

    if not target.metadata_path.is_dir():
        raise NotAVersionControlRepo(target.metadata_path)

    try:
        if dry_run:
            outcome = _plan_install(hook_path)
        else:
            outcome = _inject_script(target)
    except OSError as exc:
        raise FileAccessError.from_os_error(exc, path=hook_path) from exc

    if outcome is InstallOutcome.ALREADY_INSTALLED:
        ok(f"pre-commit hook already installed at {hook_path}", use_emoji=use_emoji)
    elif outcome is InstallOutcome.WOULD_INSTALL:
        ok(f"Dry run complete: would install pre-commit hook at {hook_path}", use_emoji=use_emoji)
    else:
        ok(f"Installed pre-commit hook at {hook_path}", use_emoji=use_emoji)
    return InstallResult(path=hook_path, outcome=outcome)


def _plan_install(hook_path: Path) -> InstallOutcome:
    """Return the outcome an install would have without writing anything.

    Args:
        hook_path: Hook file that would receive the script body.

    Returns:
        InstallOutcome: ``ALREADY_INSTALLED`` or ``WOULD_INSTALL``.
    """

    if not hook_path.is_file():
        return InstallOutcome.WOULD_INSTALL
    if contains_marker(hook_path.read_text(encoding="utf-8", errors="surrogateescape")):
        return InstallOutcome.ALREADY_INSTALLED
    return InstallOutcome.WOULD_INSTALL


def _inject_script(target: HookTarget) -> InstallOutcome:
    """Append the hook template unless the marker is already present.

    Args:
        target: Hook location for the repository.

    Returns:
        InstallOutcome: ``INSTALLED`` when written, ``ALREADY_INSTALLED`` otherwise.
    """

    target.hooks_dir.mkdir(exist_ok=True)
    hook_path = target.resolved_path
    with hook_path.open("a+", encoding="utf-8", errors="surrogateescape") as handle:
        handle.seek(0)
        existing = handle.read()
        if contains_marker(existing):
            return InstallOutcome.ALREADY_INSTALLED
        if existing and not existing.endswith("\n"):
            handle.write("\n")
        handle.write(load_hook_template())
    hook_path.chmod(HOOK_MODE)
    return InstallOutcome.INSTALLED


__all__ = ["install_hook"]
