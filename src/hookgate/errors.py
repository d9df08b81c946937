# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the installer, runner, and configuration layers."""

from __future__ import annotations

import errno as errno_codes
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from .constants import EXIT_FAILURE

ERRNO_MESSAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "eacces": "Permission denied",
        "eagain": "Resource temporarily unavailable (may be the same value as EWOULDBLOCK)",
        "ebadf": "Bad file descriptor",
        "ebadmsg": "Bad message",
        "ebusy": "Device or resource busy",
        "edeadlk": "Resource deadlock avoided",
        "edeadlock": "File locking deadlock error",
        "edquot": "Disk quota exceeded",
        "eexist": "File exists",
        "efault": "Bad address",
        "efbig": "File too large",
        "eintr": "Interrupted function call",
        "einval": "Invalid argument",
        "eio": "Input/output error",
        "eisdir": "Is a directory",
        "eloop": "Too many levels of symbolic links",
        "emfile": "Too many open files",
        "emlink": "Too many links",
        "emultihop": "Multihop attempted",
        "enametoolong": "Filename too long",
        "enfile": "Too many open files in system",
        "enoent": "No such file or directory",
        "enospc": "No space left on device",
        "enotdir": "Not a directory",
        "eperm": "Operation not permitted",
        "erofs": "Read-only filesystem",
        "etxtbsy": "Text file busy",
    }
)


def describe_errno(cause: str) -> str:
    """Return the conventional description for an errno identifier.

    Args:
        cause: Lower-case errno identifier such as ``"eacces"``.

    Returns:
        str: Human-readable description, or ``cause`` itself when unknown.
    """

    return ERRNO_MESSAGES.get(cause.lower(), cause)


class HookgateError(Exception):
    """Base class for errors surfaced to the command line."""

    exit_code: int = EXIT_FAILURE


class HookInstallError(HookgateError):
    """Raised when the pre-commit hook cannot be installed."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class NotAVersionControlRepo(HookInstallError):
    """Raised when the repository metadata directory does not exist."""

    def __init__(self, metadata_path: Path) -> None:
        super().__init__(
            f"Not a git repository (missing {metadata_path.name} directory at {metadata_path})",
            path=metadata_path,
        )


class FileAccessError(HookInstallError):
    """Raised when the hook file cannot be opened, written, or made executable."""

    def __init__(self, cause: str, *, path: Path, errno: int | None = None, message: str | None = None) -> None:
        self.cause = cause
        self.errno = errno
        self.description = message or describe_errno(cause)
        super().__init__(f"{self.description}: {path}", path=path)

    @classmethod
    def from_os_error(cls, exc: OSError, *, path: Path) -> FileAccessError:
        """Translate ``exc`` into a :class:`FileAccessError`.

        Args:
            exc: Operating-system error raised while touching the hook file.
            path: Hook file being installed.

        Returns:
            FileAccessError: Error carrying the errno identifier and message.
        """

        if exc.errno is None:
            return cls("unknown", path=path, message=str(exc))
        cause = errno_codes.errorcode.get(exc.errno, str(exc.errno)).lower()
        return cls(cause, path=path, errno=exc.errno)


class CommandFailure(HookgateError):
    """Describe a configured command that exited with a non-zero status."""

    def __init__(self, command: str, *, returncode: int, output: str) -> None:
        super().__init__(f"Pre-commit failed on `{command}` (exit code {returncode})")
        self.command = command
        self.returncode = returncode
        self.output = output


class ConfigError(HookgateError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ERRNO_MESSAGES",
    "CommandFailure",
    "ConfigError",
    "FileAccessError",
    "HookInstallError",
    "HookgateError",
    "NotAVersionControlRepo",
    "describe_errno",
]
