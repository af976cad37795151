"""Git hooks installation and management."""

from .install import (
    HookDirectoryMissingError,
    HookManager,
    NotRepoTopLevelError,
    PathEscapeError,
    configure,
)

__all__ = [
    "HookDirectoryMissingError",
    "HookManager",
    "NotRepoTopLevelError",
    "PathEscapeError",
    "configure",
]
