"""Core modules for pyhusky."""

from .config_loader import ConfigLoadError, load_config
from .errors import HuskyError
from .git import GitError, GitLaunchError, GitResult, GitRunner
from .logger import ConsoleLogger, Logger, MemoryLogger
from .models import HuskyConfig

__all__ = [
    # Errors
    "HuskyError",
    "ConfigLoadError",
    "GitError",
    "GitLaunchError",
    # Git
    "GitResult",
    "GitRunner",
    # Logging
    "ConsoleLogger",
    "Logger",
    "MemoryLogger",
    # Config
    "HuskyConfig",
    "load_config",
]
