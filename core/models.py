"""
pyhusky - Data Models
Configuração do pyhusky.
"""

from dataclasses import dataclass


DEFAULT_HOOKS_DIR = ".husky"
DEFAULT_CONFIG_FILE = "husky.yaml"


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class HuskyConfig:
    """Configuração global do pyhusky."""
    directory: str = DEFAULT_HOOKS_DIR
    git: str = "git"
    log_prefix: str = "husky"
    enabled: bool = True


__all__ = ["DEFAULT_CONFIG_FILE", "DEFAULT_HOOKS_DIR", "HuskyConfig"]
