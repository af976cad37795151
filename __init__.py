"""
pyhusky - Git hooks made easy

Aponta o core.hooksPath do git para um diretório gerenciado (.husky por
padrão) e cria os scripts de hook nele.
"""

from .__version__ import __version__
from .core import ConsoleLogger, HuskyError, Logger, MemoryLogger
from .hooks import HookManager, configure

__all__ = [
    "__version__",
    "ConsoleLogger",
    "HookManager",
    "HuskyError",
    "Logger",
    "MemoryLogger",
    "configure",
]
