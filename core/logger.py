"""
pyhusky - Logger
Canal de mensagens usado pelo HookManager.

Qualquer objeto com log/warn/error serve como logger; ConsoleLogger é o
padrão usado pela CLI.
"""

from typing import List, Optional, Protocol, Tuple

from rich.console import Console


# =============================================================================
# Interface
# =============================================================================

class Logger(Protocol):
    """Capacidades exigidas de um logger."""

    def log(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


# =============================================================================
# Console Logger
# =============================================================================

class ConsoleLogger:
    """
    Logger padrão: prefixa cada mensagem com a tag e escreve no terminal.

    log -> stdout, warn/error -> stderr.
    """

    def __init__(
        self,
        prefix: str = "husky",
        stdout: Optional[Console] = None,
        stderr: Optional[Console] = None,
    ):
        self.prefix = prefix
        self.stdout = stdout if stdout is not None else Console()
        self.stderr = stderr if stderr is not None else Console(stderr=True)

    def _format(self, message: str) -> str:
        return f"{self.prefix} - {message}"

    def log(self, message: str) -> None:
        self.stdout.print(
            self._format(message), markup=False, highlight=False, soft_wrap=True
        )

    def warn(self, message: str) -> None:
        self.stderr.print(
            self._format(message),
            style="yellow",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        self.stderr.print(
            self._format(message),
            style="red",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


# =============================================================================
# Memory Logger
# =============================================================================

class MemoryLogger:
    """Guarda as mensagens em memória, como pares (nível, mensagem)."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def log(self, message: str) -> None:
        self.records.append(("log", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: Optional[str] = None) -> List[str]:
        """Mensagens registradas, opcionalmente filtradas por nível."""
        return [msg for lvl, msg in self.records if level is None or lvl == level]


__all__ = ["ConsoleLogger", "Logger", "MemoryLogger"]
