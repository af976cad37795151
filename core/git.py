"""
pyhusky - Git Runner
Executa o binário git de forma síncrona, herdando stdin/stdout/stderr.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .errors import HuskyError


# =============================================================================
# Exceções
# =============================================================================

class GitError(HuskyError):
    """Erro ao executar comando git."""
    pass


class GitLaunchError(GitError):
    """O binário git não pôde ser executado (ex: não está no PATH)."""

    def __init__(self, args: List[str], error: OSError):
        self.git_args = list(args)
        super().__init__(f"failed to run git {' '.join(args)}: {error}")


# =============================================================================
# Resultado
# =============================================================================

@dataclass
class GitResult:
    """
    Resultado de uma execução do git.

    status é None quando o processo nem chegou a rodar; nesse caso
    error contém o OSError do launch.
    """
    status: Optional[int] = None
    error: Optional[OSError] = None

    @property
    def launched(self) -> bool:
        return self.error is None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status == 0


# =============================================================================
# Runner
# =============================================================================

class GitRunner:
    """
    Invoca o git sem capturar output.

    O output do git vai direto para o terminal do usuário; só o exit
    status é inspecionado.
    """

    def __init__(self, binary: str = "git"):
        self.binary = binary

    def __call__(self, args: List[str]) -> GitResult:
        cmd = [self.binary, *args]

        try:
            completed = subprocess.run(cmd, check=False)
        except OSError as e:
            return GitResult(status=None, error=e)

        return GitResult(status=completed.returncode)

    def __repr__(self):
        return f"GitRunner({self.binary!r})"


__all__ = [
    "GitError",
    "GitLaunchError",
    "GitResult",
    "GitRunner",
]
