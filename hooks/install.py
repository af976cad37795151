"""
pyhusky - Git Hooks Installer
Aponta core.hooksPath para o diretório gerenciado e cria os scripts de hook.
"""

import os
import shutil
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..config import RUNNER_NAME, RUNNER_SCRIPT
from ..core.errors import HuskyError
from ..core.git import GitLaunchError, GitResult, GitRunner
from ..core.logger import ConsoleLogger, Logger
from ..core.models import DEFAULT_HOOKS_DIR


PathLike = Union[str, os.PathLike]
ProcessRunner = Callable[[List[str]], GitResult]

HELP_URL = "https://typicode.github.io/husky/#/?id=custom-directory"


# =============================================================================
# Exceptions
# =============================================================================

class PathEscapeError(HuskyError):
    """Diretório de hooks resolvido fora do diretório atual."""
    pass


class NotRepoTopLevelError(HuskyError):
    """Diretório atual não é o topo do repositório (.git ausente)."""
    pass


class HookDirectoryMissingError(HuskyError):
    """Diretório do hook não existe (install ainda não foi executado)."""
    pass


# =============================================================================
# Hook Template
# =============================================================================

# A última linha (8 espaços, sem newline) faz parte do formato gerado.
HOOK_TEMPLATE = (
    "#!/usr/bin/env sh\n"
    ". \"$(dirname -- \"$0\")/_/" + RUNNER_NAME + "\"\n"
    "\n"
    "{command}\n"
    "        "
)

HOOK_MODE = 0o755


def render_hook(command: str) -> str:
    """Conteúdo de um hook novo que roda `command`."""
    return HOOK_TEMPLATE.format(command=command)


# =============================================================================
# Hook Manager
# =============================================================================

class HookManager:
    """
    Instala e gerencia os hooks do repositório no diretório atual.

    Responsabilidades:
    - Validar o ambiente (git disponível, cwd no topo do repo)
    - Provisionar <dir>/_ com .gitignore e o runner husky.sh
    - Configurar/remover core.hooksPath
    - Criar e estender scripts de hook
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        runner: Optional[ProcessRunner] = None,
        runner_script: Path = RUNNER_SCRIPT,
    ):
        """
        Args:
            logger: Destino das mensagens (default: ConsoleLogger)
            runner: Executor do git (default: GitRunner("git"))
            runner_script: Script compartilhado copiado em <dir>/_/
        """
        self.logger = logger if logger is not None else ConsoleLogger()
        self.runner = runner if runner is not None else GitRunner()
        self.runner_script = Path(runner_script)

    def install(self, directory: PathLike = DEFAULT_HOOKS_DIR) -> None:
        """
        Prepara o diretório de hooks e registra em core.hooksPath.

        Fora de um repositório git (ou sem git no PATH) retorna sem fazer
        nada.

        Raises:
            PathEscapeError: directory resolve fora do cwd
            NotRepoTopLevelError: .git não existe no cwd
            OSError, GitLaunchError: falha ao provisionar (após logar)
        """
        directory = os.fspath(directory)

        # Precisa estar dentro de um repo git e o git precisa existir.
        # Launch error também conta como "não ok".
        if not self.runner(["rev-parse"]).ok:
            return

        cwd = os.getcwd()
        target = os.path.normpath(os.path.join(cwd, directory))
        if os.path.commonpath([cwd, target]) != cwd:
            raise PathEscapeError(f".. not allowed (see {HELP_URL})")

        if not os.path.exists(os.path.join(cwd, ".git")):
            raise NotRepoTopLevelError(f".git can't be found (see {HELP_URL})")

        try:
            runner_dir = Path(directory, "_")
            runner_dir.mkdir(parents=True, exist_ok=True)

            (runner_dir / ".gitignore").write_text("*", encoding="utf-8")

            shutil.copyfile(self.runner_script, runner_dir / RUNNER_NAME)

            args = ["config", "core.hooksPath", directory]
            result = self.runner(args)
            if result.error is not None:
                raise GitLaunchError(args, result.error) from result.error
        except Exception:
            self.logger.error("Git hooks failed to install")
            raise

        self.logger.log("Git hooks installed")

    def set(self, path: PathLike, command: str) -> None:
        """
        Cria (ou sobrescreve) o hook em `path` rodando `command`.

        Raises:
            HookDirectoryMissingError: diretório pai de path não existe
        """
        path = os.fspath(path)
        parent = os.path.dirname(path) or "."

        if not os.path.isdir(parent):
            raise HookDirectoryMissingError(
                f"can't create hook, {parent} directory doesn't exist "
                "(try running husky install)"
            )

        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(render_hook(command))
        os.chmod(path, HOOK_MODE)

        self.logger.log(f"created {path}")

    def add(self, path: PathLike, command: str) -> None:
        """Acrescenta `command` ao hook existente, ou cria o hook."""
        path = os.fspath(path)

        if os.path.exists(path):
            with open(path, "a", encoding="utf-8", newline="\n") as f:
                f.write(f"{command}\n")
            self.logger.log(f"updated {path}")
        else:
            self.set(path, command)

    def uninstall(self) -> None:
        """
        Remove core.hooksPath da config do repo.

        O exit status é ignorado (a chave pode nem existir). Só levanta
        GitLaunchError se o git não puder ser executado.
        """
        args = ["config", "--unset", "core.hooksPath"]
        result = self.runner(args)
        if result.error is not None:
            raise GitLaunchError(args, result.error) from result.error


# =============================================================================
# Factory
# =============================================================================

def configure(
    logger: Optional[Logger] = None,
    runner: Optional[ProcessRunner] = None,
) -> HookManager:
    """Cria um HookManager independente."""
    return HookManager(logger=logger, runner=runner)


__all__ = [
    "HELP_URL",
    "HOOK_MODE",
    "HOOK_TEMPLATE",
    "HookDirectoryMissingError",
    "HookManager",
    "NotRepoTopLevelError",
    "PathEscapeError",
    "ProcessRunner",
    "configure",
    "render_hook",
]
