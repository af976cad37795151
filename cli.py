"""
pyhusky - Command Line Interface
Entry point dos comandos install/set/add/uninstall.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pyhusky.__version__ import __version__
from pyhusky.core.config_loader import load_config
from pyhusky.core.errors import HuskyError
from pyhusky.core.git import GitRunner
from pyhusky.core.logger import ConsoleLogger
from pyhusky.core.models import HuskyConfig
from pyhusky.hooks.install import HookManager, configure


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="husky",
    help="🐶 husky - Git hooks made easy",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


class _State:
    def __init__(self):
        self.config = HuskyConfig()


state = _State()


def _build_manager() -> HookManager:
    """Monta o HookManager a partir da config carregada."""
    config = state.config
    return configure(
        logger=ConsoleLogger(prefix=config.log_prefix),
        runner=GitRunner(config.git),
    )


def _fail(manager: HookManager, error: Exception) -> None:
    manager.logger.error(str(error))
    raise typer.Exit(1)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(__version__, markup=False, highlight=False)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the pyhusky version",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a husky.yaml config file",
    ),
):
    """
    🐶 husky - Git hooks made easy
    """
    try:
        state.config = load_config(config_file)
    except HuskyError as e:
        ConsoleLogger().error(str(e))
        raise typer.Exit(1)


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install(
    directory: Optional[str] = typer.Argument(
        None,
        help="Hooks directory (default: .husky)",
    ),
):
    """
    🪝 Install husky: point core.hooksPath at the hooks directory

    \b
    husky install
    husky install .config/husky
    """
    manager = _build_manager()

    if not state.config.enabled:
        manager.logger.log("HUSKY env variable is set to 0, skipping install")
        return

    try:
        manager.install(directory or state.config.directory)
    except (HuskyError, OSError, ValueError) as e:
        _fail(manager, e)


# =============================================================================
# Command: set / add
# =============================================================================

@app.command("set")
def set_hook(
    file: str = typer.Argument(..., help="Hook file, e.g. .husky/pre-commit"),
    cmd: str = typer.Argument(..., help="Shell command the hook runs"),
):
    """
    ✏️ Create a hook (overwrites an existing one)

    \b
    husky set .husky/pre-commit "npm test"
    """
    manager = _build_manager()

    try:
        manager.set(file, cmd)
    except (HuskyError, OSError, ValueError) as e:
        _fail(manager, e)


@app.command("add")
def add_hook(
    file: str = typer.Argument(..., help="Hook file, e.g. .husky/pre-commit"),
    cmd: str = typer.Argument(..., help="Shell command appended to the hook"),
):
    """
    ➕ Append a command to a hook (creates it if needed)

    \b
    husky add .husky/pre-commit "npm run lint"
    """
    manager = _build_manager()

    try:
        manager.add(file, cmd)
    except (HuskyError, OSError, ValueError) as e:
        _fail(manager, e)


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall():
    """
    🗑️ Unset core.hooksPath

    \b
    husky uninstall
    """
    manager = _build_manager()

    try:
        manager.uninstall()
    except HuskyError as e:
        _fail(manager, e)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
