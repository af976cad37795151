"""Pytest configuration and fixtures."""

import shutil
import subprocess

import pytest

from pyhusky.core.git import GitResult
from pyhusky.core.logger import MemoryLogger


class FakeRunner:
    """Runner de git falso: grava os args e devolve resultados fixos."""

    def __init__(self, results=None, default=None):
        self.calls = []
        self.results = dict(results or {})
        self.default = default if default is not None else GitResult(status=0)

    def __call__(self, args):
        self.calls.append(list(args))
        return self.results.get(tuple(args), self.default)


@pytest.fixture
def logger():
    return MemoryLogger()


@pytest.fixture
def make_runner():
    """Fábrica de FakeRunner."""
    return FakeRunner


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def require_git():
    """Pula o teste quando o binário git não está disponível."""
    if shutil.which("git") is None:
        pytest.skip("git binary not available")


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch, require_git):
    """Cria repositório git temporário e entra nele."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init", "-q"], cwd=repo_dir, check=True)
    monkeypatch.chdir(repo_dir)

    return repo_dir


@pytest.fixture
def git_config_value():
    """Função que lê `key` da config local do repo, ou None."""

    def read(repo_dir, key):
        result = subprocess.run(
            ["git", "config", "--local", "--get", key],
            cwd=repo_dir,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    return read
