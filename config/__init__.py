"""Packaged assets for pyhusky."""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
RUNNER_NAME = "husky.sh"
RUNNER_SCRIPT = CONFIG_DIR / RUNNER_NAME

__all__ = ["CONFIG_DIR", "RUNNER_NAME", "RUNNER_SCRIPT"]
