"""
pyhusky - Config Loader
Carrega a configuração do husky.yaml e das variáveis de ambiente.
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .errors import HuskyError
from .models import DEFAULT_CONFIG_FILE, HuskyConfig


# =============================================================================
# Exceções
# =============================================================================

class ConfigLoadError(HuskyError):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader
# =============================================================================

ALLOWED_KEYS = ("directory", "git", "log_prefix")

# Só aceitas em arquivo passado explicitamente (--config), nunca no
# husky.yaml versionado no repo.
EXPLICIT_ONLY_KEYS = ("git",)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"cannot read {path}: {e}") from e

    # Arquivo vazio
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path}: expected a mapping at the top level")

    unknown = sorted(str(key) for key in set(data) - set(ALLOWED_KEYS))
    if unknown:
        raise ConfigLoadError(f"{path}: unknown keys: {', '.join(unknown)}")

    for key, value in data.items():
        if not isinstance(value, str) or not value:
            raise ConfigLoadError(f"{path}: '{key}' must be a non-empty string")

    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> HuskyConfig:
    """
    Monta a HuskyConfig.

    Args:
        path: Arquivo YAML. Se None, usa husky.yaml do diretório atual
            caso exista.
        environ: Variáveis de ambiente (default: os.environ)

    Returns:
        HuskyConfig com os valores do arquivo e do ambiente aplicados

    Raises:
        ConfigLoadError: Arquivo explícito ausente ou conteúdo inválido
    """
    environ = os.environ if environ is None else environ
    config = HuskyConfig()

    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILE)
        if candidate.is_file():
            data = _read_yaml(candidate)
            for key in EXPLICIT_ONLY_KEYS:
                if key in data:
                    raise ConfigLoadError(
                        f"{candidate}: '{key}' can only be set in a file passed with --config"
                    )
            config = replace(config, **data)
    else:
        candidate = Path(path)
        if not candidate.is_file():
            raise ConfigLoadError(f"config file not found: {candidate}")
        config = replace(config, **_read_yaml(candidate))

    if environ.get("HUSKY") == "0":
        config = replace(config, enabled=False)

    return config


__all__ = ["ALLOWED_KEYS", "EXPLICIT_ONLY_KEYS", "ConfigLoadError", "load_config"]
