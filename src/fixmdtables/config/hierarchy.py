"""Layered configuration for fix-md-tables.

Layers, lowest priority first: package defaults, ``~/.fix-md-tables/config.yaml``,
the nearest ``fix-md-tables.yaml`` at or above the working directory,
``FIX_MD_TABLES_<KEY>`` environment variables, then runtime overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from fixmdtables.config.defaults import get_defaults

logger = logging.getLogger(__name__)

ENV_PREFIX = "FIX_MD_TABLES_"
PROJECT_CONFIG_NAME = "fix-md-tables.yaml"

_GLOBAL_CONFIG_PATH = Path.home() / ".fix-md-tables" / "config.yaml"
_TRUTHY = {"1", "true", "yes", "on"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Merge every configuration layer into one flat dict.

    Override values of None mean "not given" and leave lower layers alone.
    """
    config = get_defaults()
    layers = [
        _load_yaml_config(_GLOBAL_CONFIG_PATH),
        _load_yaml_config(_find_project_config()),
        _load_env_vars(config),
        {k: v for k, v in runtime_overrides.items() if v is not None},
    ]
    for layer in layers:
        config.update(layer or {})
    return config


def _load_yaml_config(path: Path | None) -> dict[str, Any] | None:
    if path is None or not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return None
    return data


def _find_project_config() -> Path | None:
    cwd = Path.cwd()
    for directory in [cwd, *cwd.parents]:
        candidate = directory / PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars(defaults: dict[str, Any]) -> dict[str, Any]:
    """Pick up ``FIX_MD_TABLES_<KEY>`` for every known key, typed like its default."""
    result: dict[str, Any] = {}
    for key, default in defaults.items():
        value = os.environ.get(ENV_PREFIX + key.upper())
        if value is not None:
            result[key] = _coerce_env_value(value, default)
    return result


def _coerce_env_value(value: str, default: Any) -> Any:
    if isinstance(default, bool):
        return value.strip().lower() in _TRUTHY
    if isinstance(default, list):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value
