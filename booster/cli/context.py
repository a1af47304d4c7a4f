"""CLI context — resolves the `module:attribute` target to a BoosterConfig."""

from __future__ import annotations

import importlib

from booster.config import BoosterConfig
from booster.exceptions import TargetError


def load_config(target: str) -> BoosterConfig:
    """Import `package.module:attribute` and return the config it names."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise TargetError(f"Expected 'module:attribute', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import '{module_name}': {e}") from e

    config = getattr(module, attribute, None)
    if not isinstance(config, BoosterConfig):
        raise TargetError(f"'{target}' is not a BoosterConfig")
    return config
