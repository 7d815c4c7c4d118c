"""Settings sources for a registry.

Values are merged in order: :data:`DEFAULTS`, then the module named by
``SHEETCONFIGS_CONFIG_MODULE`` (when the caller opts in), then explicit
overrides. Only upper-case names of a module are read.
"""

from __future__ import annotations

import importlib
import os
from types import ModuleType
from typing import Any, Mapping

from .defaults import DEFAULTS

CONFIG_MODULE_ENVVAR = "SHEETCONFIGS_CONFIG_MODULE"


def settings_from_module(module: str | ModuleType) -> dict[str, Any]:
    if isinstance(module, str):
        module = importlib.import_module(module)
    return {k: v for k, v in vars(module).items() if k.isupper()}


def merge_settings(*overrides: Mapping[str, Any], envvar: str | None = None) -> dict[str, Any]:
    """Return DEFAULTS updated by the env-named module (if ``envvar`` is given and set) and ``overrides``."""
    merged: dict[str, Any] = dict(DEFAULTS)
    module_name = os.environ.get(envvar) if envvar else None
    if module_name:
        merged.update(settings_from_module(module_name))
    for layer in overrides:
        merged.update(layer)
    return merged
