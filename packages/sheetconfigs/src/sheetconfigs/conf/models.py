# sheetconfigs/conf/models.py
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from .settings import CONFIG_MODULE_ENVVAR, merge_settings


class RegistrySettings(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    LOG_REGISTRATIONS: bool = True
    TRACING_ENABLED: bool = True
    TRACER_NAME: str = "sheetconfigs"
    SEAL_ON_BOOTSTRAP: bool = True

    @classmethod
    def from_settings(cls, settings: RegistrySettings | Mapping[str, Any] | None = None) -> RegistrySettings:
        """Validate a mapping of overrides on top of the defaults; None means defaults only."""
        if isinstance(settings, cls):
            return settings
        return cls.model_validate(merge_settings(settings or {}))

    @classmethod
    def from_env(cls, envvar: str = CONFIG_MODULE_ENVVAR, **overrides: Any) -> RegistrySettings:
        """Load the module named by ``envvar`` (if set), then apply ``overrides``."""
        return cls.model_validate(merge_settings(overrides, envvar=envvar))
