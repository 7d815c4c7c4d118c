from .defaults import DEFAULTS
from .models import RegistrySettings
from .settings import CONFIG_MODULE_ENVVAR, merge_settings, settings_from_module

__all__ = ["DEFAULTS", "CONFIG_MODULE_ENVVAR", "RegistrySettings", "merge_settings", "settings_from_module"]
