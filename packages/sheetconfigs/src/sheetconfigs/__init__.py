"""
sheetconfigs — typed, in-memory registry for static configuration data.

Configuration records imported from an external source (typically a
spreadsheet) are registered once per record type at startup and looked up
afterwards by type:

- the single unconfigured record of a type (``get_singleton``)
- a record by integer identifier (``get_by_identifier``)
- every record of a type, in import order (``get_list``)
- a read-only identifier-to-record mapping (``get_mapping``)

Import Guidelines:
------------------
- Use `sheetconfigs.bootstrap` to hand imported data to a registry.
- Depend on `sheetconfigs.types.ConfigsProvider` (satisfied by
  `ConfigsView`) in application code; keep `ConfigRegistry` in bootstrap code.
- Catch `SheetConfigsError` (or one of the registry errors) for failures.

"""

from importlib.metadata import PackageNotFoundError, version

from .bootstrap import CollectionSource, PendingConfigs, SingletonSource, bootstrap_configs
from .conf import RegistrySettings
from .exceptions import SheetConfigsError
from .identity import TypeTag, TypeTagError
from .registry import (
    SINGLE_CONFIG_ID,
    AmbiguousTypeTagError,
    ConfigRegistry,
    ConfigsView,
    DuplicateIdentifierError,
    DuplicateTypeError,
    IdentifierNotFoundError,
    InvalidIdentifierError,
    RecordTypeMismatchError,
    RegistryError,
    RegistrySealedError,
    TypeNotRegisteredError,
)
from .types import ConfigsAdder, ConfigsProvider

try:
    __version__ = version("sheetconfigs")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Registry
    "ConfigRegistry",
    "ConfigsView",
    "SINGLE_CONFIG_ID",
    "TypeTag",
    # Interfaces
    "ConfigsProvider",
    "ConfigsAdder",
    # Bootstrap
    "SingletonSource",
    "CollectionSource",
    "PendingConfigs",
    "bootstrap_configs",
    # Configuration
    "RegistrySettings",
    # Errors
    "SheetConfigsError",
    "TypeTagError",
    "RegistryError",
    "AmbiguousTypeTagError",
    "DuplicateTypeError",
    "DuplicateIdentifierError",
    "TypeNotRegisteredError",
    "IdentifierNotFoundError",
    "RecordTypeMismatchError",
    "InvalidIdentifierError",
    "RegistrySealedError",
]
