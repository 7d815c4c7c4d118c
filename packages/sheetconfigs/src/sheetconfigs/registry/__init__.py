"""Type-indexed config registry and its read-only view."""

from .base import ConfigRegistry
from .exceptions import (
    AmbiguousTypeTagError,
    DuplicateIdentifierError,
    DuplicateTypeError,
    IdentifierNotFoundError,
    InvalidIdentifierError,
    RecordTypeMismatchError,
    RegistryError,
    RegistrySealedError,
    TypeNotRegisteredError,
)
from .slots import SINGLE_CONFIG_ID, ConfigSlot
from .views import ConfigsView

__all__ = [
    "ConfigRegistry",
    "ConfigsView",
    "ConfigSlot",
    "SINGLE_CONFIG_ID",
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
