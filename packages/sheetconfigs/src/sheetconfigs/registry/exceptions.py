# sheetconfigs/registry/exceptions.py
"""Registry exceptions"""
from typing import Any

from sheetconfigs.exceptions.base import SheetConfigsError


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(SheetConfigsError): ...


class DuplicateTypeError(RegistryError):
    """A record type already holds a slot; slots are never overwritten or merged."""

    def __init__(self, tag: Any) -> None:
        self.tag = tag
        super().__init__(f"Configs already registered for type {tag}")


class DuplicateIdentifierError(RegistryError):
    """The identifier resolver produced the same identifier twice in one collection."""

    def __init__(self, tag: Any, identifier: int, first_index: int, second_index: int) -> None:
        self.tag = tag
        self.identifier = identifier
        self.first_index = first_index
        self.second_index = second_index
        super().__init__(
            f"Duplicate identifier {identifier!r} for type {tag} "
            f"(records at positions {first_index} and {second_index})"
        )


class TypeNotRegisteredError(RegistryError, LookupError):
    def __init__(self, tag: Any, detail: str | None = None) -> None:
        self.tag = tag
        msg = f"No configs registered for type {tag}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class IdentifierNotFoundError(RegistryError, LookupError):
    def __init__(self, tag: Any, identifier: int) -> None:
        self.tag = tag
        self.identifier = identifier
        super().__init__(f"No config with identifier {identifier!r} registered for type {tag}")


class RecordTypeMismatchError(RegistryError, TypeError):
    def __init__(self, tag: Any, index: int, record: Any) -> None:
        self.tag = tag
        self.index = index
        super().__init__(
            f"Record at position {index} is a {type(record).__qualname__}, not an instance of {tag}"
        )


class InvalidIdentifierError(RegistryError, TypeError):
    """Identifiers must be plain ints (bool is rejected)."""


class RegistrySealedError(RuntimeError, RegistryError): ...


class AmbiguousTypeTagError(RegistryError, LookupError):
    """A by-name lookup matched several distinct registered classes; look up by class instead."""

    def __init__(self, tag: Any, candidates: Any) -> None:
        self.tag = tag
        self.candidates = tuple(candidates)
        super().__init__(
            f"Type tag {tag} matches {len(self.candidates)} registered classes: {self.candidates!r}"
        )
