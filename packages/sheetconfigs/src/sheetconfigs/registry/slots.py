"""Immutable registration slots.

A slot holds every record registered for one record type, keyed by integer
identifier. The backing ``dict`` is built completely before the slot exists
and is only ever exposed through a :class:`types.MappingProxyType`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from sheetconfigs.identity import TypeTag

from .exceptions import (
    DuplicateIdentifierError,
    IdentifierNotFoundError,
    InvalidIdentifierError,
    RecordTypeMismatchError,
)

T = TypeVar("T")

SINGLE_CONFIG_ID = 0


def coerce_identifier(value: Any, *, tag: TypeTag) -> int:
    # bool is an int subclass but never a meaningful identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIdentifierError(
            f"Identifiers for type {tag} must be int (got {type(value).__name__}: {value!r})"
        )
    return value


@dataclass(frozen=True, slots=True)
class ConfigSlot(Generic[T]):
    """All records of one type, keyed by identifier, in registration order."""

    tag: TypeTag
    record_type: type[T]
    entries: MappingProxyType[int, T]
    singleton: bool = False

    # ------------------- Constructors -------------------
    @classmethod
    def build(
        cls,
        tag: TypeTag,
        record_type: type[T],
        records: Iterable[T],
        identifier_of: Callable[[T], int],
    ) -> ConfigSlot[T]:
        """Build a slot from a record sequence, rejecting duplicate identifiers.

        :raises RecordTypeMismatchError: a record is not a ``record_type`` instance
        :raises InvalidIdentifierError: ``identifier_of`` returned a non-int
        :raises DuplicateIdentifierError: two records resolved to the same identifier
        """
        entries: dict[int, T] = {}
        positions: dict[int, int] = {}
        for index, record in enumerate(records):
            if not isinstance(record, record_type):
                raise RecordTypeMismatchError(tag, index, record)
            identifier = coerce_identifier(identifier_of(record), tag=tag)
            if identifier in entries:
                raise DuplicateIdentifierError(tag, identifier, positions[identifier], index)
            entries[identifier] = record
            positions[identifier] = index
        return cls(tag=tag, record_type=record_type, entries=MappingProxyType(entries))

    @classmethod
    def single(cls, tag: TypeTag, record_type: type[T], record: T) -> ConfigSlot[T]:
        if not isinstance(record, record_type):
            raise RecordTypeMismatchError(tag, 0, record)
        return cls(
            tag=tag,
            record_type=record_type,
            entries=MappingProxyType({SINGLE_CONFIG_ID: record}),
            singleton=True,
        )

    # ------------------- Reads -------------------
    def get(self, identifier: int) -> T:
        coerce_identifier(identifier, tag=self.tag)
        try:
            return self.entries[identifier]
        except KeyError as err:
            raise IdentifierNotFoundError(self.tag, identifier) from err

    def values(self) -> list[T]:
        """Return a new list of the records in registration order."""
        return list(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.entries

    def __iter__(self) -> Iterator[int]:
        return iter(self.entries)


__all__ = ["ConfigSlot", "SINGLE_CONFIG_ID", "coerce_identifier"]
