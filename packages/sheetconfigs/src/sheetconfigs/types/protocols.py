# sheetconfigs/types/protocols.py
"""Structural interfaces for config providers.

``ConfigsProvider`` is what application code should depend on;
``ConfigsAdder`` is only for the bootstrap code that fills the registry.
"""
from types import MappingProxyType
from typing import Callable, Iterable, Protocol, TypeVar, runtime_checkable

from sheetconfigs.identity import TypeLike

T = TypeVar("T")

__all__ = ["ConfigsProvider", "ConfigsAdder"]


@runtime_checkable
class ConfigsProvider(Protocol):
    def get_singleton(self, record_type: type[T] | TypeLike) -> T: ...

    def get_by_identifier(self, record_type: type[T] | TypeLike, identifier: int) -> T: ...

    def get_list(self, record_type: type[T] | TypeLike) -> list[T]: ...

    def get_mapping(self, record_type: type[T] | TypeLike) -> MappingProxyType[int, T]: ...


@runtime_checkable
class ConfigsAdder(ConfigsProvider, Protocol):
    def register_singleton(self, record: T, *, record_type: type[T] | None = None) -> None: ...

    def register_collection(
        self,
        record_type: type[T],
        records: Iterable[T],
        identifier_of: Callable[[T], int],
    ) -> None: ...
