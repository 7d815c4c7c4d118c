"""Read-only view handed to consumer code once bootstrap is complete."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, TypeVar, overload

from sheetconfigs.identity import TypeLike, TypeTag

if TYPE_CHECKING:
    from .base import ConfigRegistry

T = TypeVar("T")


class ConfigsView:
    """Exposes the lookups of a :class:`ConfigRegistry` and nothing else.

    The registry itself is kept private so consumers cannot reach the
    registration methods.
    """

    __slots__ = ("__registry",)

    def __init__(self, registry: ConfigRegistry) -> None:
        self.__registry = registry

    def get_singleton(self, record_type: type[T] | TypeLike) -> T:
        return self.__registry.get_singleton(record_type)

    def get_by_identifier(self, record_type: type[T] | TypeLike, identifier: int) -> T:
        return self.__registry.get_by_identifier(record_type, identifier)

    def get_list(self, record_type: type[T] | TypeLike) -> list[T]:
        return self.__registry.get_list(record_type)

    def get_mapping(self, record_type: type[T] | TypeLike) -> MappingProxyType[int, T]:
        return self.__registry.get_mapping(record_type)

    async def aget_singleton(self, record_type: type[T] | TypeLike) -> T:
        return await self.__registry.aget_singleton(record_type)

    async def aget_by_identifier(self, record_type: type[T] | TypeLike, identifier: int) -> T:
        return await self.__registry.aget_by_identifier(record_type, identifier)

    async def aget_list(self, record_type: type[T] | TypeLike) -> list[T]:
        return await self.__registry.aget_list(record_type)

    async def aget_mapping(self, record_type: type[T] | TypeLike) -> MappingProxyType[int, T]:
        return await self.__registry.aget_mapping(record_type)

    def has(self, record_type: TypeLike) -> bool:
        return self.__registry.has(record_type)

    @overload
    def tags(self) -> tuple[TypeTag, ...]: ...
    @overload
    def tags(self, *, as_csv: Literal[True]) -> str: ...
    @overload
    def tags(self, *, as_csv: Literal[False]) -> tuple[TypeTag, ...]: ...

    def tags(self, *, as_csv: bool = False):
        return self.__registry.tags(as_csv=as_csv)

    def __contains__(self, record_type: object) -> bool:
        return record_type in self.__registry

    def __len__(self) -> int:
        return len(self.__registry)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<ConfigsView types={len(self)}>"


__all__ = ["ConfigsView"]
