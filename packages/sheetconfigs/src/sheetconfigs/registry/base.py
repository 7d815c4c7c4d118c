# sheetconfigs/registry/base.py
from __future__ import annotations

import logging
from contextlib import nullcontext
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, ContextManager, Iterable, Literal, Mapping, TypeVar, overload

from asgiref.sync import sync_to_async

from sheetconfigs.conf.models import RegistrySettings
from sheetconfigs.identity import TypeLike, TypeTag, TypeTagError
from sheetconfigs.tracing import registry_span

from .exceptions import AmbiguousTypeTagError, DuplicateTypeError, RegistrySealedError, TypeNotRegisteredError
from .slots import SINGLE_CONFIG_ID, ConfigSlot

if TYPE_CHECKING:
    from .views import ConfigsView

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigRegistry:
    """Type-indexed container of static configuration records.

    Each record type owns at most one :class:`ConfigSlot`, created once via
    :meth:`register_singleton` or :meth:`register_collection` and never
    modified afterwards.

    Registration is not thread-safe: register everything during startup,
    then :meth:`seal` the registry before handing :meth:`view` to readers.
    Reads on a sealed registry are safe from any thread since slots are
    immutable.
    """

    def __init__(self, *, settings: RegistrySettings | Mapping[str, Any] | None = None) -> None:
        self.settings = RegistrySettings.from_settings(settings)
        # Slots are keyed by the class object; tags only index them for by-name lookups
        self._slots: dict[type, ConfigSlot[Any]] = {}
        self._by_tag: dict[TypeTag, list[type]] = {}
        self._sealed = False

    # --- internals ---

    def _span(self, operation: str, tag: TypeTag, count: int | None = None) -> ContextManager[Any]:
        if not self.settings.TRACING_ENABLED:
            return nullcontext()
        return registry_span(
            f"sheetconfigs.registry.{operation}",
            attributes={"sheetconfigs.tag": tag.as_str, "sheetconfigs.count": count},
            tracer_name=self.settings.TRACER_NAME,
        )

    def _add_slot(self, slot: ConfigSlot[Any]) -> None:
        self._slots[slot.record_type] = slot
        self._by_tag.setdefault(slot.tag, []).append(slot.record_type)
        if self.settings.LOG_REGISTRATIONS:
            logger.debug(
                "Registered %s configs for %s (entries=%d)",
                "singleton" if slot.singleton else "collection",
                slot.tag,
                len(slot),
            )

    def _check_writable(self, record_type: type, tag: TypeTag) -> None:
        # Fail before running any resolver code
        if self._sealed:
            raise RegistrySealedError(f"Registry is sealed; cannot register {tag}")
        if record_type in self._slots:
            raise DuplicateTypeError(tag)

    def _slot_for(self, record_type: TypeLike) -> ConfigSlot[Any]:
        tag = TypeTag.get_for(record_type)
        if isinstance(record_type, type):
            try:
                return self._slots[record_type]
            except KeyError as err:
                raise TypeNotRegisteredError(tag) from err

        candidates = self._by_tag.get(tag)
        if not candidates:
            raise TypeNotRegisteredError(tag)
        if len(candidates) > 1:
            raise AmbiguousTypeTagError(tag, candidates)
        return self._slots[candidates[0]]

    # --- registration ---

    def register_singleton(self, record: T, *, record_type: type[T] | None = None) -> None:
        """
        Register the unique config of its type, stored at identifier ``0``.

        Use :meth:`get_singleton` to retrieve it.

        :param record: The single config instance.
        :param record_type: The slot type; defaults to ``type(record)``.
        :raises DuplicateTypeError: If the type already holds a slot.
        :raises RegistrySealedError: If the registry has been sealed.
        """
        cls = record_type if record_type is not None else type(record)
        if not isinstance(cls, type):
            raise TypeError(f"record_type must be a class (got {cls!r})")
        tag = TypeTag.get_for(cls)
        with self._span("register_singleton", tag, 1):
            self._check_writable(cls, tag)
            self._add_slot(ConfigSlot.single(tag, cls, record))

    def register_collection(
        self,
        record_type: type[T],
        records: Iterable[T],
        identifier_of: Callable[[T], int],
    ) -> None:
        """
        Register a list of configs, each mapped to the identifier derived by
        ``identifier_of``.

        Use :meth:`get_by_identifier`, :meth:`get_list` or :meth:`get_mapping`
        to retrieve them. Nothing is stored unless every record is accepted.

        :param record_type: The record class every element must be an instance of.
        :param records: Ordered records; order is kept for :meth:`get_list`.
        :param identifier_of: Pure function deriving a record's int identifier.
        :raises DuplicateTypeError: If the type already holds a slot.
        :raises DuplicateIdentifierError: If two records resolve to the same identifier.
        :raises RegistrySealedError: If the registry has been sealed.
        """
        if not isinstance(record_type, type):
            raise TypeError(f"record_type must be a class (got {record_type!r})")
        tag = TypeTag.get_for(record_type)
        with self._span("register_collection", tag) as span:
            self._check_writable(record_type, tag)
            records = list(records)
            if span is not None:
                span.set_attribute("sheetconfigs.count", len(records))
            self._add_slot(ConfigSlot.build(tag, record_type, records, identifier_of))

    async def aregister_singleton(self, record: T, *, record_type: type[T] | None = None) -> None:
        """Async wrapper around `register_singleton`."""
        return await sync_to_async(self.register_singleton)(record, record_type=record_type)

    async def aregister_collection(
        self,
        record_type: type[T],
        records: Iterable[T],
        identifier_of: Callable[[T], int],
    ) -> None:
        """Async wrapper around `register_collection`."""
        return await sync_to_async(self.register_collection)(record_type, records, identifier_of)

    # --- retrieval ---

    def get_singleton(self, record_type: type[T] | TypeLike) -> T:
        """
        Return the single unique config of the given type.

        :raises TypeNotRegisteredError: If no slot exists for the type.
        :raises IdentifierNotFoundError: If the type was registered as a
            collection with no entry at identifier ``0``.
        """
        return self._slot_for(record_type).get(SINGLE_CONFIG_ID)

    def get_by_identifier(self, record_type: type[T] | TypeLike, identifier: int) -> T:
        """
        Return the config of the given type registered under ``identifier``.

        :raises TypeNotRegisteredError: If no slot exists for the type.
        :raises IdentifierNotFoundError: If the identifier is absent from the slot.
        """
        return self._slot_for(record_type).get(identifier)

    def get_list(self, record_type: type[T] | TypeLike) -> list[T]:
        """Return a new list with every config of the given type, in registration order."""
        return self._slot_for(record_type).values()

    def get_mapping(self, record_type: type[T] | TypeLike) -> MappingProxyType[int, T]:
        """Return a read-only identifier-to-config mapping for the given type."""
        return self._slot_for(record_type).entries

    def slot(self, record_type: TypeLike) -> ConfigSlot[Any]:
        return self._slot_for(record_type)

    async def aget_singleton(self, record_type: type[T] | TypeLike) -> T:
        """Async wrapper around `get_singleton`."""
        return await sync_to_async(self.get_singleton)(record_type)

    async def aget_by_identifier(self, record_type: type[T] | TypeLike, identifier: int) -> T:
        """Async wrapper around `get_by_identifier`."""
        return await sync_to_async(self.get_by_identifier)(record_type, identifier)

    async def aget_list(self, record_type: type[T] | TypeLike) -> list[T]:
        """Async wrapper around `get_list`."""
        return await sync_to_async(self.get_list)(record_type)

    async def aget_mapping(self, record_type: type[T] | TypeLike) -> MappingProxyType[int, T]:
        """Async wrapper around `get_mapping`."""
        return await sync_to_async(self.get_mapping)(record_type)

    # --- introspection ---

    def has(self, record_type: TypeLike) -> bool:
        """True if the class is registered, or if any registered class carries the tag."""
        if isinstance(record_type, type):
            return record_type in self._slots
        return bool(self._by_tag.get(TypeTag.get_for(record_type)))

    def __contains__(self, record_type: object) -> bool:
        try:
            return self.has(record_type)  # type: ignore[arg-type]
        except TypeTagError:
            return False

    def count(self) -> int:
        """Counts the number of registered record types."""
        return len(self._slots)

    def __len__(self) -> int:
        return self.count()

    @overload
    def tags(self) -> tuple[TypeTag, ...]: ...
    @overload
    def tags(self, *, as_csv: Literal[True]) -> str: ...
    @overload
    def tags(self, *, as_csv: Literal[False]) -> tuple[TypeTag, ...]: ...

    def tags(self, *, as_csv: bool = False):
        """
        Return the tags of all registered types in registration order.
        Distinct classes sharing a tag each contribute an entry.

        When `as_csv` is True, returns a comma-separated string of the tags for
        logging/debugging purposes.
        """
        tags_tuple = tuple(slot.tag for slot in self._slots.values())
        if as_csv:
            return ",".join(t.as_str for t in tags_tuple)
        return tags_tuple

    # --- lifecycle ---

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """
        Mark the registry as sealed (no further registrations).
        """
        if self._sealed:
            return
        self._sealed = True
        logger.info("Config registry sealed with %d record types: %s", self.count(), self.tags(as_csv=True))

    def view(self) -> ConfigsView:
        """Return the read-only interface handed to consumer code."""
        from .views import ConfigsView

        return ConfigsView(self)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        state = "sealed" if self._sealed else "open"
        return f"<ConfigRegistry {state} types={self.count()}>"
