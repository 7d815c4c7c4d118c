"""Hand-off point between the data import pipeline and the registry.

The importer describes what it produced as :class:`SingletonSource` and
:class:`CollectionSource` records; :func:`bootstrap_configs` registers them
all, seals the registry and returns the read-only :class:`ConfigsView`
that the rest of the application receives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from sheetconfigs.conf.models import RegistrySettings
from sheetconfigs.registry.base import ConfigRegistry
from sheetconfigs.registry.views import ConfigsView

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SingletonSource:
    """One record that is "the config" of its type."""

    record: Any
    record_type: type | None = None

    def register_into(self, registry: ConfigRegistry) -> None:
        registry.register_singleton(self.record, record_type=self.record_type)


@dataclass(frozen=True, slots=True)
class CollectionSource:
    """An ordered list of records of one type plus its identifier resolver."""

    record_type: type
    records: Sequence[Any]
    identifier_of: Callable[[Any], int]

    @classmethod
    def by_attribute(cls, record_type: type, records: Iterable[Any], attr: str = "id") -> CollectionSource:
        """Build a source whose identifier is read from a record attribute."""
        return cls(record_type=record_type, records=tuple(records), identifier_of=attrgetter(attr))

    def register_into(self, registry: ConfigRegistry) -> None:
        registry.register_collection(self.record_type, self.records, self.identifier_of)


ConfigSource = Union[SingletonSource, CollectionSource]


class PendingConfigs:
    """Ordered queue of sources waiting to be registered."""

    def __init__(self) -> None:
        self._sources: list[ConfigSource] = []

    def enqueue(self, source: ConfigSource) -> None:
        if not isinstance(source, (SingletonSource, CollectionSource)):
            raise TypeError(f"Unsupported config source: {source!r}")
        self._sources.append(source)

    def extend(self, sources: Iterable[ConfigSource]) -> None:
        for source in sources:
            self.enqueue(source)

    def flush_into(self, registry: ConfigRegistry) -> int:
        """Register every queued source in order and return how many were registered.

        The queue is drained before registering; the first failing source
        propagates its error.
        """
        if not isinstance(registry, ConfigRegistry):
            raise TypeError("flush_into expects a ConfigRegistry instance")

        sources = tuple(self._sources)
        self._sources.clear()

        for source in sources:
            source.register_into(registry)
        return len(sources)

    def snapshot(self) -> tuple[ConfigSource, ...]:
        return tuple(self._sources)

    def __len__(self) -> int:
        return len(self._sources)


def bootstrap_configs(
    sources: Iterable[ConfigSource],
    *,
    registry: ConfigRegistry | None = None,
    settings: RegistrySettings | Mapping[str, Any] | None = None,
) -> ConfigsView:
    """Register all ``sources`` and return the read-only view of the registry.

    The registry is sealed afterwards unless ``SEAL_ON_BOOTSTRAP`` is off.
    """
    if registry is None:
        registry = ConfigRegistry(settings=settings)
    elif settings is not None:
        raise ValueError("Pass either an existing registry or settings, not both")

    pending = PendingConfigs()
    pending.extend(sources)
    registered = pending.flush_into(registry)
    logger.debug("Bootstrapped %d config sources", registered)

    if registry.settings.SEAL_ON_BOOTSTRAP:
        registry.seal()
    return registry.view()


__all__ = [
    "ConfigSource",
    "SingletonSource",
    "CollectionSource",
    "PendingConfigs",
    "bootstrap_configs",
]
