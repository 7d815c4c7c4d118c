from dataclasses import dataclass

import pytest

from sheetconfigs import (
    CollectionSource,
    ConfigRegistry,
    ConfigsView,
    DuplicateIdentifierError,
    PendingConfigs,
    RegistrySealedError,
    SingletonSource,
    bootstrap_configs,
)


@dataclass(frozen=True)
class Currency:
    name: str
    value: int


@dataclass(frozen=True)
class Monster:
    id: int
    hp: int


@dataclass(frozen=True)
class Drop:
    item_id: int
    chance: float


def _sources():
    return [
        SingletonSource(Currency(name="Gold", value=10)),
        CollectionSource.by_attribute(Monster, [Monster(id=5, hp=100), Monster(id=7, hp=50)]),
        CollectionSource.by_attribute(Drop, [Drop(item_id=1, chance=0.5)], attr="item_id"),
    ]


def test_bootstrap_registers_seals_and_returns_view():
    view = bootstrap_configs(_sources())

    assert isinstance(view, ConfigsView)
    assert view.get_singleton(Currency).name == "Gold"
    assert view.get_by_identifier(Monster, 7).hp == 50
    assert view.get_by_identifier(Drop, 1).chance == 0.5
    assert len(view) == 3


def test_bootstrap_seals_the_given_registry():
    registry = ConfigRegistry()

    bootstrap_configs(_sources(), registry=registry)

    assert registry.is_sealed
    with pytest.raises(RegistrySealedError):
        registry.register_singleton(object())


def test_bootstrap_can_leave_registry_open():
    registry = ConfigRegistry(settings={"SEAL_ON_BOOTSTRAP": False})

    bootstrap_configs(_sources(), registry=registry)
    registry.register_singleton(object())

    assert not registry.is_sealed
    assert registry.count() == 4


def test_bootstrap_rejects_registry_and_settings_together():
    with pytest.raises(ValueError):
        bootstrap_configs([], registry=ConfigRegistry(), settings={"SEAL_ON_BOOTSTRAP": False})


def test_bootstrap_propagates_first_failure():
    registry = ConfigRegistry()
    sources = [
        SingletonSource(Currency(name="Gold", value=10)),
        CollectionSource.by_attribute(Monster, [Monster(id=1, hp=1), Monster(id=1, hp=2)]),
        CollectionSource.by_attribute(Drop, [Drop(item_id=1, chance=0.5)], attr="item_id"),
    ]

    with pytest.raises(DuplicateIdentifierError):
        bootstrap_configs(sources, registry=registry)

    assert registry.has(Currency)
    assert not registry.has(Monster)
    assert not registry.has(Drop)
    assert not registry.is_sealed


def test_singleton_source_with_explicit_type():
    class Base:
        pass

    class Impl(Base):
        pass

    view = bootstrap_configs([SingletonSource(Impl(), record_type=Base)])

    assert isinstance(view.get_singleton(Base), Impl)


def test_collection_source_by_attribute_freezes_records():
    records = [Monster(id=1, hp=1)]
    source = CollectionSource.by_attribute(Monster, records)
    records.append(Monster(id=2, hp=2))

    assert source.records == (Monster(id=1, hp=1),)
    assert source.identifier_of(records[1]) == 2


def test_pending_configs_queue_and_flush():
    pending = PendingConfigs()
    pending.extend(_sources()[:2])
    pending.enqueue(_sources()[2])

    assert len(pending) == 3
    assert pending.snapshot()[0].record == Currency(name="Gold", value=10)

    registry = ConfigRegistry()
    assert pending.flush_into(registry) == 3
    assert len(pending) == 0
    assert registry.count() == 3
    assert pending.flush_into(registry) == 0


def test_pending_configs_rejects_unknown_sources_and_targets():
    pending = PendingConfigs()

    with pytest.raises(TypeError):
        pending.enqueue(("Monster", []))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        pending.flush_into(object())  # type: ignore[arg-type]
