"""End-to-end scenarios mirroring how imported sheet data is consumed."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from sheetconfigs import (
    CollectionSource,
    IdentifierNotFoundError,
    SingletonSource,
    bootstrap_configs,
)


@dataclass(frozen=True)
class RecordKind:
    name: str
    value: int


class Currency(RecordKind):
    pass


class Monster(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    hp: int


@pytest.fixture
def configs():
    return bootstrap_configs(
        [
            SingletonSource(Currency(name="Gold", value=10)),
            CollectionSource(Monster, [Monster(id=5, hp=100), Monster(id=7, hp=50)], lambda m: m.id),
        ]
    )


def test_currency_singleton(configs):
    gold = configs.get_singleton(Currency)

    assert (gold.name, gold.value) == ("Gold", 10)
    with pytest.raises(IdentifierNotFoundError):
        configs.get_by_identifier(Currency, 1)


def test_monster_collection(configs):
    assert configs.get_by_identifier(Monster, 7) == Monster(id=7, hp=50)
    assert [m.id for m in configs.get_list(Monster)] == [5, 7]
    with pytest.raises(IdentifierNotFoundError):
        configs.get_singleton(Monster)


def test_base_record_kind_is_a_separate_type(configs):
    assert Currency in configs
    assert RecordKind not in configs
