"""Tests for the Fruit record and the FruitStore."""
import pytest
from pydantic import ValidationError

from fruitstand.models import (
    DEFAULT_FRUITS,
    Fruit,
    FruitNotFoundError,
    FruitStore,
    FruitStoreError,
    InvalidFruitIndexError,
)


def test_fruit_requires_every_attribute():
    with pytest.raises(ValidationError):
        Fruit(name="apple", color="red")
    with pytest.raises(ValidationError):
        Fruit(name="apple", ready_to_eat=True)
    with pytest.raises(ValidationError):
        Fruit(color="red", ready_to_eat=True)


def test_fruit_accepts_camel_case_key():
    fruit = Fruit.model_validate({"name": "kiwi", "color": "brown", "readyToEat": False})
    assert fruit.ready_to_eat is False


def test_fruit_is_immutable():
    fruit = Fruit(name="apple", color="red", ready_to_eat=True)
    with pytest.raises(ValidationError):
        fruit.name = "plum"


def test_fruit_rejects_non_bool_readiness():
    with pytest.raises(ValidationError):
        Fruit(name="apple", color="red", ready_to_eat="yes")


def test_get_all_preserves_insertion_order(store):
    assert [f.name for f in store.get_all()] == ["apple", "pear", "banana"]
    assert [f.name for f in store] == ["apple", "pear", "banana"]
    assert len(store) == 3


def test_get_all_is_read_only(store):
    fruits = store.get_all()
    assert isinstance(fruits, tuple)
    with pytest.raises(TypeError):
        fruits[0] = Fruit(name="plum", color="purple", ready_to_eat=True)


def test_get_by_index_returns_record(store):
    fruit = store.get_by_index(1)
    assert fruit.name == "pear"
    assert fruit.color == "green"
    assert fruit.ready_to_eat is False


@pytest.mark.parametrize("index", [3, 99, -1])
def test_get_by_index_out_of_range(store, index):
    with pytest.raises(FruitNotFoundError) as exc_info:
        store.get_by_index(index)
    assert exc_info.value.index == index
    assert exc_info.value.size == 3
    assert isinstance(exc_info.value, LookupError)


@pytest.mark.parametrize("index", ["0", 1.0, None, True])
def test_get_by_index_rejects_non_integers(store, index):
    with pytest.raises(InvalidFruitIndexError):
        store.get_by_index(index)


def test_store_errors_share_a_base_class():
    assert issubclass(FruitNotFoundError, FruitStoreError)
    assert issubclass(InvalidFruitIndexError, FruitStoreError)


def test_store_builds_records_from_mappings():
    store = FruitStore(DEFAULT_FRUITS)
    assert [(f.name, f.color, f.ready_to_eat) for f in store] == [
        ("apple", "red", True),
        ("pear", "green", False),
        ("banana", "yellow", True),
    ]


def test_store_rejects_partial_records():
    with pytest.raises(ValidationError):
        FruitStore([{"name": "apple", "color": "red"}])


def test_empty_store():
    store = FruitStore([])
    assert store.get_all() == ()
    with pytest.raises(FruitNotFoundError):
        store.get_by_index(0)
