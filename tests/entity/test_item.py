# tests/entity/test_item.py

import pytest

from slot_inventory.entity import Item


def test_item_equality_is_structural() -> None:
    assert Item(3, 2) == Item(3, 2)
    assert Item(3, 2) != Item(3, 1)
    assert Item(3, 2) != Item(4, 2)


def test_item_ordering_identifier_then_quantity() -> None:
    assert Item(1, 9) < Item(2, 0)
    assert Item(2, 1) < Item(2, 5)
    assert sorted([Item(2, 5), Item(1, 1), Item(2, 1)]) == [
        Item(1, 1),
        Item(2, 1),
        Item(2, 5),
    ]


def test_item_is_frozen() -> None:
    item = Item(1, 1)
    with pytest.raises(AttributeError):
        item.quantity = 5  # type: ignore[misc]


def test_with_quantity_returns_new_item() -> None:
    item = Item(7, 3)
    updated = item.with_quantity(1)
    assert updated == Item(7, 1)
    assert item == Item(7, 3)


def test_same_kind_compares_identifier_only() -> None:
    assert Item(7, 3).same_kind(Item(7, 99))
    assert not Item(7, 3).same_kind(Item(8, 3))


@pytest.mark.parametrize("identifier, quantity", [(-1, 1), (1, -1), (1.5, 1), (True, 1)])
def test_item_rejects_invalid_fields(identifier: object, quantity: object) -> None:
    with pytest.raises(ValueError):
        Item(identifier, quantity)  # type: ignore[arg-type]
