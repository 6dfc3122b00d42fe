# tests/utils/test_inventory_utils.py

from pyrsistent import pmap

from slot_inventory.collections import Inventory
from slot_inventory.entity import Item
from slot_inventory.utils.inventory import (
    find_slot,
    first_empty_slot,
    has_room,
    occupied_slots,
    total_quantity,
)


def make_inventory() -> Inventory:
    inv = Inventory.with_capacity(4)
    inv.add_at(Item(1, 2), 1)
    inv.add_at(Item(1, 3), 2)
    inv.add_at(Item(7, 1), 3)
    return inv


def test_find_slot() -> None:
    inv = make_inventory()
    assert find_slot(inv, 1) == 1
    assert find_slot(inv, 7) == 3
    assert find_slot(inv, 99) is None


def test_first_empty_slot_and_room() -> None:
    inv = make_inventory()
    assert first_empty_slot(inv) == 0
    assert has_room(inv)
    inv.add(Item(2, 1))
    assert first_empty_slot(inv) is None
    assert not has_room(inv)


def test_occupied_slots() -> None:
    inv = make_inventory()
    assert occupied_slots(inv) == pmap({1: Item(1, 2), 2: Item(1, 3), 3: Item(7, 1)})
    assert occupied_slots(Inventory.with_capacity(3)) == pmap()


def test_total_quantity() -> None:
    inv = make_inventory()
    assert total_quantity(inv, 1) == 5
    assert total_quantity(inv, 7) == 1
    assert total_quantity(inv, 99) == 0
