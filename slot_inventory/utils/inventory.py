"""Inventory query helpers.

Pure functions over an :class:`~slot_inventory.collections.Inventory`; none of
them mutate the inventory.
"""

from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from slot_inventory.collections import Inventory
from slot_inventory.entity import Item
from slot_inventory.types import ItemID, SlotIndex


def find_slot(inventory: Inventory, identifier: ItemID) -> Optional[SlotIndex]:
    """Return the lowest slot holding ``identifier`` if present else None."""
    for index, slot in enumerate(inventory):
        if slot is not None and slot.identifier == identifier:
            return index
    return None


def first_empty_slot(inventory: Inventory) -> Optional[SlotIndex]:
    """Return the slot ``add`` would fill next, or None when full."""
    for index, slot in enumerate(inventory):
        if slot is None:
            return index
    return None


def has_room(inventory: Inventory) -> bool:
    return first_empty_slot(inventory) is not None


def occupied_slots(inventory: Inventory) -> PMap[SlotIndex, Item]:
    """Return persistent map of slot index to held item."""
    return pmap(
        {index: slot for index, slot in enumerate(inventory) if slot is not None}
    )


def total_quantity(inventory: Inventory, identifier: ItemID) -> int:
    """Sum quantities over every slot holding ``identifier``."""
    return sum(
        slot.quantity
        for slot in inventory
        if slot is not None and slot.identifier == identifier
    )
