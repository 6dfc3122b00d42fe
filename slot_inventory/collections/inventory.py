"""Fixed-size slot inventory.

Slots live in a persistent vector (``pyrsistent.PVector``) of length
``capacity``; ``None`` marks an empty slot. Every mutation replaces the vector
with an updated copy, so :meth:`Inventory.slots` can hand the current vector
to callers without exposing internal state.

Known limitations:

* ``add`` never merges into an existing slot of the same kind; every insert
  takes a fresh slot.
* ``add_at`` increments the occupied count even when it overwrites an
  occupied slot, leaving ``count()`` above the real number of occupied slots.
  A warning is logged when this happens.
* ``remove`` rejects the request when the slot holds *more* than requested,
  and otherwise leaves ``requested - held`` behind in the slot.
"""

import logging
from typing import Any, Iterator

from pyrsistent import pvector
from pyrsistent.typing import PVector

from slot_inventory.collections.container import Container
from slot_inventory.entity import Item
from slot_inventory.errors import (
    ContainerFull,
    ItemNotFound,
    QuantityInsufficient,
    SlotIndexOutOfBounds,
)
from slot_inventory.types import Slot, SlotIndex

logger = logging.getLogger(__name__)


class Inventory(Container[Item]):
    """Bounded sequence of slots, each empty or holding one :class:`Item`."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Inventory capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._item_count = 0
        self._slots: PVector[Slot] = pvector([None] * capacity)

    @classmethod
    def with_capacity(cls, capacity: int) -> "Inventory":
        return cls(capacity)

    def capacity(self) -> int:
        return self._capacity

    def count(self) -> int:
        return self._item_count

    def slots(self) -> PVector[Slot]:
        """Return the slot vector (``None`` for empty slots)."""
        return self._slots

    def contains(self, item: Item) -> bool:
        return item in self._slots

    def add(self, item: Item) -> None:
        # TODO merge into a slot of the same kind once stack limits exist
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots = self._slots.set(index, item)
                self._item_count += 1
                logger.debug("Added %s at slot %d (count=%d)", item, index, self._item_count)
                return
        raise ContainerFull(f"No empty slot for {item} (capacity={self._capacity})")

    def add_at(self, item: Item, slot: SlotIndex) -> None:
        self._check_bounds(slot)
        previous = self._slots[slot]
        if previous is not None:
            logger.warning(
                "Overwriting %s at slot %d with %s; occupied count no longer matches slots",
                previous,
                slot,
                item,
            )
        self._slots = self._slots.set(slot, item)
        self._item_count += 1
        logger.debug("Added %s at slot %d (count=%d)", item, slot, self._item_count)

    def remove(self, item: Item) -> None:
        for index, held in enumerate(self._slots):
            if held is None or not held.same_kind(item):
                continue
            if held.quantity > item.quantity:
                raise QuantityInsufficient(
                    f"Slot {index} holds {held.quantity} of item {held.identifier}, "
                    f"requested {item.quantity}",
                    slot=index,
                )
            remainder = item.quantity - held.quantity
            if remainder == 0:
                self._slots = self._slots.set(index, None)
                self._item_count -= 1
                logger.debug("Removed %s from slot %d (count=%d)", held, index, self._item_count)
            else:
                self._slots = self._slots.set(index, held.with_quantity(remainder))
                logger.debug("Slot %d now holds %d of item %d", index, remainder, held.identifier)
            return
        raise ItemNotFound(f"No slot holds item {item.identifier}")

    def remove_at(self, slot: SlotIndex) -> None:
        held = self._occupied(slot)
        self._slots = self._slots.set(slot, None)
        self._item_count -= 1
        logger.debug("Cleared slot %d holding %s (count=%d)", slot, held, self._item_count)

    def get_at(self, slot: SlotIndex) -> Item:
        return self._occupied(slot)

    def swap(self, slot_a: SlotIndex, slot_b: SlotIndex) -> None:
        self._check_bounds(slot_a)
        self._check_bounds(slot_b)
        a, b = self._slots[slot_a], self._slots[slot_b]
        self._slots = self._slots.set(slot_a, b).set(slot_b, a)
        logger.debug("Swapped slots %d and %d", slot_a, slot_b)

    # -------- Python protocols --------

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Item) and self.contains(item)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return (
            self._capacity == other._capacity
            and self._item_count == other._item_count
            and self._slots == other._slots
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Inventory(capacity={self._capacity}, count={self._item_count}, "
            f"slots={list(self._slots)!r})"
        )

    # -------- Internal helpers --------

    def _check_bounds(self, slot: SlotIndex) -> None:
        if not 0 <= slot < self._capacity:
            raise SlotIndexOutOfBounds(
                f"Slot {slot} out of bounds for capacity {self._capacity}", slot=slot
            )

    def _occupied(self, slot: SlotIndex) -> Item:
        self._check_bounds(slot)
        held = self._slots[slot]
        if held is None:
            raise ItemNotFound(f"Slot {slot} is empty", slot=slot)
        return held
