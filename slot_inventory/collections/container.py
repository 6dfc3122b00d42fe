"""Abstract slotted-container capability.

A container is a bounded sequence of slots addressed by
:data:`~slot_inventory.types.SlotIndex`. Each slot is empty or holds one value
of type ``T``. Implementations report failures by raising the matching
:mod:`slot_inventory.errors` exception and leave their state untouched when
they do.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from slot_inventory.types import SlotIndex

T = TypeVar("T")
C = TypeVar("C", bound="Container")


class Container(ABC, Generic[T]):
    """Operation set every bounded slotted collection exposes."""

    @classmethod
    @abstractmethod
    def with_capacity(cls: type[C], capacity: int) -> C:
        """Create an empty container with exactly ``capacity`` slots.

        Example:
            >>> inv = Inventory.with_capacity(5)
            >>> inv.capacity()
            5
        """

    @abstractmethod
    def capacity(self) -> int:
        """Return the number of slots."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of occupied slots."""

    @abstractmethod
    def contains(self, item: T) -> bool:
        """Return True if some slot holds a value equal to ``item``."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Store ``item`` in the first empty slot.

        Raises:
            ContainerFull: Every slot is occupied.

        Example:
            >>> inv = Inventory.with_capacity(1)
            >>> inv.add(Item(10, 1))
            >>> inv.add(Item(10, 1))
            Traceback (most recent call last):
            ...
            slot_inventory.errors.ContainerFull: ...
        """

    @abstractmethod
    def add_at(self, item: T, slot: SlotIndex) -> None:
        """Store ``item`` at ``slot``, replacing whatever is there.

        Raises:
            SlotIndexOutOfBounds: ``slot`` is not a valid index.
        """

    @abstractmethod
    def remove(self, item: T) -> None:
        """Remove ``item`` from the first slot holding the same kind.

        Raises:
            ItemNotFound: No slot holds that kind.
            QuantityInsufficient: The quantity check rejected the removal.
        """

    @abstractmethod
    def remove_at(self, slot: SlotIndex) -> None:
        """Clear ``slot``.

        Raises:
            SlotIndexOutOfBounds: ``slot`` is not a valid index.
            ItemNotFound: ``slot`` is already empty.
        """

    @abstractmethod
    def get_at(self, slot: SlotIndex) -> T:
        """Return the value held at ``slot``.

        Raises:
            SlotIndexOutOfBounds: ``slot`` is not a valid index.
            ItemNotFound: ``slot`` is empty.
        """

    @abstractmethod
    def swap(self, slot_a: SlotIndex, slot_b: SlotIndex) -> None:
        """Exchange the contents of two slots.

        Empty slots take part like any other, so swapping an occupied slot
        with an empty one moves the value.

        Raises:
            SlotIndexOutOfBounds: Either index is not valid.
        """
