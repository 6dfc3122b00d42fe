"""Common type aliases and enumerations.

``SlotIndex`` positions are stable for a container's lifetime; slots are
cleared, never renumbered. ``ContainerErrorKind`` is the closed set of
failure kinds reported by :mod:`slot_inventory.errors`.
"""

from enum import StrEnum, auto
from typing import Optional, TYPE_CHECKING


if TYPE_CHECKING:
    from slot_inventory.entity import Item

ItemID = int
Quantity = int
SlotIndex = int

# ``None`` marks an empty slot.
Slot = Optional["Item"]


class ContainerErrorKind(StrEnum):
    """Failure categories shared by every container operation."""

    FULL = auto()
    NOT_FOUND = auto()
    INDEX_OUT_OF_BOUNDS = auto()
    QUANTITY_INSUFFICIENT = auto()
