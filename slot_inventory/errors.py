"""Container exception hierarchy.

Each :class:`~slot_inventory.types.ContainerErrorKind` maps to exactly one
exception class. All of them derive from :class:`ContainerError`, so callers
can catch the whole family and branch on ``exc.kind``. Where a builtin
exception already describes the failure (``IndexError``, ``LookupError``,
``ValueError``) the class also inherits from it.
"""

from typing import Optional

from slot_inventory.types import ContainerErrorKind, SlotIndex


class ContainerError(Exception):
    """Base class for failures raised by container operations."""

    kind: ContainerErrorKind

    def __init__(self, message: str, slot: Optional[SlotIndex] = None) -> None:
        super().__init__(message)
        self.slot = slot


class ContainerFull(ContainerError):
    """No empty slot is available for an insert."""

    kind = ContainerErrorKind.FULL


class ItemNotFound(ContainerError, LookupError):
    """No matching item, or the addressed slot is empty."""

    kind = ContainerErrorKind.NOT_FOUND


class SlotIndexOutOfBounds(ContainerError, IndexError):
    """Slot index outside ``[0, capacity)``."""

    kind = ContainerErrorKind.INDEX_OUT_OF_BOUNDS


class QuantityInsufficient(ContainerError, ValueError):
    """Quantity check on removal rejected the request."""

    kind = ContainerErrorKind.QUANTITY_INSUFFICIENT


__all__ = [
    "ContainerError",
    "ContainerFull",
    "ItemNotFound",
    "QuantityInsufficient",
    "SlotIndexOutOfBounds",
]
