"""Item value object."""

from dataclasses import dataclass, replace

from slot_inventory.types import ItemID, Quantity


@dataclass(frozen=True, order=True)
class Item:
    """Quantity-bearing item held by a container slot.

    Items never change in place; a new quantity means a new ``Item`` (see
    :meth:`with_quantity`). Equality and ordering compare ``identifier`` first,
    then ``quantity``.

    Attributes:
        identifier:
            Kind of the item. Two items with equal identifiers are the same
            kind for matching and removal.
        quantity:
            How many of that kind this value represents.
    """

    identifier: ItemID
    quantity: Quantity

    def __post_init__(self) -> None:
        for name in ("identifier", "quantity"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Item {name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"Item {name} must be non-negative, got {value}")

    def same_kind(self, other: "Item") -> bool:
        """Return True if ``other`` shares this item's identifier."""
        return self.identifier == other.identifier

    def with_quantity(self, quantity: Quantity) -> "Item":
        """Return a copy of this item carrying ``quantity``."""
        return replace(self, quantity=quantity)
