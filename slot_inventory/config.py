from dataclasses import dataclass

from slot_inventory.types import ItemID, Quantity, SlotIndex


@dataclass(frozen=True)
class DemoConfig:
    """Defaults for the ``python -m slot_inventory`` demo run."""

    capacity: int = 5

    # Item placed with ``add_at``
    identifier: ItemID = 10
    quantity: Quantity = 1
    slot: SlotIndex = 2


DEMO = DemoConfig()
