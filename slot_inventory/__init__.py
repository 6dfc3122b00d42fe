"""slot_inventory
=================

Fixed-capacity slotted inventories for quantity-bearing items.

Import the pieces from their subpackages::

    from slot_inventory.collections import Inventory
    from slot_inventory.entity import Item
    from slot_inventory.errors import ContainerError
"""

__version__ = "0.1.0"
