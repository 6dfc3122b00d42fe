"""Slotted containers.

:class:`Container` names the capability; :class:`Inventory` is the fixed-size
implementation over :class:`~slot_inventory.entity.Item`::

    from slot_inventory.collections import Inventory
"""

from .container import Container
from .inventory import Inventory

__all__ = ["Container", "Inventory"]
