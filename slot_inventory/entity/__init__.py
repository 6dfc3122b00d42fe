"""Entity value types stored inside containers."""

from .item import Item

__all__ = ["Item"]
