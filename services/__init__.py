"""
Services Module
Collaborators of the validation layer
"""

from .inventory import InventoryLookup, InMemoryInventory

__all__ = ["InventoryLookup", "InMemoryInventory"]
