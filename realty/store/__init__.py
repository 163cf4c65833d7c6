"""In-memory listing store and its sorted views."""

from realty.store.index import SortedIndex
from realty.store.inventory import InventoryStore

__all__ = ["InventoryStore", "SortedIndex"]
