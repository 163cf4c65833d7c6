"""Sorted secondary index over listings with non-unique keys."""

from bisect import bisect_left, bisect_right
from typing import Any, Callable, Iterator

from realty.models import Property


class SortedIndex:
    """Ordered multi-map from a sort key to listings.

    Entries are kept in a list sorted by ``(key, incremental_id)``, so
    listings sharing a key coexist and come out in insertion order.
    The key is always read from the listing's current fields: callers
    must ``remove`` a listing before changing the field it is keyed on
    and ``insert`` it again afterwards.

    Parameters
    ----------
    key : Callable[[Property], Any]
        Extracts the sort key (e.g. ``lambda p: p.price``).
    name : str
        Label used in error messages.
    """

    def __init__(self, key: Callable[[Property], Any], name: str = "index") -> None:
        self._key = key
        self.name = name
        self._keys: list[tuple[Any, int]] = []
        self._records: list[Property] = []

    def _entry(self, record: Property) -> tuple[Any, int]:
        return (self._key(record), record.incremental_id)

    def insert(self, record: Property) -> None:
        """Insert a listing under its current key."""
        entry = self._entry(record)
        pos = bisect_right(self._keys, entry)
        self._keys.insert(pos, entry)
        self._records.insert(pos, record)

    def remove(self, record: Property) -> None:
        """Remove a listing stored under its current key.

        Raises
        ------
        KeyError
            If no entry matches the listing's current key.
        """
        entry = self._entry(record)
        pos = bisect_left(self._keys, entry)
        if pos == len(self._keys) or self._keys[pos] != entry or self._records[pos] is not record:
            raise KeyError(f"{self.name}: no entry for {entry!r}")
        del self._keys[pos]
        del self._records[pos]

    def between(self, low: Any, high: Any) -> list[Property]:
        """Return listings with ``low <= key <= high`` in index order."""
        start = bisect_left(self._keys, (low,))
        # (high, inf) sorts after every (high, n) entry
        stop = bisect_right(self._keys, (high, float("inf")))
        return self._records[start:stop]

    def values(self) -> list[Property]:
        """Return all listings in index order."""
        return list(self._records)

    def clear(self) -> None:
        self._keys.clear()
        self._records.clear()

    def __iter__(self) -> Iterator[Property]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
