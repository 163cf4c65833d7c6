"""Listing inventory with id, price and address indexes."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from realty.exceptions import (
    AlreadyAvailableError,
    AlreadySoldError,
    DuplicateKeyError,
    NotFoundError,
)
from realty.models import Property, TradeAction
from realty.store.index import SortedIndex

logger = logging.getLogger(__name__)

BUY_MARKUP = 1.05
SELL_MARKDOWN = 0.95


def _by_price() -> SortedIndex:
    return SortedIndex(lambda p: p.price, name="price")


def _by_address() -> SortedIndex:
    return SortedIndex(lambda p: p.address, name="address")


@dataclass
class InventoryStore:
    """In-memory store for listings with index maintenance.

    ``_sequence`` holds every listing in insertion order; ``_by_id``,
    ``_price_index`` and ``_address_index`` reference the same objects.
    Mutations go through the store so the sorted views never hold an
    entry keyed by a stale price or address. Persisting is left to the
    caller.
    """

    _sequence: list[Property] = field(default_factory=list)
    _by_id: dict[int, Property] = field(default_factory=dict)
    _price_index: SortedIndex = field(default_factory=_by_price)
    _address_index: SortedIndex = field(default_factory=_by_address)
    _next_incremental_id: int = 1

    def add(self, record: Property) -> None:
        """Add a listing to the store.

        Raises
        ------
        DuplicateKeyError
            If a listing with the same id is already present.
        """
        if record.property_id in self._by_id:
            raise DuplicateKeyError(f"Property with ID {record.property_id} already exists")
        self._append(record)
        self._by_id[record.property_id] = record

    def restore(self, record: Property) -> None:
        """Add a listing read back from the backing file.

        A repeated id is kept in the sequence and the sorted views, but
        the id table keeps pointing at the earlier listing until
        ``remove_duplicates`` or ``delete`` drops it.
        """
        self._append(record)
        if record.property_id in self._by_id:
            logger.warning(
                "Property %s appears more than once; run remove duplicates to clean up",
                record.property_id,
                extra={"context": {"property_id": record.property_id}},
            )
            return
        self._by_id[record.property_id] = record

    def _append(self, record: Property) -> None:
        record.incremental_id = self._next_incremental_id
        self._next_incremental_id += 1
        self._sequence.append(record)
        self._price_index.insert(record)
        self._address_index.insert(record)

    # Query methods
    def find_by_id(self, property_id: int) -> Property | None:
        """Get a listing by id, or None."""
        return self._by_id.get(property_id)

    def get(self, property_id: int) -> Property:
        """Get a listing by id.

        Raises
        ------
        NotFoundError
            If no listing has that id.
        """
        record = self._by_id.get(property_id)
        if record is None:
            raise NotFoundError(f"Property {property_id} not found")
        return record

    def list_in_order(self) -> list[Property]:
        """Get all listings in insertion order."""
        return list(self._sequence)

    def list_by_price(self) -> list[Property]:
        """Get all listings by ascending price, ties in insertion order."""
        return self._price_index.values()

    def list_by_address(self) -> list[Property]:
        """Get all listings by ascending address, ties in insertion order."""
        return self._address_index.values()

    def find_by_price_range(self, low: float, high: float) -> list[Property]:
        """Get listings priced between ``low`` and ``high`` inclusive."""
        if low > high:
            low, high = high, low
        return self._price_index.between(low, high)

    # Mutations
    def update(
        self,
        property_id: int,
        address: str,
        price: float,
        property_type: str,
        category: str,
    ) -> Property:
        """Replace the editable fields of a listing and reindex it."""
        record = self.get(property_id)

        self._price_index.remove(record)
        self._address_index.remove(record)

        record.address = address
        record.price = price
        record.property_type = property_type
        record.category = category

        self._price_index.insert(record)
        self._address_index.insert(record)
        logger.debug("Updated property %s", property_id)
        return record

    def update_price(self, property_id: int, new_price: float) -> Property:
        """Set a listing's price and move it within the price view."""
        record = self.get(property_id)
        self._price_index.remove(record)
        record.price = new_price
        self._price_index.insert(record)
        return record

    def buy(self, property_id: int) -> Property:
        """Mark an available listing as sold at a 5% markup.

        Raises
        ------
        NotFoundError
            If no listing has that id.
        AlreadySoldError
            If the listing is already sold.
        """
        record = self.get(property_id)
        if record.sold:
            raise AlreadySoldError("This property has already been sold.")
        self.update_price(property_id, round(record.price * BUY_MARKUP, 2))
        record.sold = True
        logger.info(
            "Bought property %s for %.2f",
            property_id,
            record.price,
            extra={"context": {"property_id": property_id, "price": record.price}},
        )
        return record

    def sell(self, property_id: int) -> Property:
        """Put a sold listing back on the market at a 5% markdown.

        Raises
        ------
        NotFoundError
            If no listing has that id.
        AlreadyAvailableError
            If the listing is already available.
        """
        record = self.get(property_id)
        if not record.sold:
            raise AlreadyAvailableError("This property is already available for sale.")
        self.update_price(property_id, round(record.price * SELL_MARKDOWN, 2))
        record.sold = False
        logger.info(
            "Sold property %s for %.2f",
            property_id,
            record.price,
            extra={"context": {"property_id": property_id, "price": record.price}},
        )
        return record

    def transact(self, property_id: int, action: TradeAction | str) -> Property:
        """Buy or sell a listing; ``action`` may be the text typed at the prompt."""
        if not isinstance(action, TradeAction):
            action = TradeAction.parse(action)
        if action is TradeAction.BUY:
            return self.buy(property_id)
        return self.sell(property_id)

    def delete(self, property_id: int) -> Property:
        """Remove a listing from the sequence and every index."""
        record = self.get(property_id)
        self._discard(record)
        logger.debug("Deleted property %s", property_id)
        return record

    def _discard(self, record: Property) -> None:
        # Identity match: shadowed rows may compare equal to the live one
        for pos, candidate in enumerate(self._sequence):
            if candidate is record:
                del self._sequence[pos]
                break
        self._price_index.remove(record)
        self._address_index.remove(record)

        if self._by_id.get(record.property_id) is record:
            del self._by_id[record.property_id]
            for candidate in self._sequence:
                if candidate.property_id == record.property_id:
                    self._by_id[record.property_id] = candidate
                    break

    def remove_duplicates(self) -> list[Property]:
        """Drop later listings that repeat an earlier id or (address, price).

        Returns
        -------
        list[Property]
            The removed listings, in insertion order.
        """
        seen_ids: set[int] = set()
        seen_locations: set[tuple[str, float]] = set()
        to_remove: list[Property] = []

        for record in self._sequence:
            if record.property_id in seen_ids:
                to_remove.append(record)
                continue
            seen_ids.add(record.property_id)
            location = (record.address, record.price)
            if location in seen_locations:
                to_remove.append(record)
            else:
                seen_locations.add(location)

        for record in to_remove:
            self._discard(record)

        if to_remove:
            logger.info(
                "Removed %d duplicate properties",
                len(to_remove),
                extra={"context": {"removed_ids": [r.property_id for r in to_remove]}},
            )
        return to_remove

    def summary(self) -> dict[str, int]:
        """Return listing counts by status."""
        sold = sum(1 for record in self._sequence if record.sold)
        return {
            "total": len(self._sequence),
            "available": len(self._sequence) - sold,
            "sold": sold,
        }

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Property]:
        return iter(list(self._sequence))

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._by_id
