"""Tests for InventoryStore."""

import pytest

from realty.exceptions import (
    AlreadyAvailableError,
    AlreadySoldError,
    DuplicateKeyError,
    InvalidActionError,
    NotFoundError,
)
from realty.models import Property, TradeAction
from realty.store import InventoryStore


def assert_consistent(store: InventoryStore) -> None:
    """Every listing is reachable by id and appears once in each sorted view."""
    by_price = store.list_by_price()
    by_address = store.list_by_address()
    records = store.list_in_order()

    assert len(by_price) == len(records)
    assert len(by_address) == len(records)
    for record in records:
        assert store.find_by_id(record.property_id) is record
        assert sum(1 for r in by_price if r is record) == 1
        assert sum(1 for r in by_address if r is record) == 1

    prices = [r.price for r in by_price]
    addresses = [r.address for r in by_address]
    assert prices == sorted(prices)
    assert addresses == sorted(addresses)


class TestInventoryStoreAdd:
    """Tests for adding listings."""

    def test_add(self, store: InventoryStore, sample_property: Property) -> None:
        """Test adding a listing."""
        store.add(sample_property)

        assert store.find_by_id(1) is sample_property
        assert store.list_in_order() == [sample_property]
        assert 1 in store
        assert len(store) == 1
        assert_consistent(store)

    def test_add_assigns_incremental_ids(self, populated_store: InventoryStore) -> None:
        assert [r.incremental_id for r in populated_store] == [1, 2, 3]

    def test_add_duplicate_id_fails(self, store: InventoryStore, sample_property: Property) -> None:
        """Test that a repeated id is rejected and nothing changes."""
        store.add(sample_property)

        with pytest.raises(DuplicateKeyError, match="ID 1 already exists"):
            store.add(Property(1, "Other", 5.0))

        assert store.list_in_order() == [sample_property]
        assert len(store.list_by_price()) == 1

    def test_insertion_order_preserved(self, populated_store: InventoryStore) -> None:
        assert [r.property_id for r in populated_store.list_in_order()] == [1, 2, 3]

    def test_find_missing(self, store: InventoryStore) -> None:
        assert store.find_by_id(42) is None

    def test_get_missing(self, store: InventoryStore) -> None:
        with pytest.raises(NotFoundError, match="Property 42 not found"):
            store.get(42)


class TestInventoryStoreViews:
    """Tests for the sorted listings."""

    def test_list_by_price(self, populated_store: InventoryStore) -> None:
        assert [r.property_id for r in populated_store.list_by_price()] == [2, 3, 1]

    def test_list_by_address(self, populated_store: InventoryStore) -> None:
        assert [r.address for r in populated_store.list_by_address()] == [
            "Birch Road 9",
            "Cedar Lane 1",
            "Maple Avenue 5",
        ]

    def test_equal_prices_all_listed(self, store: InventoryStore) -> None:
        """Listings with the same price are all kept, in insertion order."""
        for i in (5, 3, 9):
            store.add(Property(i, f"Street {i}", 250.0))

        assert [r.property_id for r in store.list_by_price()] == [5, 3, 9]

    def test_equal_addresses_all_listed(self, store: InventoryStore) -> None:
        for i, price in ((1, 30.0), (2, 10.0)):
            store.add(Property(i, "Same Street 1", price))

        assert [r.property_id for r in store.list_by_address()] == [1, 2]

    def test_find_by_price_range(self, populated_store: InventoryStore) -> None:
        assert [r.property_id for r in populated_store.find_by_price_range(150.0, 300.0)] == [3, 1]

    def test_find_by_price_range_swapped_bounds(self, populated_store: InventoryStore) -> None:
        assert [r.property_id for r in populated_store.find_by_price_range(150.0, 50.0)] == [2]

    def test_listings_are_copies(self, populated_store: InventoryStore) -> None:
        populated_store.list_in_order().clear()
        populated_store.list_by_price().clear()
        assert len(populated_store) == 3
        assert len(populated_store.list_by_price()) == 3


class TestInventoryStoreUpdate:
    """Tests for editing listings."""

    def test_update_fields(self, populated_store: InventoryStore) -> None:
        record = populated_store.update(2, "Aspen Court 4", 999.0, "condo", "commercial")

        assert record.address == "Aspen Court 4"
        assert record.price == 999.0
        assert record.property_type == "condo"
        assert record.category == "commercial"
        assert_consistent(populated_store)

    def test_update_reindexes_address(self, populated_store: InventoryStore) -> None:
        """Edited address shows up immediately and the old one is gone."""
        populated_store.update(1, "Alder Way 2", 300.0, "house", "residential")

        addresses = [r.address for r in populated_store.list_by_address()]
        assert addresses[0] == "Alder Way 2"
        assert "Maple Avenue 5" not in addresses

    def test_update_reindexes_price(self, populated_store: InventoryStore) -> None:
        populated_store.update(1, "Maple Avenue 5", 1.0, "house", "residential")
        assert populated_store.list_by_price()[0].property_id == 1

    def test_update_keeps_insertion_position(self, populated_store: InventoryStore) -> None:
        populated_store.update(1, "Zeta", 5.0, "house", "residential")
        assert [r.property_id for r in populated_store.list_in_order()] == [1, 2, 3]

    def test_update_missing(self, store: InventoryStore) -> None:
        with pytest.raises(NotFoundError):
            store.update(9, "a", 1.0, "b", "c")

    def test_update_price(self, populated_store: InventoryStore) -> None:
        populated_store.update_price(2, 500.0)

        assert [r.property_id for r in populated_store.list_by_price()] == [3, 1, 2]
        assert_consistent(populated_store)


class TestInventoryStoreTransactions:
    """Tests for buy/sell."""

    def test_buy_then_sell(self, store: InventoryStore, sample_property: Property) -> None:
        store.add(sample_property)

        store.buy(1)
        assert sample_property.price == pytest.approx(105.00)
        assert sample_property.sold is True

        store.sell(1)
        assert sample_property.price == pytest.approx(99.75)
        assert sample_property.sold is False
        assert_consistent(store)

    def test_buy_sold_fails(self, populated_store: InventoryStore) -> None:
        with pytest.raises(AlreadySoldError):
            populated_store.buy(3)
        assert populated_store.get(3).price == 200.0

    def test_sell_available_fails(self, populated_store: InventoryStore) -> None:
        with pytest.raises(AlreadyAvailableError):
            populated_store.sell(1)
        assert populated_store.get(1).price == 300.0

    def test_buy_missing(self, store: InventoryStore) -> None:
        with pytest.raises(NotFoundError):
            store.buy(1)

    def test_buy_moves_listing_in_price_view(self, store: InventoryStore) -> None:
        store.add(Property(1, "a", 100.0))
        store.add(Property(2, "b", 104.0))

        store.buy(1)

        assert [r.property_id for r in store.list_by_price()] == [2, 1]

    def test_transact_with_text(self, populated_store: InventoryStore) -> None:
        populated_store.transact(1, "Buy")
        populated_store.transact(1, TradeAction.SELL)
        assert populated_store.get(1).sold is False

    def test_transact_invalid_action(self, populated_store: InventoryStore) -> None:
        with pytest.raises(InvalidActionError):
            populated_store.transact(1, "rent")

    def test_summary(self, populated_store: InventoryStore) -> None:
        assert populated_store.summary() == {"total": 3, "available": 2, "sold": 1}


class TestInventoryStoreDelete:
    """Tests for deleting listings."""

    def test_delete(self, populated_store: InventoryStore) -> None:
        removed = populated_store.delete(2)

        assert removed.property_id == 2
        assert populated_store.find_by_id(2) is None
        assert removed not in populated_store.list_by_price()
        assert removed not in populated_store.list_by_address()
        assert [r.property_id for r in populated_store] == [1, 3]
        assert_consistent(populated_store)

    def test_delete_missing(self, store: InventoryStore) -> None:
        with pytest.raises(NotFoundError):
            store.delete(1)

    def test_delete_then_readd(self, populated_store: InventoryStore) -> None:
        populated_store.delete(1)
        populated_store.add(Property(1, "New", 1.0))

        assert [r.property_id for r in populated_store] == [2, 3, 1]
        assert_consistent(populated_store)


class TestInventoryStoreRestore:
    """Tests for loading listings that may repeat an id."""

    def test_restore_duplicate_keeps_first_in_id_table(self, store: InventoryStore) -> None:
        first = Property(1, "A", 10.0)
        second = Property(1, "B", 20.0)
        store.restore(first)
        store.restore(second)

        assert store.find_by_id(1) is first
        assert store.list_in_order() == [first, second]
        assert len(store.list_by_price()) == 2

    def test_delete_promotes_shadowed_listing(self, store: InventoryStore) -> None:
        first = Property(1, "A", 10.0)
        second = Property(1, "B", 20.0)
        store.restore(first)
        store.restore(second)

        store.delete(1)

        assert store.find_by_id(1) is second
        assert store.list_in_order() == [second]

    def test_restore_logs_warning(self, store: InventoryStore, caplog: pytest.LogCaptureFixture) -> None:
        store.restore(Property(1, "A", 10.0))
        with caplog.at_level("WARNING", logger="realty.store.inventory"):
            store.restore(Property(1, "B", 20.0))
        assert "appears more than once" in caplog.text


class TestInventoryStoreRemoveDuplicates:
    """Tests for deduplication."""

    def test_scenario(self, store: InventoryStore) -> None:
        """Later duplicate id and later duplicate (address, price) are removed."""
        store.restore(Property(1, "A", 10.0))
        store.restore(Property(1, "B", 20.0))
        store.restore(Property(2, "A", 10.0))

        removed = store.remove_duplicates()

        assert [(r.property_id, r.address) for r in removed] == [(1, "B"), (2, "A")]
        assert store.list_in_order() == [Property(1, "A", 10.0)]
        assert store.find_by_id(2) is None
        assert_consistent(store)

    def test_same_address_different_price_kept(self, store: InventoryStore) -> None:
        store.add(Property(1, "A", 10.0))
        store.add(Property(2, "A", 11.0))

        assert store.remove_duplicates() == []
        assert len(store) == 2

    def test_keeps_earliest_regardless_of_other_fields(self, store: InventoryStore) -> None:
        store.add(Property(1, "A", 10.0, True, "house", "residential"))
        store.add(Property(2, "A", 10.0, False, "office", "commercial"))

        store.remove_duplicates()

        assert [r.property_id for r in store] == [1]

    def test_idempotent(self, store: InventoryStore) -> None:
        for i, (address, price) in enumerate([("A", 1.0), ("B", 2.0), ("A", 1.0), ("C", 2.0)], start=1):
            store.add(Property(i, address, price))

        first = store.remove_duplicates()
        snapshot = store.list_in_order()
        second = store.remove_duplicates()

        assert len(first) == 1
        assert second == []
        assert store.list_in_order() == snapshot

    def test_empty_store(self, store: InventoryStore) -> None:
        assert store.remove_duplicates() == []


class TestInventoryStoreInvariants:
    """Mixed operation sequences keep every index consistent."""

    def test_mixed_operations(self, store: InventoryStore) -> None:
        for i in range(1, 11):
            store.add(Property(i, f"Street {i % 4}", float(i % 3) * 100))
        store.buy(2)
        store.update(3, "Street 9", 100.0, "house", "residential")
        store.delete(5)
        store.sell(2)
        store.update_price(7, 0.0)
        store.remove_duplicates()

        ids = [r.property_id for r in store]
        assert len(ids) == len(set(ids))
        assert_consistent(store)
