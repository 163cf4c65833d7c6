"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from realty.models import Property
from realty.sinks import ConsoleSink, FlatFileSink
from realty.store import InventoryStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> InventoryStore:
    """Create a fresh store for each test."""
    return InventoryStore()


@pytest.fixture
def sample_property() -> Property:
    """Create a sample listing."""
    return Property(
        property_id=1,
        address="12 Oak Street",
        price=100.0,
        property_type="house",
        category="residential",
    )


@pytest.fixture
def populated_store() -> InventoryStore:
    """Store with three listings added in id order."""
    store = InventoryStore()
    store.add(Property(1, "Maple Avenue 5", 300.0, False, "house", "residential"))
    store.add(Property(2, "Birch Road 9", 100.0, False, "apartment", "residential"))
    store.add(Property(3, "Cedar Lane 1", 200.0, True, "office", "commercial"))
    return store


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path for a backing file that does not exist yet."""
    return tmp_path / "properties.csv"


@pytest.fixture
def flat_sink(data_file: Path) -> FlatFileSink:
    """Flat-file sink on a temporary path."""
    return FlatFileSink(data_file)


@pytest.fixture
def console() -> ConsoleSink:
    """Console sink without colour codes."""
    return ConsoleSink(color=False)
