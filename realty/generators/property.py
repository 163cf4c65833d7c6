"""Synthetic property listings for demos and manual testing."""

from __future__ import annotations

import random
from typing import Iterator

from realty.generators.base import BaseGenerator
from realty.models import Property

PROPERTY_TYPES = ["apartment", "house", "condo", "land", "office"]
CATEGORIES = ["residential", "commercial"]


class PropertyGenerator(BaseGenerator):
    """Generate available listings with Faker addresses."""

    def generate(self, property_id: int) -> Property:
        """Generate a listing with the given id.

        Returns
        -------
        Property
            Generated listing, not sold.
        """
        # Addresses are written unescaped to the flat file
        address = self.fake.street_address().replace(",", "")
        property_type = random.choice(PROPERTY_TYPES)
        category = "commercial" if property_type == "office" else random.choice(CATEGORIES)

        return Property(
            property_id=property_id,
            address=address,
            price=float(random.randint(500, 20000) * 100),
            property_type=property_type,
            category=category,
        )

    def generate_batch(
        self,
        count: int,
        start_id: int = 1,
        taken_ids: set[int] | None = None,
    ) -> Iterator[Property]:
        """Yield ``count`` listings with increasing ids, skipping ``taken_ids``."""
        taken = taken_ids or set()
        property_id = start_id
        produced = 0
        while produced < count:
            if property_id not in taken:
                yield self.generate(property_id)
                produced += 1
            property_id += 1
