"""Property listing model."""

from dataclasses import dataclass, field

from realty.models.enums import PropertyStatus


@dataclass
class Property:
    """Real estate listing held in the inventory."""

    property_id: int
    address: str
    price: float
    sold: bool = False
    property_type: str = ""  # apartment, house, ...
    category: str = ""  # residential, commercial, ...
    incremental_id: int = field(default=0, compare=False, repr=False)  # Insertion sequence, set by the store

    @property
    def status(self) -> PropertyStatus:
        return PropertyStatus.SOLD if self.sold else PropertyStatus.AVAILABLE

    def __str__(self) -> str:
        status = "Sold" if self.sold else "Available"
        return (
            f"ID: {self.property_id} | Address: {self.address} | Price: ${self.price:.2f} | "
            f"Type: {self.property_type} | Category: {self.category} | Status: {status}"
        )
