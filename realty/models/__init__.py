"""Domain models for the listing inventory."""

from realty.models.enums import EditAction, ListingOrder, PropertyStatus, TradeAction
from realty.models.property import Property

__all__ = ["EditAction", "ListingOrder", "Property", "PropertyStatus", "TradeAction"]
