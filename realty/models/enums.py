"""Enumeration types for listings and menu actions."""

from enum import Enum

from realty.exceptions import InvalidActionError


class PropertyStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"


class _Action(str, Enum):
    """Action typed at a prompt, matched case-insensitively."""

    @classmethod
    def parse(cls, text: str) -> "_Action":
        """Resolve user text (e.g. ``"buy"``) to a member.

        Raises
        ------
        InvalidActionError
            If the text does not name one of the members.
        """
        value = text.strip().upper()
        for member in cls:
            if member.value == value:
                return member
        choices = " or ".join(f"'{member.value.title()}'" for member in cls)
        raise InvalidActionError(f"Invalid action {text!r}. Please enter either {choices}.")


class TradeAction(_Action):
    BUY = "BUY"
    SELL = "SELL"


class EditAction(_Action):
    EDIT = "EDIT"
    DELETE = "DELETE"


class ListingOrder(str, Enum):
    INSERTION = "insertion"
    PRICE = "price"
    ADDRESS = "address"
