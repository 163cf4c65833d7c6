"""Shared serialization utilities for sinks."""

import math
from dataclasses import fields

from realty.exceptions import FormatError
from realty.models import Property

FIELD_COUNT = 6
DEFAULT_DELIMITER = ","


def to_line(record: Property, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Serialize a listing as ``id,address,price,sold,type,category``.

    The address and type are written as-is; a delimiter inside them is
    not escaped.
    """
    return delimiter.join(
        [
            str(record.property_id),
            record.address,
            repr(float(record.price)),
            "true" if record.sold else "false",
            record.property_type,
            record.category,
        ]
    )


def from_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> Property:
    """Parse one persisted line back into a listing.

    Parameters
    ----------
    line : str
        A line previously produced by ``to_line``. A trailing newline is
        ignored, as are fields beyond the sixth.
    delimiter : str
        Field separator.

    Returns
    -------
    Property
        The parsed listing (not yet in any store).

    Raises
    ------
    FormatError
        If there are fewer than six fields or id, price or sold is malformed.
    """
    parts = line.rstrip("\r\n").split(delimiter)
    if len(parts) < FIELD_COUNT:
        raise FormatError(f"Expected {FIELD_COUNT} fields, got {len(parts)}: {line.strip()!r}")

    raw_id, address, raw_price, raw_sold, property_type, category = parts[:FIELD_COUNT]

    try:
        property_id = int(raw_id)
    except ValueError:
        raise FormatError(f"Invalid property id {raw_id!r}") from None

    price = parse_price(raw_price)

    sold_text = raw_sold.strip().lower()
    if sold_text not in ("true", "false"):
        raise FormatError(f"Invalid sold flag {raw_sold!r} (expected true or false)")

    return Property(
        property_id=property_id,
        address=address,
        price=price,
        sold=sold_text == "true",
        property_type=property_type,
        category=category,
    )


def parse_price(text: str) -> float:
    """Parse a finite decimal price.

    Raises
    ------
    FormatError
        If the text is not a number, or is NaN or infinite.
    """
    try:
        price = float(text)
    except ValueError:
        raise FormatError(f"Invalid price {text!r}") from None
    if not math.isfinite(price):
        raise FormatError(f"Invalid price {text!r}")
    return price


def to_dict(record: Property) -> dict:
    """Convert a listing to a JSON-ready dict (without store bookkeeping)."""
    result = {f.name: getattr(record, f.name) for f in fields(record) if f.name != "incremental_id"}
    result["status"] = record.status.value
    return result
