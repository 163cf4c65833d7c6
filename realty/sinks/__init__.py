"""Sinks for persisting, displaying and exporting listings."""

from realty.sinks.console import ConsoleSink
from realty.sinks.flat_file import FlatFileSink
from realty.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "FlatFileSink", "JsonFileSink"]
