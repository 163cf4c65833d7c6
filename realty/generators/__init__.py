"""Synthetic listing generators."""

from realty.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
