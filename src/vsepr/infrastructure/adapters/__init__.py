"""Adapters for external libraries and data sources."""

from .element_table import ElementTable

__all__ = [
    "ElementTable",
]
