"""
Core to-do list modules.

This package contains the list model:
- ItemStore, the ordered in-memory collection of to-do items
- The validation and position errors it raises
"""

from .item_store import ItemStore, ValidationError, ItemIndexError

__all__ = [
    'ItemStore',
    'ValidationError',
    'ItemIndexError',
]
