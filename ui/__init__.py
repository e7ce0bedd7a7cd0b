"""
User interface modules.

This package contains user interface components:
- Interactive menu system
- User input parsing and feedback
"""

from .interactive import InteractiveInterface, parse_int

__all__ = [
    'InteractiveInterface',
    'parse_int'
]
