"""
In-memory store for to-do items.

This module provides:
- ItemStore, an ordered list of non-blank text items
- Validated add, remove, edit and lookup by zero-based position
- A numbered, human-readable rendering of the list
"""

import os
from typing import List
from utils.constants import EMPTY_LIST_MESSAGE, EMPTY_ITEM_MESSAGE, EMPTY_DESCRIPTION_MESSAGE
from utils.logging_config import get_logger

logger = get_logger(__name__)


class ValidationError(ValueError):
    """Raised when item text is missing, empty or whitespace-only."""
    pass


class ItemIndexError(IndexError):
    """Raised when a position is outside the current range of the store."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} out of range for list of size {size}")
        self.index = index
        self.size = size


def is_blank(text) -> bool:
    """Return True if text is not a string or has no non-whitespace characters."""
    return not isinstance(text, str) or not text.strip()


class ItemStore:
    """Ordered list of to-do items, addressed by zero-based position."""

    def __init__(self):
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, text: str) -> None:
        """
        Append an item to the end of the list.

        The text is stored exactly as given; trimming is only used to decide
        whether it is blank.

        Args:
            text: Description of the item

        Raises:
            ValidationError: If text is None, empty or whitespace-only
        """
        if is_blank(text):
            logger.debug(f"Rejected add of blank item: {text!r}")
            raise ValidationError(EMPTY_ITEM_MESSAGE)
        self._items.append(text)
        logger.debug(f"Added item #{len(self._items)}: {text!r}")

    def remove_at(self, index: int) -> None:
        """
        Remove the item at a zero-based position.

        Later items shift one position earlier.

        Args:
            index: Zero-based position of the item

        Raises:
            ItemIndexError: If index is outside [0, size)
        """
        self._check_index(index)
        removed = self._items.pop(index)
        logger.debug(f"Removed item #{index + 1}: {removed!r}")

    def edit_at(self, index: int, new_text: str) -> None:
        """
        Replace the item at a zero-based position.

        The text is validated before the position, so a blank description is
        reported even when the position is also out of range.

        Args:
            index: Zero-based position of the item
            new_text: Replacement description, stored unmodified

        Raises:
            ValidationError: If new_text is None, empty or whitespace-only
            ItemIndexError: If index is outside [0, size)
        """
        if is_blank(new_text):
            logger.debug(f"Rejected edit of item #{index + 1} with blank text: {new_text!r}")
            raise ValidationError(EMPTY_DESCRIPTION_MESSAGE)
        self._check_index(index)
        old_text = self._items[index]
        self._items[index] = new_text
        logger.debug(f"Edited item #{index + 1}: {old_text!r} -> {new_text!r}")

    def size(self) -> int:
        """Return the number of items."""
        return len(self._items)

    def get(self, index: int) -> str:
        """
        Return the item at a zero-based position.

        Raises:
            ItemIndexError: If index is outside [0, size)
        """
        self._check_index(index)
        return self._items[index]

    def items(self) -> List[str]:
        """Return a copy of all items in order."""
        return list(self._items)

    def formatted(self) -> str:
        """
        Build the numbered list shown to the user.

        Returns:
            One "<n>. <item>" line per item, each ending with os.linesep,
            or EMPTY_LIST_MESSAGE if the store has no items

        Example:
            >>> store = ItemStore()
            >>> store.add("Buy milk")
            >>> store.formatted()
            '1. Buy milk\\n'
        """
        if not self._items:
            return EMPTY_LIST_MESSAGE

        return "".join(
            f"{number}. {text}{os.linesep}"
            for number, text in enumerate(self._items, start=1)
        )

    def _check_index(self, index: int) -> None:
        # Negative positions are out of range, never counted from the end
        if index < 0 or index >= len(self._items):
            logger.debug(f"Position {index} out of range (size {len(self._items)})")
            raise ItemIndexError(index, len(self._items))
