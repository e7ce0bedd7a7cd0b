"""
Interactive menu-driven interface for the To-Do List App.

This module provides the console loop that shows the menu, reads the user's
choice and runs the matching add, remove, edit or display action against a
single ItemStore.
"""

import re
import sys
from typing import Callable, Optional
from core.item_store import ItemStore, ValidationError, ItemIndexError
from utils.constants import (
    MENU_HEADER, MENU_OPTIONS, MIN_CHOICE, MAX_CHOICE,
    CHOICE_ADD, CHOICE_REMOVE, CHOICE_EDIT, CHOICE_DISPLAY, CHOICE_EXIT,
    PROMPT_CHOICE, PROMPT_NEW_ITEM, PROMPT_REMOVE_NUMBER, PROMPT_EDIT_NUMBER,
    PROMPT_NEW_DESCRIPTION, MSG_WELCOME, MSG_GOODBYE, MSG_CANCELLED,
    MSG_INVALID_OPTION, MSG_NO_SUCH_ITEM, MSG_ITEM_ADDED, MSG_ITEM_REMOVED,
    MSG_ITEM_UPDATED, MSG_NOTHING_TO_REMOVE, MSG_NOTHING_TO_EDIT, LIST_HEADING,
)
from utils.logging_config import get_logger

_INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+')


def parse_int(line: str) -> Optional[int]:
    """
    Parse the first whitespace-separated token of a line as an integer.

    Anything after the first token is ignored.

    Args:
        line: Raw line read from the console

    Returns:
        The integer value, or None if the line is empty or the token is
        not a base-10 integer
    """
    tokens = line.split()
    if not tokens or not _INTEGER_TOKEN.fullmatch(tokens[0]):
        return None
    return int(tokens[0])


class InteractiveInterface:
    """Interactive menu-driven interface for managing a to-do list."""

    def __init__(self, use_colors: bool = True, store: Optional[ItemStore] = None,
                 input_func: Optional[Callable[[str], str]] = None):
        """
        Initialize the interactive interface.

        Args:
            use_colors: Whether to use colored output
            store: Item store to operate on; a new empty one if omitted
            input_func: Line reader taking a prompt; builtins.input if omitted
        """
        self.use_colors = use_colors and sys.stdout.isatty()
        self.logger = get_logger(__name__)
        self.store = store if store is not None else ItemStore()
        self.input_func = input_func
        self.running = False

    def run(self) -> int:
        """
        Run the interactive interface until the user exits.

        Returns:
            Exit code (0 for success)
        """
        self._print_header()
        self.running = True

        while self.running:
            try:
                choice = self._show_main_menu()

                if choice is None or not MIN_CHOICE <= choice <= MAX_CHOICE:
                    self.logger.debug(f"Rejected menu choice: {choice}")
                    print(MSG_INVALID_OPTION)
                elif choice == CHOICE_ADD:
                    self._handle_add_item()
                elif choice == CHOICE_REMOVE:
                    self._handle_remove_item()
                elif choice == CHOICE_EDIT:
                    self._handle_edit_item()
                elif choice == CHOICE_DISPLAY:
                    self._handle_display_items()
                elif choice == CHOICE_EXIT:
                    print(MSG_GOODBYE)
                    self.running = False

            except ItemIndexError as e:
                self.logger.debug(f"Item lookup failed: {e}")
                print(MSG_NO_SUCH_ITEM)
            except ValidationError as e:
                print(e)
            except (KeyboardInterrupt, EOFError):
                print(f"\n\n{MSG_CANCELLED}")
                self.running = False
                return 0

            print()

        return 0

    def _print_header(self):
        """Print the welcome banner."""
        if self.use_colors:
            print(f"\033[1;36m{MSG_WELCOME}\033[0m")
        else:
            print(MSG_WELCOME)

    def _show_main_menu(self) -> Optional[int]:
        """
        Show the main menu and get user choice.

        Returns:
            Parsed menu choice, or None if the input was not an integer
        """
        print(MENU_HEADER)
        for number, label in enumerate(MENU_OPTIONS, start=1):
            print(f"{number}. {label}")

        return parse_int(self._read_line(PROMPT_CHOICE))

    def _handle_add_item(self):
        """Prompt for a description, add it and show the updated list."""
        text = self._read_line(PROMPT_NEW_ITEM)

        self.store.add(text)

        print(MSG_ITEM_ADDED)
        self._handle_display_items()

    def _handle_remove_item(self):
        """Show the list, prompt for an item number and remove that item."""
        if self.store.size() == 0:
            print(MSG_NOTHING_TO_REMOVE)
            return

        self._handle_display_items()
        number = self._get_item_number(PROMPT_REMOVE_NUMBER)
        if number is None:
            return

        self.store.remove_at(number - 1)

        print(MSG_ITEM_REMOVED)
        self._handle_display_items()

    def _handle_edit_item(self):
        """Show the list, prompt for an item number and its new description."""
        if self.store.size() == 0:
            print(MSG_NOTHING_TO_EDIT)
            return

        self._handle_display_items()
        number = self._get_item_number(PROMPT_EDIT_NUMBER)
        if number is None:
            return

        new_text = self._read_line(PROMPT_NEW_DESCRIPTION)

        self.store.edit_at(number - 1, new_text)

        print(MSG_ITEM_UPDATED)
        self._handle_display_items()

    def _handle_display_items(self):
        """Print the heading followed by the formatted list."""
        print(LIST_HEADING)
        print(self.store.formatted())

    # Helper methods for user input
    def _read_line(self, prompt: str) -> str:
        """Read one raw line; raises EOFError when input is exhausted."""
        reader = self.input_func or input
        return reader(prompt)

    def _get_item_number(self, prompt: str) -> Optional[int]:
        """Read a 1-based item number, reporting malformed input."""
        number = parse_int(self._read_line(prompt))
        if number is None:
            print(MSG_INVALID_OPTION)
        return number
