"""
Shared constants and configurations for the to-do list application.

This module contains all the constants used across different modules including:
- Application metadata
- Menu layout and option bounds
- Console prompts and user-facing messages
- Logging defaults
"""

from typing import List

# ============================================================================
# APPLICATION METADATA
# ============================================================================

APP_NAME: str = "To-Do List App"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
A console-based to-do list manager with support for:
- Adding new to-do items
- Removing items by number
- Editing existing items
- Displaying the numbered list
"""

# ============================================================================
# MENU CONSTANTS
# ============================================================================

MENU_HEADER: str = "==== TO-DO LIST MENU ===="

# Numbered entries, in display order; the last one is always Exit
MENU_OPTIONS: List[str] = [
    "Add new item",
    "Remove an item",
    "Edit an item",
    "Display all items",
    "Exit",
]

CHOICE_ADD: int = 1
CHOICE_REMOVE: int = 2
CHOICE_EDIT: int = 3
CHOICE_DISPLAY: int = 4
CHOICE_EXIT: int = 5

MIN_CHOICE: int = 1
MAX_CHOICE: int = len(MENU_OPTIONS)

# ============================================================================
# CONSOLE PROMPTS
# ============================================================================

PROMPT_CHOICE: str = f"Choose an option ({MIN_CHOICE}-{MAX_CHOICE}): "
PROMPT_NEW_ITEM: str = "Enter the new to-do item: "
PROMPT_REMOVE_NUMBER: str = "Enter the item number to remove: "
PROMPT_EDIT_NUMBER: str = "Enter the item number to edit: "
PROMPT_NEW_DESCRIPTION: str = "Enter the new description: "

# ============================================================================
# CONSOLE MESSAGES
# ============================================================================

MSG_WELCOME: str = f"Welcome to the {APP_NAME}!"
MSG_GOODBYE: str = "Goodbye!"
MSG_CANCELLED: str = "Operation cancelled by user. Goodbye!"
MSG_INVALID_OPTION: str = f"Invalid option. Please choose a number from {MIN_CHOICE} to {MAX_CHOICE}."
MSG_NO_SUCH_ITEM: str = "That item number does not exist."
MSG_ITEM_ADDED: str = "Item added."
MSG_ITEM_REMOVED: str = "Item removed."
MSG_ITEM_UPDATED: str = "Item updated."
MSG_NOTHING_TO_REMOVE: str = "The to-do list is empty. Nothing to remove."
MSG_NOTHING_TO_EDIT: str = "The to-do list is empty. Nothing to edit."
LIST_HEADING: str = "Current to-do list:"

# Returned by ItemStore.formatted() when there are no items
EMPTY_LIST_MESSAGE: str = "The to-do list is empty."

# ValidationError messages
EMPTY_ITEM_MESSAGE: str = "Item description cannot be empty."
EMPTY_DESCRIPTION_MESSAGE: str = "New description cannot be empty."

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

LOGGER_NAME: str = "todo_app"
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
