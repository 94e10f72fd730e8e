"""
Configuration constants for the advising tool.

This module contains the configuration values and user-facing messages used
throughout the advising package. Centralizing them keeps the wording of
diagnostics identical between the loader, the session and the terminal.
"""

import logging
import os
import sys

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_DATA_FILE = "courses.txt"


# =============================================================================
# SOURCE FORMAT
# =============================================================================
# One record per line:  CODE,Title[,PREREQ1[,PREREQ2...]]
# No quoting or escaping, a comma inside a field is not representable.

DELIMITER = ","
CODE_FIELD = 0
TITLE_FIELD = 1
FIRST_PREREQUISITE_FIELD = 2
MIN_FIELDS = 2


# =============================================================================
# DIAGNOSTIC MESSAGES
# =============================================================================

MSG_SOURCE_ACCESS = "Error: cannot open file '{source}'."
MSG_TOO_FEW_FIELDS = "Line {line}: needs at least Course Number and Title."
MSG_MISSING_CODE = "Line {line}: missing course number."
MSG_MISSING_TITLE = "Line {line}: missing course title."
MSG_MISSING_PREREQUISITE = "Course '{code}' lists missing prerequisite '{prerequisite}'."


# =============================================================================
# MENU
# =============================================================================

MENU_LOAD = "1"
MENU_LIST = "2"
MENU_SHOW = "3"
MENU_EXIT = "9"

MENU_TITLE = "ABCU Advisor Menu"
MENU_ITEMS = (
    (MENU_LOAD, "Load Data"),
    (MENU_LIST, "Print Course List (Sorted)"),
    (MENU_SHOW, "Print Course"),
    (MENU_EXIT, "Exit"),
)

MSG_NOT_LOADED = "Please load data first (Option 1)."
MSG_NOT_FOUND = "Course not found."
MSG_INVALID_CHOICE = "Invalid choice. Please select 1, 2, 3, or 9."
MSG_EMPTY_CODE = "Please enter a non-empty course number."
MSG_INPUT_ABORTED = "Input aborted."
MSG_LOAD_FAILED = "Load failed."
MSG_GOODBYE = "Goodbye."


# =============================================================================
# LOGGING
# =============================================================================
# ADVISING_LOG_LEVEL overrides the level picked from the --verbose flag.
# NO_COLOR (any value) disables ANSI styling in the terminal display.

LOGGER_NAME = "advising"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "ADVISING_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Install a single stderr handler on the package logger.

    Safe to call repeatedly; later calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level_name = os.environ.get(LOG_LEVEL_ENV)
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def color_enabled() -> bool:
    """True unless the NO_COLOR convention asks for plain output."""
    return NO_COLOR_ENV not in os.environ
