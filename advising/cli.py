"""
Command-Line Interface for the Advising Tool.

This module provides the interactive menu and a one-shot mode for scripts.
It handles user input and hands results to the terminal display.

MODES:
------
1. INTERACTIVE: numbered menu (load, list, show one course, exit)
2. ONE-SHOT:    advising courses.txt --list --show CSCI300

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m advising
"""

import argparse
import sys

from .advisor import AdvisingSession, DataNotLoadedError
from .config import (
    DEFAULT_DATA_FILE,
    MENU_LOAD,
    MENU_LIST,
    MENU_SHOW,
    MENU_EXIT,
    MSG_NOT_LOADED,
    MSG_INVALID_CHOICE,
    MSG_EMPTY_CODE,
    MSG_INPUT_ABORTED,
    MSG_GOODBYE,
    color_enabled,
    configure_logging,
)
from .ui import TerminalDisplay


def _prompt(text: str):
    """Read one line from the user; None on EOF."""
    try:
        return input(text)
    except EOFError:
        return None


def _load(session: AdvisingSession, source) -> bool:
    result = session.load(source)
    TerminalDisplay.print_load_result(result)
    return result.success


def _handle_load(session: AdvisingSession):
    path = _prompt(f"Enter the course data filename (e.g., {DEFAULT_DATA_FILE}): ")
    if path is None:
        TerminalDisplay.print_message(MSG_INPUT_ABORTED)
        return
    _load(session, path.strip())


def _handle_list(session: AdvisingSession):
    try:
        courses = session.list_courses()
    except DataNotLoadedError:
        TerminalDisplay.print_warning(MSG_NOT_LOADED)
        return
    TerminalDisplay.print_course_list(courses)


def _handle_show(session: AdvisingSession):
    if not session.ready:
        TerminalDisplay.print_warning(MSG_NOT_LOADED)
        return

    code = _prompt("Enter course number (e.g., CSCI300): ")
    if code is None:
        TerminalDisplay.print_message(MSG_INPUT_ABORTED)
        return
    code = code.strip()
    if not code:
        TerminalDisplay.print_warning(MSG_EMPTY_CODE)
        return
    TerminalDisplay.print_course(session.describe(code))


def run_menu(session: AdvisingSession):
    """
    Run the numbered menu until the user exits or input ends.

    ═══════════════════════════════════════════════════════════════════════════
    MENU
    ═══════════════════════════════════════════════════════════════════════════

    1. Load Data:     prompt for a filename, rebuild the catalog, show issues
    2. Print List:    every course sorted by course number
    3. Print Course:  one course with its prerequisites resolved to titles
    9. Exit

    Options 2 and 3 require a successful load that produced courses.
    """
    handlers = {
        MENU_LOAD: _handle_load,
        MENU_LIST: _handle_list,
        MENU_SHOW: _handle_show,
    }

    while True:
        TerminalDisplay.print_menu()
        choice = _prompt("Enter choice: ")
        if choice is None:
            break
        choice = choice.strip()

        if choice == MENU_EXIT:
            TerminalDisplay.print_message(MSG_GOODBYE)
            break

        handler = handlers.get(choice)
        if handler is None:
            TerminalDisplay.print_warning(MSG_INVALID_CHOICE)
            continue
        handler(session)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advising",
        description="Load a course catalog and look up courses and prerequisites.",
    )
    parser.add_argument("file", nargs="?", help="Course data file to load on startup")
    parser.add_argument("--list", dest="list_courses", action="store_true",
                        help="Print the sorted course list and exit")
    parser.add_argument("--show", dest="show", action="append", default=[], metavar="CODE",
                        help="Print one course with its prerequisites and exit (repeatable)")
    parser.add_argument("--no-color", dest="no_color", action="store_true",
                        help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_once(session: AdvisingSession, args) -> int:
    """Load args.file, print the requested queries and return an exit status."""
    if not _load(session, args.file):
        return 1
    if not session.ready:
        TerminalDisplay.print_warning(MSG_NOT_LOADED)
        return 0

    if args.list_courses:
        TerminalDisplay.print_course_list(session.list_courses())
    for code in args.show:
        if not code.strip():
            TerminalDisplay.print_warning(MSG_EMPTY_CODE)
            continue
        TerminalDisplay.print_course(session.describe(code))
    return 0


def main(argv=None) -> int:
    """
    Command-line entry point.

    With --list or --show the tool runs once against FILE and exits;
    otherwise it preloads FILE (if given) and starts the interactive menu.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    TerminalDisplay.set_color(color_enabled() and not args.no_color)

    session = AdvisingSession()

    if args.list_courses or args.show:
        if not args.file:
            parser.error("FILE is required with --list or --show")
        return run_once(session, args)

    if args.file:
        _load(session, args.file)
    run_menu(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
