"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, JSON, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import (
    MENU_TITLE,
    MENU_ITEMS,
    MSG_LOAD_FAILED,
    MSG_NOT_FOUND,
)
from ..engines import CourseQueryEngine
from ..models import CourseDescription, IssueKind, LoadResult


class TerminalDisplay:
    """
    Terminal output for load results, listings and course details.

    Color is on by default; set_color(False) blanks every escape code so
    output can be piped or compared in tests.
    """

    # ANSI color codes for terminal styling; set_color() copies them onto
    # the class as RESET, BOLD, ... (or blanks them)
    _CODES = {
        "RESET": "\033[0m",
        "BOLD": "\033[1m",
        "DIM": "\033[2m",
        "GREEN": "\033[92m",
        "YELLOW": "\033[93m",
        "RED": "\033[91m",
        "CYAN": "\033[96m",
    }

    color = True

    @classmethod
    def set_color(cls, enabled: bool):
        """Switch ANSI styling on or off for every later print."""
        cls.color = enabled
        for name, code in cls._CODES.items():
            setattr(cls, name, code if enabled else "")

    @classmethod
    def print_menu(cls):
        """Print the main menu."""
        print(f"\n{cls.BOLD}{cls.CYAN}{MENU_TITLE}{cls.RESET}")
        for key, label in MENU_ITEMS:
            print(f"  {key}. {label}")

    @classmethod
    def print_message(cls, message: str):
        print(message)

    @classmethod
    def print_warning(cls, message: str):
        print(f"{cls.YELLOW}{message}{cls.RESET}")

    @classmethod
    def print_load_result(cls, result: LoadResult):
        """
        Print the outcome of a load.

        Failure prints "Load failed." first. Any issues are listed in
        discovery order; a clean successful load prints the course count.
        """
        if not result.success:
            print(f"{cls.RED}{MSG_LOAD_FAILED}{cls.RESET}")

        if result.has_issues:
            print(f"\n{cls.BOLD}Validation issues ({len(result.issues)}):{cls.RESET}")
            for issue in result.issues:
                color = cls.YELLOW if issue.kind == IssueKind.MISSING_PREREQUISITE else cls.RED
                print(f" - {color}{issue.message}{cls.RESET}")
        elif result.success:
            print(f"{cls.GREEN}File validated. Loaded {result.loaded_count} courses.{cls.RESET}")

    @classmethod
    def print_course_list(cls, courses: list):
        """Print "CODE, Title" for each course, in the order given."""
        print(f"\n{cls.BOLD}Course List (alphanumeric):{cls.RESET}")
        if courses:
            print(CourseQueryEngine.format_listing(courses))

    @classmethod
    def print_course(cls, description: CourseDescription):
        """Print one course with its resolved prerequisites."""
        if not description.found:
            print(f"{cls.YELLOW}{MSG_NOT_FOUND}{cls.RESET}")
            return

        text = CourseQueryEngine.format_description(description)
        header, _, rest = text.partition("\n")
        print(f"{cls.BOLD}{header}{cls.RESET}")
        for line in rest.splitlines():
            if line.endswith("(missing from catalog)"):
                print(f"{cls.DIM}{line}{cls.RESET}")
            else:
                print(line)


TerminalDisplay.set_color(True)
