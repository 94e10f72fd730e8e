"""
Course Advising Package
=======================

An in-memory advising tool: load a course catalog from a comma-delimited text
file, list every course in order, and show one course with its prerequisites.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌─────────────────┐  ┌────────────────────────────┐  │
│  │ RecordParser │  │  CourseCatalog  │  │      CatalogLoader         │  │
│  │ (one line)   │  │ (ordered tree)  │  │ (parse pass + ref check)   │  │
│  └──────────────┘  └─────────────────┘  └────────────────────────────┘  │
│                                                                         │
│  ┌───────────────────────────────────────────────────────────────────┐  │
│  │                     CourseQueryEngine                              │  │
│  │           (sorted listing, course + resolved prerequisites)       │  │
│  └───────────────────────────────────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                 TerminalDisplay (the only module that prints)           │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│          AdvisingSession (owns the catalog + "data loaded" state)       │
│          cli.py (menu loop / one-shot command line)                     │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m advising
├── config.py            # Delimiter, messages, menu keys, logging setup
├── advisor.py           # AdvisingSession, DataNotLoadedError
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, CourseDescription, PrerequisiteView
│   └── load.py          # LoadResult, LoadIssue, IssueKind
│
├── data/                # Source reading and storage
│   ├── parser.py        # RecordParser
│   ├── catalog.py       # CourseCatalog (binary search tree)
│   └── loader.py        # CatalogLoader
│
├── engines/
│   └── query.py         # CourseQueryEngine
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from advising import AdvisingSession

    session = AdvisingSession()
    result = session.load("courses.txt")
    for issue in result.issues:
        print(issue)
    for course in session.list_courses():
        print(course.code, course.title)
    print(session.query_engine.format_description(session.describe("csci300")))

Running from command line:

    python -m advising
    python -m advising courses.txt --list --show CSCI300

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import AdvisingSession, AdvisingError, DataNotLoadedError
from .cli import main

# Model exports
from .models import (
    Course,
    CourseDescription,
    PrerequisiteView,
    IssueKind,
    LoadIssue,
    LoadResult,
)

# Algorithm exports
from .data import CourseCatalog, CatalogLoader, RecordParser
from .engines import CourseQueryEngine

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AdvisingSession",
    "AdvisingError",
    "DataNotLoadedError",
    "main",
    # Models
    "Course",
    "CourseDescription",
    "PrerequisiteView",
    "IssueKind",
    "LoadIssue",
    "LoadResult",
    # Algorithm
    "CourseCatalog",
    "CatalogLoader",
    "RecordParser",
    "CourseQueryEngine",
    # UI
    "TerminalDisplay",
]
