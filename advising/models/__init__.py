"""
Data models for the advising tool.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the loader, the query engine and the
terminal display.
"""

from .course import Course, CourseDescription, PrerequisiteView
from .load import IssueKind, LoadIssue, LoadResult

__all__ = [
    # Course models
    "Course",
    "CourseDescription",
    "PrerequisiteView",
    # Load results
    "IssueKind",
    "LoadIssue",
    "LoadResult",
]
