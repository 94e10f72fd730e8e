"""
Course Query Engine.

This module answers the two advising queries against a loaded catalog:
the sorted course listing and a single course with its prerequisites
resolved to titles.
"""

from ..config import MSG_NOT_FOUND
from ..data import CourseCatalog
from ..data.parser import normalize_code
from ..models import CourseDescription, PrerequisiteView


class CourseQueryEngine:
    """
    Read-only queries over a CourseCatalog.

    CASE HANDLING:
    The catalog is an exact-match store of uppercased codes. describe()
    uppercases the caller's code first, so "csci200" finds "CSCI200".

    MISSING PREREQUISITES:
    A prerequisite code that is not in the catalog does not fail the query.
    It is returned as a PrerequisiteView with no title and rendered as
    "CODE (missing from catalog)".
    """

    def __init__(self, catalog: CourseCatalog):
        self.catalog = catalog

    def describe(self, code: str) -> CourseDescription:
        """
        Look up one course and resolve its prerequisites.

        Returns:
            CourseDescription; `found` is False when the code is not in the
            catalog. Never raises for an unknown code.
        """
        key = normalize_code(code)
        course = self.catalog.lookup(key)
        if course is None:
            return CourseDescription(query=key)

        views = []
        for prerequisite in course.prerequisites:
            match = self.catalog.lookup(prerequisite)
            views.append(PrerequisiteView(
                code=prerequisite,
                title=match.title if match is not None else None,
            ))
        return CourseDescription(query=key, course=course, prerequisites=views)

    def list_courses(self) -> list:
        """All courses in ascending code order."""
        return list(self.catalog.traverse_in_order())

    @staticmethod
    def format_description(description: CourseDescription) -> str:
        """
        Render a description as plain text.

        Example:
            CSCI300 - Introduction to Algorithms
            Prerequisites:
              CSCI200 - Data Structures
              MATH999 (missing from catalog)
        """
        if not description.found:
            return MSG_NOT_FOUND

        course = description.course
        lines = [f"{course.code} - {course.title}"]
        if not description.prerequisites:
            lines.append("Prerequisites: None")
            return "\n".join(lines)

        lines.append("Prerequisites:")
        for view in description.prerequisites:
            if view.is_missing:
                lines.append(f"  {view.code} (missing from catalog)")
            else:
                lines.append(f"  {view.code} - {view.title}")
        return "\n".join(lines)

    @staticmethod
    def format_listing(courses: list) -> str:
        """One "CODE, Title" line per course, in the order given."""
        return "\n".join(f"{c.code}, {c.title}" for c in courses)
