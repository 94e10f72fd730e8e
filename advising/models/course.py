"""
Course data models.

Contains the Course dataclass stored in the catalog and the small views
produced when a course is described.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Course:
    """
    Represents a single course from the catalog source.

    This is the core data unit that flows through the system. The loader
    builds one per accepted line and the catalog keeps it under its code.

    Attributes:
        code: Course number, uppercased (e.g., "CSCI200")
        title: Human-readable course title, trimmed but otherwise verbatim
        prerequisites: Prerequisite course numbers in source order.
            Duplicates are kept and codes may point outside the catalog.
    """
    code: str
    title: str
    prerequisites: list = field(default_factory=list)

    def copy(self) -> "Course":
        """Return an independent copy (the prerequisite list is not shared)."""
        return Course(self.code, self.title, list(self.prerequisites))


@dataclass
class PrerequisiteView:
    """A prerequisite code resolved against the catalog."""
    code: str
    title: Optional[str] = None  # None means the code is missing from the catalog

    @property
    def is_missing(self) -> bool:
        return self.title is None


@dataclass
class CourseDescription:
    """
    Result of describing one course.

    `course` is None for the explicit "not found" outcome; in that case
    `query` still holds the normalized code that was asked for.
    """
    query: str
    course: Optional[Course] = None
    prerequisites: list = field(default_factory=list)  # List of PrerequisiteView

    @property
    def found(self) -> bool:
        return self.course is not None
