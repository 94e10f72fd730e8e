"""
Load result data models.

Contains the dataclasses describing the outcome of a catalog load: the
individual diagnostics and the batch returned to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class IssueKind(Enum):
    """
    Categories of diagnostics a load can produce.

    SOURCE_ACCESS: The source could not be opened or read (load fails)
    MALFORMED_LINE: A line was rejected (too few fields, empty code/title)
    MISSING_PREREQUISITE: A prerequisite names a code absent from the catalog
    """
    SOURCE_ACCESS = "source_access"
    MALFORMED_LINE = "malformed_line"
    MISSING_PREREQUISITE = "missing_prerequisite"


@dataclass
class LoadIssue:
    """
    A single human-readable diagnostic from a load.

    Example for a dangling reference:
        kind: IssueKind.MISSING_PREREQUISITE
        message: "Course 'CS300' lists missing prerequisite 'CS999'."
        line_number: 4
        course_code: "CS300"
        prerequisite: "CS999"
    """
    kind: IssueKind
    message: str
    line_number: Optional[int] = None
    course_code: Optional[str] = None
    prerequisite: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass
class LoadResult:
    """
    Outcome of one CatalogLoader.load() call.

    `success` is False only when the source could not be read at all; per-line
    problems and dangling references are reported in `issues` but never
    flip it.
    """
    success: bool
    source: str
    loaded_count: int = 0
    issues: list = field(default_factory=list)  # List of LoadIssue, in discovery order

    @property
    def messages(self) -> list:
        return [issue.message for issue in self.issues]

    @property
    def has_issues(self) -> bool:
        return len(self.issues) > 0

    @property
    def errors(self) -> list:
        """Issues that cost a record (or the whole load)."""
        return [i for i in self.issues if i.kind != IssueKind.MISSING_PREREQUISITE]

    @property
    def warnings(self) -> list:
        """Informational dangling-reference issues."""
        return [i for i in self.issues if i.kind == IssueKind.MISSING_PREREQUISITE]
