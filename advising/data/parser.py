"""
Course record parsing.

This module turns one raw line of the catalog source into a structured
record or a line-level diagnostic.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import (
    DELIMITER,
    CODE_FIELD,
    TITLE_FIELD,
    FIRST_PREREQUISITE_FIELD,
    MIN_FIELDS,
    MSG_TOO_FEW_FIELDS,
    MSG_MISSING_CODE,
    MSG_MISSING_TITLE,
)
from ..models import Course, IssueKind, LoadIssue


@dataclass
class ParsedLine:
    """
    Everything the loader needs from one non-blank line.

    `code` and `prerequisites` are derived even when the line is rejected,
    so the reference check can run over every line that named a course.
    Exactly one of `course` / `issue` is set.
    """
    line_number: int
    code: str = ""
    prerequisites: list = field(default_factory=list)
    course: Optional[Course] = None
    issue: Optional[LoadIssue] = None

    @property
    def accepted(self) -> bool:
        return self.course is not None


def split_fields(line: str) -> list:
    """Split on the delimiter and trim every field. No quoting is honored."""
    return [token.strip() for token in line.split(DELIMITER)]


def normalize_code(code: str) -> str:
    """Course numbers are compared uppercased so user input is case-insensitive."""
    return code.strip().upper()


class RecordParser:
    """
    Parses catalog lines of the form CODE,Title[,PREREQ1[,PREREQ2...]].

    FIELD RULES:
    - field 0 is the course number (uppercased)
    - field 1 is the title (kept verbatim after trimming)
    - fields 2..N are prerequisite numbers; empty ones (for example from a
      trailing comma) are dropped, the rest are uppercased in order

    REJECTED LINES:
    - fewer than 2 fields
    - empty course number
    - empty title
    Each produces one LoadIssue tagged with the 1-based line number.
    """

    def parse(self, line: str, line_number: int) -> Optional[ParsedLine]:
        """
        Parse one line.

        Returns:
            None for a blank line (skipped silently), otherwise a ParsedLine
            holding either the Course or the LoadIssue explaining the rejection.
        """
        line = line.strip()
        if not line:
            return None

        tokens = split_fields(line)
        parsed = ParsedLine(line_number=line_number)

        if len(tokens) < MIN_FIELDS:
            parsed.issue = self._malformed(MSG_TOO_FEW_FIELDS, line_number)
            return parsed

        parsed.code = normalize_code(tokens[CODE_FIELD])
        parsed.prerequisites = [
            normalize_code(token)
            for token in tokens[FIRST_PREREQUISITE_FIELD:]
            if token
        ]
        title = tokens[TITLE_FIELD]

        if not parsed.code:
            parsed.issue = self._malformed(MSG_MISSING_CODE, line_number)
        elif not title:
            parsed.issue = self._malformed(MSG_MISSING_TITLE, line_number, parsed.code)
        else:
            parsed.course = Course(parsed.code, title, list(parsed.prerequisites))
        return parsed

    @staticmethod
    def _malformed(template: str, line_number: int, code: Optional[str] = None) -> LoadIssue:
        return LoadIssue(
            kind=IssueKind.MALFORMED_LINE,
            message=template.format(line=line_number),
            line_number=line_number,
            course_code=code,
        )
