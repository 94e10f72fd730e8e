"""
Tests for course line parsing.

Covers the field rules (trim, uppercase codes, verbatim titles, dropped
empty prerequisites) and the three malformed-line diagnostics.
"""

import pytest

from advising import IssueKind, RecordParser


@pytest.fixture
def parser():
    return RecordParser()


def test_blank_lines_are_skipped(parser):
    assert parser.parse("", 1) is None
    assert parser.parse("   \t  \n", 2) is None


def test_fields_are_trimmed_and_codes_uppercased(parser):
    parsed = parser.parse("  csci200 ,  Data Structures , csci101 , math201 \n", 3)

    assert parsed.accepted
    assert parsed.course.code == "CSCI200"
    assert parsed.course.title == "Data Structures"
    assert parsed.course.prerequisites == ["CSCI101", "MATH201"]


def test_title_case_is_preserved(parser):
    parsed = parser.parse("cs100,intro TO Computing", 1)
    assert parsed.course.title == "intro TO Computing"


def test_trailing_and_empty_prerequisite_fields_are_dropped(parser):
    parsed = parser.parse("CSCI300,Algorithms,CSCI200,,MATH201,", 1)
    assert parsed.course.prerequisites == ["CSCI200", "MATH201"]


def test_duplicate_prerequisites_are_kept_in_order(parser):
    parsed = parser.parse("CSCI300,Algorithms,MATH201,CSCI200,MATH201", 1)
    assert parsed.course.prerequisites == ["MATH201", "CSCI200", "MATH201"]


def test_course_without_prerequisites(parser):
    parsed = parser.parse("CSCI100,Introduction to Computer Science", 1)
    assert parsed.course.prerequisites == []


@pytest.mark.parametrize("line, message", [
    ("OnlyOneField", "Line 7: needs at least Course Number and Title."),
    (",NoCode", "Line 7: missing course number."),
    ("CODE,", "Line 7: missing course title."),
    ("  ,   ,CSCI100", "Line 7: missing course number."),
])
def test_malformed_lines_report_one_tagged_issue(parser, line, message):
    parsed = parser.parse(line, 7)

    assert not parsed.accepted
    assert parsed.course is None
    assert parsed.issue.kind == IssueKind.MALFORMED_LINE
    assert parsed.issue.line_number == 7
    assert parsed.issue.message == message


def test_rejected_line_still_exposes_code_and_prerequisites(parser):
    parsed = parser.parse("cs300,,cs999", 2)

    assert not parsed.accepted
    assert parsed.code == "CS300"
    assert parsed.prerequisites == ["CS999"]


def test_course_prerequisites_are_not_shared_with_parsed_line(parser):
    parsed = parser.parse("A1,Alpha,B1", 1)
    parsed.prerequisites.append("C1")
    assert parsed.course.prerequisites == ["B1"]
