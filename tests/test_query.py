"""Tests for course descriptions and listings."""

import pytest

from advising import CourseQueryEngine


@pytest.fixture
def engine(loader, catalog, write_source):
    loader.load(write_source([
        "CSCI100,Introduction to Computer Science",
        "CSCI200,Data Structures,CSCI100",
        "CSCI300,Introduction to Algorithms,CSCI200,MATH999",
    ]))
    return CourseQueryEngine(catalog)


def test_describe_is_case_insensitive(engine):
    description = engine.describe("  csci200 ")

    assert description.found
    assert description.query == "CSCI200"
    assert description.course.title == "Data Structures"


def test_describe_resolves_prerequisites_in_stored_order(engine):
    description = engine.describe("CSCI300")

    assert [(p.code, p.title) for p in description.prerequisites] == [
        ("CSCI200", "Data Structures"),
        ("MATH999", None),
    ]
    assert description.prerequisites[1].is_missing


def test_describe_unknown_code_is_explicit_not_found(engine):
    description = engine.describe("BIO101")

    assert not description.found
    assert description.query == "BIO101"
    assert CourseQueryEngine.format_description(description) == "Course not found."


def test_format_course_with_prerequisites(engine):
    text = CourseQueryEngine.format_description(engine.describe("csci300"))

    assert text == (
        "CSCI300 - Introduction to Algorithms\n"
        "Prerequisites:\n"
        "  CSCI200 - Data Structures\n"
        "  MATH999 (missing from catalog)"
    )


def test_format_course_without_prerequisites(engine):
    text = CourseQueryEngine.format_description(engine.describe("CSCI100"))
    assert text == "CSCI100 - Introduction to Computer Science\nPrerequisites: None"


def test_listing_is_sorted(engine):
    assert [c.code for c in engine.list_courses()] == ["CSCI100", "CSCI200", "CSCI300"]
    assert engine.format_listing(engine.list_courses()).splitlines()[0] == "CSCI100, Introduction to Computer Science"


def test_describe_on_empty_catalog_is_not_found(catalog):
    engine = CourseQueryEngine(catalog)
    assert not engine.describe("CSCI100").found
    assert engine.list_courses() == []
