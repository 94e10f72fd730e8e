"""
Tests for the ordered course catalog.

Validates insert/overwrite, exact lookup, clear, and in-order traversal,
including a degenerate tree built from sorted input.
"""

from advising import Course, CourseCatalog


def _codes(catalog):
    return [course.code for course in catalog.traverse_in_order()]


def test_new_catalog_is_empty(catalog):
    assert catalog.is_empty()
    assert len(catalog) == 0
    assert not catalog
    assert list(catalog.traverse_in_order()) == []
    assert catalog.height() == 0


def test_traversal_is_sorted_regardless_of_insert_order(catalog):
    for code in ["CS300", "CS100", "CS200", "MATH201", "CS250"]:
        catalog.insert(Course(code, f"Title {code}"))

    assert _codes(catalog) == ["CS100", "CS200", "CS250", "CS300", "MATH201"]
    assert len(catalog) == 5


def test_ordering_is_plain_code_point_comparison(catalog):
    for code in ["CSCI10", "CSCI9", "CSCI100", "ACCT1"]:
        catalog.insert(Course(code, code))

    assert _codes(catalog) == ["ACCT1", "CSCI10", "CSCI100", "CSCI9"]


def test_lookup_is_exact_and_case_sensitive(catalog):
    catalog.insert(Course("CSCI200", "Data Structures", ["CSCI101"]))

    found = catalog.lookup("CSCI200")
    assert found.title == "Data Structures"
    assert found.prerequisites == ["CSCI101"]
    assert catalog.lookup("csci200") is None
    assert catalog.lookup("CSCI20") is None
    assert "CSCI200" in catalog
    assert "CSCI999" not in catalog


def test_duplicate_key_replaces_title_and_prerequisites(catalog):
    catalog.insert(Course("C1", "Old", ["P0", "P2"]))
    catalog.insert(Course("C1", "New", ["P1"]))

    course = catalog.lookup("C1")
    assert course.title == "New"
    assert course.prerequisites == ["P1"]
    assert len(catalog) == 1


def test_insert_stores_a_copy(catalog):
    original = Course("C1", "Alpha", ["P1"])
    catalog.insert(original)
    original.title = "Changed"
    original.prerequisites.append("P2")

    stored = catalog.lookup("C1")
    assert stored.title == "Alpha"
    assert stored.prerequisites == ["P1"]


def test_clear_is_idempotent(catalog):
    catalog.insert(Course("C1", "Alpha"))
    catalog.clear()
    assert catalog.is_empty()
    catalog.clear()
    assert catalog.is_empty()
    assert catalog.lookup("C1") is None


def test_each_traversal_starts_fresh(catalog):
    for code in ["B", "A", "C"]:
        catalog.insert(Course(code, code))

    first = catalog.traverse_in_order()
    assert next(first).code == "A"
    second = catalog.traverse_in_order()
    assert [c.code for c in second] == ["A", "B", "C"]
    assert [c.code for c in first] == ["B", "C"]
    assert [c.code for c in catalog] == ["A", "B", "C"]


def test_sorted_input_builds_deep_tree_without_recursion_limit(catalog):
    codes = [f"C{i:06d}" for i in range(2000)]
    for code in codes:
        catalog.insert(Course(code, code))

    assert catalog.height() == 2000
    assert _codes(catalog) == codes
    assert catalog.lookup("C001999").title == "C001999"


def test_returned_records_do_not_alias_the_catalog(catalog):
    catalog.insert(Course("CSCI100", "Intro", ["MATH101"]))

    found = catalog.lookup("CSCI100")
    found.code = "ZZZ999"
    found.prerequisites.append("X1")
    for course in catalog.traverse_in_order():
        course.title = "Changed"

    stored = catalog.lookup("CSCI100")
    assert stored.title == "Intro"
    assert stored.prerequisites == ["MATH101"]
    assert "ZZZ999" not in catalog
