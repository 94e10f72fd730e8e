"""
Ordered course catalog.

A binary search tree keyed by course number. In-order traversal yields the
sorted course listing without a separate sort step.
"""

from typing import Iterator, Optional

from ..models import Course


class _Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course):
        self.course = course
        self.left = None
        self.right = None


class CourseCatalog:
    """
    Stores courses keyed by their (already uppercased) course number.

    ORDERING:
    Keys compare with plain string comparison (code points), no locale rules,
    so "CSCI100" < "CSCI200" < "MATH201".

    BALANCE:
    The tree is not rebalanced. Inserting codes in sorted order degrades it
    to a linked list; lookups then cost O(n) but stay correct. Traversal and
    lookup are iterative, so a degenerate tree never grows the call stack.

    OWNERSHIP:
    insert() stores a copy, and lookup() and traversal hand back copies, so
    no caller can reach a stored record. The catalog is only mutated through
    insert() and clear().

    Usage:
        catalog = CourseCatalog()
        catalog.insert(Course("CSCI200", "Data Structures", ["CSCI101"]))
        catalog.lookup("CSCI200").title    # "Data Structures"
        [c.code for c in catalog.traverse_in_order()]
    """

    def __init__(self):
        self._root = None
        self._size = 0

    def insert(self, course: Course):
        """
        Place a course at its key.

        If the key already exists, the stored title and prerequisite list are
        replaced by the new record's (last write wins, nothing is merged).
        """
        record = course.copy()
        if self._root is None:
            self._root = _Node(record)
            self._size = 1
            return

        node = self._root
        while True:
            if record.code < node.course.code:
                if node.left is None:
                    node.left = _Node(record)
                    self._size += 1
                    return
                node = node.left
            elif record.code > node.course.code:
                if node.right is None:
                    node.right = _Node(record)
                    self._size += 1
                    return
                node = node.right
            else:
                node.course = record
                return

    def _find(self, code: str):
        node = self._root
        while node is not None:
            if code == node.course.code:
                return node
            node = node.left if code < node.course.code else node.right
        return None

    def lookup(self, code: str) -> Optional[Course]:
        """Exact-match retrieval; returns a copy, or None when the code is absent."""
        node = self._find(code)
        return node.course.copy() if node is not None else None

    def clear(self):
        """Discard every record. Calling it on an empty catalog is a no-op."""
        self._root = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._root is None

    def traverse_in_order(self) -> Iterator[Course]:
        """
        Yield courses in ascending code order.

        Each call returns an independent generator starting from the smallest
        key. The catalog must not be modified while a traversal is running.
        """
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course.copy()
            node = node.right

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        if self._root is None:
            return 0
        tallest = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, code) -> bool:
        return isinstance(code, str) and self._find(code) is not None

    def __iter__(self) -> Iterator[Course]:
        return self.traverse_in_order()
