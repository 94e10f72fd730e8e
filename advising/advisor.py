"""
Advising Session - Main Orchestrator.

This module contains the AdvisingSession class that owns the catalog and
the "is a load currently valid" state for one user session.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m advising
"""

import logging

from .data import CourseCatalog, CatalogLoader
from .engines import CourseQueryEngine
from .models import CourseDescription, LoadResult

logger = logging.getLogger(__name__)


class AdvisingError(Exception):
    """Base class for advising session errors."""


class DataNotLoadedError(AdvisingError):
    """Raised when a query runs before a successful, non-empty load."""

    def __init__(self, message: str = "No course data loaded"):
        super().__init__(message)


class AdvisingSession:
    """
    Main interface for the advising tool.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: SESSION STATE
    ═══════════════════════════════════════════════════════════════════════════

    One session owns exactly one catalog. It:

    1. Loads a source through CatalogLoader (always clearing first)
    2. Remembers whether that load succeeded, what it loaded and its issues
    3. Refuses list/describe until a successful load left courses behind

    The session never prints. The terminal display (or any other front end)
    decides how results are shown.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        session = AdvisingSession()
        result = session.load("courses.txt")
        for course in session.list_courses():
            ...
        description = session.describe("csci200")
    """

    def __init__(self):
        self.catalog = CourseCatalog()
        self.loader = CatalogLoader(self.catalog)
        self.query_engine = CourseQueryEngine(self.catalog)

        self.data_loaded = False
        self.loaded_source = None
        self.loaded_count = 0
        self.last_result = None

    def load(self, source) -> LoadResult:
        """Replace the catalog with the contents of `source`."""
        result = self.loader.load(source)

        self.data_loaded = result.success
        self.loaded_source = result.source
        self.loaded_count = result.loaded_count
        self.last_result = result

        if not result.success:
            logger.info("Session has no usable data after failed load of %s", result.source)
        return result

    @property
    def ready(self) -> bool:
        """True when the last load succeeded and left at least one course."""
        return self.data_loaded and not self.catalog.is_empty()

    def _require_data(self):
        if not self.ready:
            raise DataNotLoadedError()

    def list_courses(self) -> list:
        """All loaded courses in ascending code order."""
        self._require_data()
        return self.query_engine.list_courses()

    def describe(self, code: str) -> CourseDescription:
        """Describe one course; a missing code is a normal not-found result."""
        self._require_data()
        return self.query_engine.describe(code)
