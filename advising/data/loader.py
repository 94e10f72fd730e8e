"""
Catalog loading and validation.

This module fills a CourseCatalog from a line-oriented source in two passes:
parse-and-insert, then a prerequisite reference check against the fully
populated catalog.
"""

import logging
from pathlib import Path

from ..config import MSG_SOURCE_ACCESS, MSG_MISSING_PREREQUISITE
from ..models import IssueKind, LoadIssue, LoadResult
from .catalog import CourseCatalog
from .parser import RecordParser

logger = logging.getLogger(__name__)


def describe_source(source) -> str:
    """Human-readable name for a path or an open stream."""
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


class CatalogLoader:
    """
    Loads course records into a catalog and reports every problem found.

    WHY TWO PASSES: A prerequisite may name a course that only appears later
    in the file, so references can only be checked once every line has been
    inserted. Pass one keeps the (code, prerequisites) pair of every line
    that named a course; pass two checks those pairs instead of reading the
    source a second time.

    BEST EFFORT: Malformed lines and dangling references are collected and
    returned together, they never abort the load. Only a source that cannot
    be opened or read fails the load, and then the catalog is left empty.

    STATE: Every load starts by clearing the catalog, so loading twice with
    different sources never mixes their records.

    Usage:
        catalog = CourseCatalog()
        result = CatalogLoader(catalog).load("courses.txt")
        if result.success and not catalog.is_empty():
            ...
    """

    def __init__(self, catalog: CourseCatalog, parser: RecordParser = None):
        self.catalog = catalog
        self.parser = parser or RecordParser()

    def load(self, source) -> LoadResult:
        """
        Rebuild the catalog from `source`.

        Args:
            source: A filesystem path (str or Path) or an already-open text
                stream; any iterable of lines works.

        Returns:
            LoadResult with the success flag, accepted record count and the
            ordered issue list.
        """
        name = describe_source(source)
        self.catalog.clear()
        result = LoadResult(success=True, source=name)

        try:
            parsed_lines = self._parse_and_insert(source, result)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot read course source %s: %s", name, exc)
            self.catalog.clear()
            return LoadResult(
                success=False,
                source=name,
                issues=[LoadIssue(
                    kind=IssueKind.SOURCE_ACCESS,
                    message=MSG_SOURCE_ACCESS.format(source=name),
                )],
            )

        self._check_references(parsed_lines, result)

        if logger.isEnabledFor(logging.INFO):
            logger.info(
                "Loaded %d courses from %s (%d issues, tree height %d)",
                result.loaded_count, name, len(result.issues), self.catalog.height(),
            )
        for issue in result.issues:
            logger.debug("%s", issue.message)
        return result

    def _parse_and_insert(self, source, result: LoadResult) -> list:
        """Pass one: parse every line, insert accepted records, collect line errors."""
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8") as f:
                return self._consume(f, result)
        return self._consume(source, result)

    def _consume(self, lines, result: LoadResult) -> list:
        parsed_lines = []
        for line_number, raw_line in enumerate(lines, 1):
            parsed = self.parser.parse(raw_line, line_number)
            if parsed is None:
                continue
            parsed_lines.append(parsed)

            if parsed.accepted:
                self.catalog.insert(parsed.course)
                result.loaded_count += 1
            else:
                result.issues.append(parsed.issue)
        return parsed_lines

    def _check_references(self, parsed_lines: list, result: LoadResult):
        """
        Pass two: report prerequisites that are not in the catalog.

        Runs over every line that named a course, accepted or not. One issue
        per (course, missing prerequisite) occurrence; the catalog is never
        modified here.
        """
        for parsed in parsed_lines:
            if not parsed.code:
                continue
            for prerequisite in parsed.prerequisites:
                if prerequisite not in self.catalog:
                    result.issues.append(LoadIssue(
                        kind=IssueKind.MISSING_PREREQUISITE,
                        message=MSG_MISSING_PREREQUISITE.format(
                            code=parsed.code, prerequisite=prerequisite
                        ),
                        line_number=parsed.line_number,
                        course_code=parsed.code,
                        prerequisite=prerequisite,
                    ))
