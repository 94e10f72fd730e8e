"""
Data loading and parsing module.

This package handles reading the course source, parsing its lines and the
ordered catalog the records are stored in.
"""

from .catalog import CourseCatalog
from .loader import CatalogLoader
from .parser import ParsedLine, RecordParser

__all__ = ["CourseCatalog", "CatalogLoader", "ParsedLine", "RecordParser"]
