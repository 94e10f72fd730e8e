"""
Query engines.

This package contains the read-only logic run against a loaded catalog.
"""

from .query import CourseQueryEngine

__all__ = ["CourseQueryEngine"]
