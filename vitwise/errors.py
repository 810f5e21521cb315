"""
Exceptions for structural failures.

Ordinary missing data (an unknown slot token, a course without a name)
is never raised: it becomes a SlotWarning. Only the cases below abort a
whole batch.
"""

from __future__ import annotations


class VitwiseError(Exception):
    """Base class for all errors raised by vitwise."""


class ReferenceDataError(VitwiseError):
    """The slot table or course name table could not be loaded."""


class CourseRecordError(VitwiseError):
    """A raw extracted row is not a mapping at all."""


class RecognitionError(VitwiseError):
    """The external recognition service failed or returned garbage."""


class ConfigError(VitwiseError):
    """Required configuration (e.g. an API key) is missing."""
