"""
Error types raised by the vocabulary module.

All errors derive from VocabularyError so callers can catch the whole family
with a single except clause.
"""

from typing import Optional


class VocabularyError(Exception):
    """Base class for all vocabulary errors."""


class IngestError(VocabularyError):
    """The raw vocabulary document could not be turned into a store."""


class NotFoundError(VocabularyError, LookupError):
    """A type identifier did not resolve to a known entity."""

    def __init__(self, type_name: str, message: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message or f"Type '{type_name}' not found in vocabulary")


class InvalidQueryError(VocabularyError, ValueError):
    """A caller supplied an empty or otherwise unusable argument."""
