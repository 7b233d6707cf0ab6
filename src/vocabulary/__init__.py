"""
Vocabulary Index & Query Module

This module loads a linked-data vocabulary (such as schema.org) once and answers
type lookup, keyword search, hierarchy, property and example queries over it.

Public Interface:
- VocabularyService: High-level service for all vocabulary operations
- Error types: VocabularyError, IngestError, NotFoundError, InvalidQueryError

Private Components:
- GraphStore / IndexBuilder: Immutable indexed representation of the document
- HierarchyResolver, PropertyResolver, SearchEngine, ExampleSynthesizer
"""

from .errors import InvalidQueryError, IngestError, NotFoundError, VocabularyError
from .service import VocabularyService

__all__ = [
    "VocabularyService",
    "VocabularyError",
    "IngestError",
    "NotFoundError",
    "InvalidQueryError",
]
