"""
Keyword search over class labels and descriptions.

Matching is a case-insensitive substring test. A label match scores 2, a
description-only match scores 1. Scanning stops once twice the requested
number of candidates has been collected, so on large vocabularies later
lower-ranked matches may be missed; results are then ordered by relevance,
keeping index order among equal scores.
"""

import logging
from typing import List, Optional

from .domain import NO_DESCRIPTION, SearchHit
from .errors import InvalidQueryError
from .store import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

LABEL_RELEVANCE = 2
DESCRIPTION_RELEVANCE = 1


def normalize_limit(limit: Optional[int]) -> int:
    """Apply the default and clamp the limit to [1, MAX_LIMIT]."""
    if limit is None:
        return DEFAULT_LIMIT
    return max(1, min(int(limit), MAX_LIMIT))


class SearchEngine:
    """Ranked substring search over the class bucket of a store."""

    def __init__(self, store: GraphStore):
        self.store = store

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchHit]:
        """Search classes by label or description.

        Raises:
            InvalidQueryError: If the query is empty or whitespace only
        """
        needle = (query or "").strip().lower()
        if not needle:
            raise InvalidQueryError("Query cannot be empty")

        limit = normalize_limit(limit)
        scan_bound = limit * 2

        candidates = []
        for entity in self.store.classes():
            label = entity.label or ""
            comment = entity.comment or ""

            if needle in label.lower():
                relevance = LABEL_RELEVANCE
            elif needle in comment.lower():
                relevance = DESCRIPTION_RELEVANCE
            else:
                continue

            candidates.append(SearchHit(
                name=label,
                description=comment or NO_DESCRIPTION,
                id=entity.id,
                url=self.store.url_for(label),
                relevance=relevance,
            ))
            if len(candidates) >= scan_bound:
                break

        # sorted() is stable, so index order survives among equal scores
        ranked = sorted(candidates, key=lambda hit: hit.relevance, reverse=True)[:limit]
        logger.debug(f"Search '{needle}': {len(candidates)} candidates, returning {len(ranked)}")
        return ranked
