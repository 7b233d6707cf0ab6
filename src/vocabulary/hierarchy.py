"""
Class hierarchy traversal over a GraphStore.

Both directions are one level deep: ``ancestors`` returns the direct
superclasses and ``descendants`` the direct subclasses. ``lineage`` walks
the direct parents repeatedly for callers that need the full chain.
"""

from typing import List

from .domain import Entity, TypeRef
from .errors import NotFoundError
from .store import GraphStore


class HierarchyResolver:
    """Resolves parents and children of classes in the store."""

    def __init__(self, store: GraphStore):
        self.store = store

    def ancestors(self, type_id: str) -> List[TypeRef]:
        """Direct superclasses of a class in document order.

        Dangling parent references resolve to their namespace-stripped id.

        Raises:
            NotFoundError: If the id does not name a class
        """
        entity = self._require_class(type_id)
        return self.parents_of(entity)

    def descendants(self, type_id: str) -> List[TypeRef]:
        """Direct subclasses of a class in index order.

        Raises:
            NotFoundError: If the id does not name a class
        """
        entity = self._require_class(type_id)
        return [
            self.store.ref(candidate.id)
            for candidate in self.store.classes()
            if entity.id in candidate.super_ids
        ]

    def lineage(self, type_id: str) -> List[TypeRef]:
        """All ancestors, nearest first, each listed once even in cyclic input."""
        entity = self._require_class(type_id)
        visited = {entity.id}
        chain = []
        frontier = [entity]
        while frontier:
            next_frontier = []
            for current in frontier:
                for parent in self.parents_of(current):
                    if parent.id in visited:
                        continue
                    visited.add(parent.id)
                    chain.append(parent)
                    parent_entity = self.store.get(parent.id)
                    if parent_entity is not None:
                        next_frontier.append(parent_entity)
            frontier = next_frontier
        return chain

    def parents_of(self, entity: Entity) -> List[TypeRef]:
        return [self.store.ref(super_id) for super_id in entity.super_ids]

    def _require_class(self, type_id: str) -> Entity:
        entity = self.store.lookup_class(type_id)
        if entity is None:
            raise NotFoundError(type_id)
        return entity
