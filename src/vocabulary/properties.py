"""
Property resolution for classes.

Direct properties come from the domain->property adjacency built at ingestion.
Inherited properties are taken from the direct superclasses only (one level).
"""

from typing import List, Optional, Set

from .domain import Entity, NO_DESCRIPTION, PropertyDescriptor
from .hierarchy import HierarchyResolver
from .store import GraphStore


class PropertyResolver:
    """Computes the properties applicable to a class."""

    def __init__(self, store: GraphStore, hierarchy: Optional[HierarchyResolver] = None):
        self.store = store
        self.hierarchy = hierarchy if hierarchy is not None else HierarchyResolver(store)

    def properties(self, type_id: str, include_inherited: bool = True) -> List[PropertyDescriptor]:
        """Properties of a class sorted by name.

        An unknown type yields an empty list rather than an error.

        Args:
            type_id: Class name, prefixed id or IRI
            include_inherited: Also include properties of the direct superclasses

        Returns:
            List of PropertyDescriptor, inherited ones tagged with ``inherited_from``
        """
        entity = self.store.lookup(type_id)
        class_id = entity.id if entity is not None else self.store.qualify(type_id)

        seen: Set[str] = set()
        descriptors = self._collect(class_id, seen)

        if include_inherited and entity is not None and entity.is_class:
            for parent in self.hierarchy.ancestors(entity.id):
                descriptors.extend(self._collect(parent.id, seen, inherited_from=parent.name))

        return sorted(descriptors, key=lambda d: d.name)

    def describe(self, prop: Entity, inherited_from: Optional[str] = None) -> PropertyDescriptor:
        return PropertyDescriptor(
            name=prop.label or self.store.local_name(prop.id),
            description=prop.comment or NO_DESCRIPTION,
            id=prop.id,
            expected_types=[self.store.label_of(range_id) for range_id in prop.range_ids],
            inherited_from=inherited_from,
        )

    def _collect(self, domain_id: str, seen: Set[str], inherited_from: Optional[str] = None) -> List[PropertyDescriptor]:
        collected = []
        for prop_id in self.store.property_ids_for_domain(domain_id):
            # malformed input may list the same domain twice
            if prop_id in seen:
                continue
            seen.add(prop_id)
            collected.append(self.describe(self.store.entities[prop_id], inherited_from))
        return collected
