"""
Immutable in-memory store for an ingested vocabulary.

The store owns every entity together with the secondary indexes built by
IndexBuilder. It is never mutated after construction; a refresh builds a new
store instead. All resolvers receive a store explicitly and share the
resolve-or-fallback helpers defined here.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple
from urllib.parse import quote

from rdflib import Namespace

from .domain import Entity, TypeRef, VocabularyStats


@dataclass(frozen=True)
class GraphStore:
    """Read-only view over the normalized vocabulary graph."""

    prefix: str                                   # e.g. "schema:"
    namespace: Namespace                          # e.g. https://schema.org/
    entities: Mapping[str, Entity]                # id -> entity
    label_index: Mapping[str, str]                # prefix-qualified label -> id
    class_ids: Tuple[str, ...]                    # class bucket, document order
    property_ids: Tuple[str, ...]                 # property bucket, document order
    domain_index: Mapping[str, Tuple[str, ...]]   # domain class id -> property ids

    @classmethod
    def create(cls, prefix, namespace, entities, label_index, class_ids, property_ids, domain_index) -> "GraphStore":
        """Freeze the builder's working collections into a store."""
        return cls(
            prefix=prefix,
            namespace=Namespace(str(namespace)),
            entities=MappingProxyType(dict(entities)),
            label_index=MappingProxyType(dict(label_index)),
            class_ids=tuple(class_ids),
            property_ids=tuple(property_ids),
            domain_index=MappingProxyType({k: tuple(v) for k, v in domain_index.items()}),
        )

    def __len__(self) -> int:
        return len(self.entities)

    # ------------------------------------------------------------------
    # Identifier handling
    # ------------------------------------------------------------------

    def qualify(self, name: str) -> str:
        """Turn 'Person', 'schema:Person' or a full IRI into 'schema:Person'."""
        name = name.strip()
        base = str(self.namespace)
        if name.startswith(base):
            return self.prefix + name[len(base):]
        if name.startswith(self.prefix):
            return name
        return self.prefix + name

    def local_name(self, entity_id: str) -> str:
        """Identifier with its namespace prefix stripped."""
        if entity_id.startswith(self.prefix):
            return entity_id[len(self.prefix):]
        base = str(self.namespace)
        if entity_id.startswith(base):
            return entity_id[len(base):]
        return entity_id

    def url_for(self, name: str) -> str:
        return str(self.namespace[quote(name)])

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, entity_id: str) -> Optional[Entity]:
        return self.entities.get(entity_id)

    def lookup(self, name: str) -> Optional[Entity]:
        """Find an entity by identifier, falling back to the qualified-label index."""
        exact = self.entities.get(name.strip())
        if exact is not None:
            return exact
        qualified = self.qualify(name)
        entity = self.entities.get(qualified)
        if entity is not None:
            return entity
        entity_id = self.label_index.get(qualified)
        if entity_id is not None:
            return self.entities.get(entity_id)
        return None

    def lookup_class(self, name: str) -> Optional[Entity]:
        entity = self.lookup(name)
        if entity is not None and entity.is_class:
            return entity
        return None

    def label_of(self, entity_id: str) -> str:
        """Resolved label of an entity, or its stripped identifier when absent."""
        entity = self.entities.get(entity_id)
        if entity is not None and entity.label:
            return entity.label
        return self.local_name(entity_id)

    def ref(self, entity_id: str) -> TypeRef:
        return TypeRef(id=entity_id, name=self.label_of(entity_id))

    def classes(self) -> Iterator[Entity]:
        """Iterate the class bucket in index order."""
        for class_id in self.class_ids:
            yield self.entities[class_id]

    def property_ids_for_domain(self, domain_id: str) -> Tuple[str, ...]:
        return self.domain_index.get(domain_id, ())

    def stats(self) -> VocabularyStats:
        return VocabularyStats(
            total_entities=len(self.entities),
            total_classes=len(self.class_ids),
            total_properties=len(self.property_ids),
            total_labels=len(self.label_index),
            properties_with_domain=sum(
                1 for prop_id in self.property_ids if self.entities[prop_id].domain_ids
            ),
        )
