"""
Index builder turning a raw JSON-LD vocabulary document into a GraphStore.

The document is expected to carry its entities under the top-level "@graph"
list, as the schema.org releases do. Every item is normalized into an Entity
during a single pass, and the by-id, by-label, by-kind and domain->property
indexes are filled at the same time.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rdflib import OWL, RDF, RDFS

from .config import DEFAULT_BASE_URL, DEFAULT_PREFIX
from .domain import Entity, KIND_CLASS, KIND_DATATYPE, KIND_PROPERTY
from .errors import IngestError
from .store import GraphStore

logger = logging.getLogger(__name__)

GRAPH_KEY = "@graph"

# Raw keys holding references; values of all listed keys are merged in order
SUPER_KEYS = ("rdfs:subClassOf",)
DOMAIN_KEYS = ("schema:domainIncludes", "rdfs:domain")
RANGE_KEYS = ("schema:rangeIncludes", "rdfs:range")


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _literal(value: Any) -> Optional[str]:
    """Extract a plain string from a JSON-LD literal (string, value object or list)."""
    candidates = []
    for item in _as_list(value):
        if isinstance(item, str):
            candidates.append((None, item))
        elif isinstance(item, dict) and isinstance(item.get("@value"), str):
            candidates.append((item.get("@language"), item["@value"]))
    if not candidates:
        return None
    for language, text in candidates:
        if language in (None, "en"):
            return text
    return candidates[0][1]


class IndexBuilder:
    """Builds a GraphStore from a parsed JSON-LD vocabulary document."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, base_url: str = DEFAULT_BASE_URL):
        self.prefix = prefix
        self.base_url = base_url
        self.kind_tags = {
            "rdfs:Class": KIND_CLASS,
            str(RDFS.Class): KIND_CLASS,
            "owl:Class": KIND_CLASS,
            str(OWL.Class): KIND_CLASS,
            "rdf:Property": KIND_PROPERTY,
            str(RDF.Property): KIND_PROPERTY,
            f"{prefix}DataType": KIND_DATATYPE,
            f"{base_url}DataType": KIND_DATATYPE,
        }

    def build(self, raw_document: Any) -> GraphStore:
        """Ingest the document and return a frozen store.

        Raises:
            IngestError: If the document has no "@graph" list or no usable entities
        """
        if not isinstance(raw_document, dict):
            raise IngestError("Invalid vocabulary document: expected a JSON object")
        items = raw_document.get(GRAPH_KEY)
        if not isinstance(items, list):
            raise IngestError(f"Invalid vocabulary document: missing {GRAPH_KEY} array")

        entities: Dict[str, Entity] = {}
        label_index: Dict[str, str] = {}
        class_ids: List[str] = []
        property_ids: List[str] = []
        domain_index: Dict[str, List[str]] = {}

        skipped = 0
        for position, item in enumerate(items):
            entity = self._normalize(item, position)
            if entity is None:
                skipped += 1
                continue

            previous = entities.get(entity.id)
            if previous is not None:
                logger.warning(f"Duplicate entity {entity.id} at position {position}, last definition wins")
                self._unindex(previous, label_index, class_ids, property_ids, domain_index)

            entities[entity.id] = entity
            if entity.label:
                label_index[self.prefix + entity.label] = entity.id
            if entity.is_class:
                class_ids.append(entity.id)
            if entity.is_property:
                property_ids.append(entity.id)
                for domain_id in entity.domain_ids:
                    domain_index.setdefault(domain_id, []).append(entity.id)

        if not entities:
            raise IngestError("No vocabulary entities were loaded")

        if skipped:
            logger.debug(f"Skipped {skipped} items without a usable @id")
        logger.info(
            f"Vocabulary loaded: {len(entities)} entities "
            f"({len(class_ids)} classes, {len(property_ids)} properties)"
        )

        return GraphStore.create(
            prefix=self.prefix,
            namespace=self.base_url,
            entities=entities,
            label_index=label_index,
            class_ids=class_ids,
            property_ids=property_ids,
            domain_index=domain_index,
        )

    def _normalize(self, item: Any, position: int) -> Optional[Entity]:
        """Convert one raw @graph item into an Entity, or None if it has no usable @id."""
        if not isinstance(item, dict):
            return None
        raw_id = item.get("@id")
        if not isinstance(raw_id, str) or not raw_id.strip():
            return None

        raw_types = tuple(t for t in _as_list(item.get("@type")) if isinstance(t, str))
        kinds = frozenset(self.kind_tags[t] for t in raw_types if t in self.kind_tags)

        return Entity(
            id=self._compact(raw_id.strip()),
            kinds=kinds,
            raw_types=raw_types,
            label=_literal(item.get("rdfs:label")),
            comment=_literal(item.get("rdfs:comment")),
            super_ids=self._references(item, SUPER_KEYS),
            domain_ids=self._references(item, DOMAIN_KEYS),
            range_ids=self._references(item, RANGE_KEYS),
            position=position,
        )

    def _references(self, item: Dict[str, Any], keys: Iterable[str]) -> Tuple[str, ...]:
        """Collect referenced ids as an ordered set."""
        seen = []
        for key in keys:
            for ref in _as_list(item.get(key)):
                if isinstance(ref, dict):
                    ref = ref.get("@id")
                if not isinstance(ref, str) or not ref:
                    continue
                ref = self._compact(ref)
                if ref not in seen:
                    seen.append(ref)
        return tuple(seen)

    def _compact(self, identifier: str) -> str:
        if identifier.startswith(self.base_url):
            return self.prefix + identifier[len(self.base_url):]
        return identifier

    def _unindex(self, entity: Entity, label_index, class_ids, property_ids, domain_index) -> None:
        """Drop an overwritten entity from every secondary index."""
        if entity.label and label_index.get(self.prefix + entity.label) == entity.id:
            del label_index[self.prefix + entity.label]
        if entity.id in class_ids:
            class_ids.remove(entity.id)
        if entity.id in property_ids:
            property_ids.remove(entity.id)
        for domain_id in entity.domain_ids:
            bucket = domain_index.get(domain_id)
            if bucket and entity.id in bucket:
                bucket.remove(entity.id)
                if not bucket:
                    del domain_index[domain_id]
