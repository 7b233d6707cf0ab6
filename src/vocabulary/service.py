"""
High-level vocabulary service providing the public interface for all vocabulary queries.

This is the only public interface into the vocabulary module. The store,
builder and resolvers are private implementation details.

The service loads its document lazily on first use. A refresh builds a
complete new snapshot (store plus resolvers) and swaps a single reference, so
queries already running keep working against the snapshot they started with.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .builder import IndexBuilder
from .config import VocabularySettings
from .datasource import FileDataSource, StaticDataSource, VocabularyDataSource
from .domain import (
    NO_DESCRIPTION, PropertyDescriptor, SearchHit, TypeDetails, TypeHierarchy, TypeRef, VocabularyStats,
)
from .errors import InvalidQueryError, NotFoundError
from .examples import ExampleSynthesizer
from .hierarchy import HierarchyResolver
from .properties import PropertyResolver
from .search import SearchEngine
from .store import GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    """A store together with the resolvers reading it."""

    store: GraphStore
    hierarchy: HierarchyResolver
    properties: PropertyResolver
    search: SearchEngine
    examples: ExampleSynthesizer

    @classmethod
    def of(cls, store: GraphStore) -> "_Snapshot":
        hierarchy = HierarchyResolver(store)
        properties = PropertyResolver(store, hierarchy)
        return cls(
            store=store,
            hierarchy=hierarchy,
            properties=properties,
            search=SearchEngine(store),
            examples=ExampleSynthesizer(store, properties),
        )


class VocabularyService:
    """Query interface over a class/property vocabulary such as schema.org."""

    def __init__(self, datasource: Optional[VocabularyDataSource] = None,
                 settings: Optional[VocabularySettings] = None,
                 store: Optional[GraphStore] = None):
        """Initialize the vocabulary service.

        Args:
            datasource: Source of the raw document. Defaults to the configured file.
            settings: Optional settings. If None, they are read from the environment.
            store: Optional prebuilt store; skips loading entirely.
        """
        self.settings = settings if settings is not None else VocabularySettings.from_env()
        self.datasource = datasource if datasource is not None else FileDataSource(self.settings.document_path)
        self._lock = threading.Lock()
        self._snapshot: Optional[_Snapshot] = _Snapshot.of(store) if store is not None else None

    @classmethod
    def from_document(cls, document: Dict[str, Any],
                      settings: Optional[VocabularySettings] = None) -> "VocabularyService":
        """Create a service over an already parsed document."""
        return cls(datasource=StaticDataSource(document), settings=settings)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._snapshot is not None

    def initialize(self) -> None:
        """Load the vocabulary if it has not been loaded yet.

        Raises:
            IngestError: If the document cannot be read or contains no entities
        """
        if self._snapshot is not None:
            return
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._load()

    def refresh(self) -> VocabularyStats:
        """Reload the document and atomically replace the current snapshot.

        On failure the previous snapshot, if any, stays in place.
        """
        with self._lock:
            snapshot = self._load()
            self._snapshot = snapshot
        return snapshot.store.stats()

    def _load(self) -> _Snapshot:
        builder = IndexBuilder(prefix=self.settings.prefix, base_url=self.settings.base_url)
        store = builder.build(self.datasource.load())
        return _Snapshot.of(store)

    def _current(self) -> _Snapshot:
        self.initialize()
        return self._snapshot

    @property
    def store(self) -> GraphStore:
        return self._current().store

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_type(self, type_name: str) -> TypeDetails:
        """Get details of a type (or any other vocabulary entry).

        Args:
            type_name: 'Person', 'schema:Person' or 'https://schema.org/Person'

        Raises:
            InvalidQueryError: If the name is empty
            NotFoundError: If no entry has this id or label
        """
        if not isinstance(type_name, str) or not type_name.strip():
            raise InvalidQueryError("Type name must be a non-empty string")

        snapshot = self._current()
        entity = snapshot.store.lookup(type_name)
        if entity is None:
            raise NotFoundError(type_name)

        name = snapshot.store.label_of(entity.id)
        return TypeDetails(
            name=name,
            description=entity.comment or NO_DESCRIPTION,
            id=entity.id,
            types=list(entity.raw_types),
            super_types=snapshot.hierarchy.parents_of(entity),
            url=snapshot.store.url_for(name),
        )

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchHit]:
        """Search classes by keyword; see SearchEngine.search."""
        return self._current().search.search(query, limit)

    def ancestors(self, type_name: str) -> List[TypeRef]:
        return self._current().hierarchy.ancestors(type_name)

    def descendants(self, type_name: str) -> List[TypeRef]:
        return self._current().hierarchy.descendants(type_name)

    def lineage(self, type_name: str) -> List[TypeRef]:
        return self._current().hierarchy.lineage(type_name)

    def get_type_hierarchy(self, type_name: str) -> TypeHierarchy:
        """Get direct parents and children of a class.

        Raises:
            NotFoundError: If the name does not resolve to a class
        """
        snapshot = self._current()
        parents = snapshot.hierarchy.ancestors(type_name)
        children = snapshot.hierarchy.descendants(type_name)
        entity = snapshot.store.lookup_class(type_name)
        return TypeHierarchy(
            name=snapshot.store.label_of(entity.id),
            id=entity.id,
            parents=parents,
            children=children,
        )

    def get_type_properties(self, type_name: str, include_inherited: bool = True) -> List[PropertyDescriptor]:
        """Properties of a class; an unknown class yields an empty list."""
        return self._current().properties.properties(type_name, include_inherited)

    def generate_example(self, type_name: str, properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Example JSON-LD instance of a type, with caller values merged last."""
        return self._current().examples.synthesize(type_name, properties)

    def stats(self) -> VocabularyStats:
        return self._current().store.stats()
