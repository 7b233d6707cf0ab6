"""
Domain models for the vocabulary module.

Entity is the normalized node stored in the GraphStore. The pydantic models
below are the records handed back to callers; use ``model_dump()`` to get
plain dictionaries for serialization.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field


# Normalized kind tags
KIND_CLASS = "class"
KIND_PROPERTY = "property"
KIND_DATATYPE = "datatype"

NO_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class Entity:
    """A class or property node of the vocabulary graph."""

    id: str
    kinds: FrozenSet[str]
    raw_types: Tuple[str, ...] = ()
    label: Optional[str] = None
    comment: Optional[str] = None
    super_ids: Tuple[str, ...] = ()       # rdfs:subClassOf, document order
    domain_ids: Tuple[str, ...] = ()      # classes a property applies to
    range_ids: Tuple[str, ...] = ()       # expected value types of a property
    position: int = field(default=0, compare=False)

    @property
    def is_class(self) -> bool:
        return KIND_CLASS in self.kinds

    @property
    def is_property(self) -> bool:
        return KIND_PROPERTY in self.kinds


class TypeRef(BaseModel):
    """Reference to another type, e.g. a parent or child in the hierarchy."""

    id: str = Field(..., description="Entity identifier, e.g. 'schema:Person'")
    name: str = Field(..., description="Resolved label or namespace-stripped identifier")


class PropertyDescriptor(BaseModel):
    """A property applicable to a class."""

    name: str = Field(..., description="Property label")
    description: str = Field(NO_DESCRIPTION, description="Property comment")
    id: str = Field(..., description="Property identifier")
    expected_types: List[str] = Field(default_factory=list, description="Labels of the range types")
    inherited_from: Optional[str] = Field(None, description="Label of the superclass the property came from")


class SearchHit(BaseModel):
    """A single search result."""

    name: str = Field(..., description="Class label")
    description: str = Field(NO_DESCRIPTION, description="Class comment")
    id: str = Field(..., description="Class identifier")
    url: str = Field(..., description="Documentation URL of the class")
    relevance: int = Field(..., description="2 for a label match, 1 for a description-only match")


class TypeDetails(BaseModel):
    """Detailed information about a single vocabulary entry."""

    name: str
    description: str = NO_DESCRIPTION
    id: str
    types: List[str] = Field(default_factory=list, description="Raw @type values")
    super_types: List[TypeRef] = Field(default_factory=list)
    url: str


class TypeHierarchy(BaseModel):
    """Direct parents and children of a class."""

    name: str
    id: str
    parents: List[TypeRef] = Field(default_factory=list)
    children: List[TypeRef] = Field(default_factory=list)


class VocabularyStats(BaseModel):
    """Basic statistics about a loaded vocabulary."""

    total_entities: int
    total_classes: int
    total_properties: int
    total_labels: int
    properties_with_domain: int
