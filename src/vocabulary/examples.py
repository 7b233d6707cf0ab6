"""
Example instance generation for vocabulary types.

Only the type's own (non-inherited) properties from a small set of common
names are filled in, each with a placeholder chosen by its first expected type.
"""

from typing import Any, Dict, Optional

from .domain import PropertyDescriptor
from .errors import NotFoundError
from .properties import PropertyResolver
from .store import GraphStore

COMMON_PROPERTIES = ("name", "description", "url", "identifier", "image")

EXAMPLE_URL = "https://example.com"
EXAMPLE_IMAGE_URL = "https://example.com/image.jpg"
EXAMPLE_DATE = "2024-01-01"
EXAMPLE_DATETIME = "2024-01-01T12:00:00Z"
EXAMPLE_NUMBER = 42


def example_value(prop: PropertyDescriptor) -> Any:
    """Placeholder value for a property based on its first expected type."""
    text = f"Example {prop.name or 'value'}"
    if not prop.expected_types:
        return text

    expected = prop.expected_types[0]
    if expected == "URL":
        return EXAMPLE_URL
    if expected == "Date":
        return EXAMPLE_DATE
    if expected == "DateTime":
        return EXAMPLE_DATETIME
    if expected in ("Number", "Integer", "Float"):
        return EXAMPLE_NUMBER
    if expected == "Boolean":
        return True
    if expected == "ImageObject":
        return {
            "@type": "ImageObject",
            "url": EXAMPLE_IMAGE_URL,
            "contentUrl": EXAMPLE_IMAGE_URL,
        }
    # Text and anything unrecognized
    return text


class ExampleSynthesizer:
    """Builds a JSON-LD style example instance of a type."""

    def __init__(self, store: GraphStore, properties: Optional[PropertyResolver] = None):
        self.store = store
        self.properties = properties if properties is not None else PropertyResolver(store)

    def synthesize(self, type_id: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Generate an attribute map for one instance of the type.

        Args:
            type_id: Type name, prefixed id or IRI
            overrides: Values merged over the generated map, winning on collisions

        Raises:
            NotFoundError: If the type does not exist
        """
        entity = self.store.lookup(type_id)
        if entity is None:
            raise NotFoundError(type_id)

        example: Dict[str, Any] = {
            "@context": str(self.store.namespace).rstrip("/"),
            "@type": self.store.label_of(entity.id),
        }

        for prop in self.properties.properties(entity.id, include_inherited=False):
            if prop.name in COMMON_PROPERTIES:
                example[prop.name] = example_value(prop)

        if overrides:
            example.update(overrides)

        return example
