"""
Unit test for example instance generation.

HOW TO RUN:
From the src directory, run:
    python -m vocabulary.test_examples

Or from the project root:
    cd src; python -m vocabulary.test_examples
"""

from .builder import IndexBuilder
from .domain import PropertyDescriptor
from .errors import NotFoundError
from .examples import ExampleSynthesizer, example_value
from .samples import sample_document


def _synthesizer(document=None):
    store = IndexBuilder().build(document if document is not None else sample_document())
    return ExampleSynthesizer(store)


def _prop(name, *expected_types):
    return PropertyDescriptor(name=name, id=f"schema:{name}", expected_types=list(expected_types))


def test_person_with_name():
    """Test the minimal Person example."""
    print("Testing Person example...")

    synthesizer = _synthesizer({"@graph": [
        {"@id": "schema:Person", "@type": "rdfs:Class", "rdfs:label": "Person"},
        {"@id": "schema:name", "@type": "rdf:Property", "rdfs:label": "name",
         "schema:domainIncludes": {"@id": "schema:Person"},
         "schema:rangeIncludes": {"@id": "schema:Text"}},
    ]})

    assert synthesizer.synthesize("Person") == {
        "@context": "https://schema.org",
        "@type": "Person",
        "name": "Example name",
    }

    print("✓ Person example working correctly")


def test_common_properties_only():
    """Test that only the common property names are filled in."""
    print("Testing common properties...")

    example = _synthesizer().synthesize("Thing")

    assert example == {
        "@context": "https://schema.org",
        "@type": "Thing",
        "name": "Example name",
        "description": "Example description",
        "url": "https://example.com",
        "image": {
            "@type": "ImageObject",
            "url": "https://example.com/image.jpg",
            "contentUrl": "https://example.com/image.jpg",
        },
        "identifier": "Example identifier",
    }

    print("✓ Common properties working correctly")


def test_inherited_properties_excluded():
    """Test that properties from superclasses are not used."""
    print("Testing inherited exclusion...")

    example = _synthesizer().synthesize("Person")

    assert example == {"@context": "https://schema.org", "@type": "Person"}

    print("✓ Inherited exclusion working correctly")


def test_overrides_win():
    """Test that caller values are merged last."""
    print("Testing overrides...")

    synthesizer = _synthesizer()

    example = synthesizer.synthesize("Recipe", {"name": "Test Recipe", "cookTime": "PT30M"})
    assert example["@context"] == "https://schema.org"
    assert example["@type"] == "Recipe"
    assert example["name"] == "Test Recipe"
    assert example["cookTime"] == "PT30M"

    example = synthesizer.synthesize("Thing", {"@type": "Custom", "url": "https://other.example"})
    assert example["@type"] == "Custom"
    assert example["url"] == "https://other.example"
    assert example["name"] == "Example name"

    print("✓ Overrides working correctly")


def test_unknown_type_raises():
    """Test NotFoundError for unknown types."""
    print("Testing unknown type...")

    try:
        _synthesizer().synthesize("NonExistentType")
        assert False, "Should raise NotFoundError"
    except NotFoundError as e:
        assert "NonExistentType" in str(e)

    print("✓ Unknown type working correctly")


def test_example_values():
    """Test placeholder values per expected type."""
    print("Testing example values...")

    assert example_value(_prop("name", "Text")) == "Example name"
    assert example_value(_prop("url", "URL", "Text")) == "https://example.com"
    assert example_value(_prop("birthDate", "Date")) == "2024-01-01"
    assert example_value(_prop("startDate", "DateTime", "Date")) == "2024-01-01T12:00:00Z"
    assert example_value(_prop("numberOfEmployees", "Integer")) == 42
    assert example_value(_prop("price", "Number")) == 42
    assert example_value(_prop("isFamilyFriendly", "Boolean")) is True
    assert example_value(_prop("image", "ImageObject"))["@type"] == "ImageObject"
    assert example_value(_prop("author", "Person")) == "Example author"
    assert example_value(_prop("identifier")) == "Example identifier"

    print("✓ Example values working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running ExampleSynthesizer Tests")
    print("=" * 50)

    test_functions = [
        test_person_with_name,
        test_common_properties_only,
        test_inherited_properties_excluded,
        test_overrides_win,
        test_unknown_type_raises,
        test_example_values,
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


def main():
    """Main function to run the tests."""
    success = run_all_tests()
    if success:
        print("All tests passed!")
        return 0
    else:
        print("Some tests failed!")
        return 1


if __name__ == "__main__":
    exit(main())
