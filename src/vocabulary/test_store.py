"""
Unit test for the graph store lookups and fallbacks.

HOW TO RUN:
From the src directory, run:
    python -m vocabulary.test_store

Or from the project root:
    cd src; python -m vocabulary.test_store
"""

from .builder import IndexBuilder
from .samples import sample_document


def _store():
    return IndexBuilder().build(sample_document())


def test_qualify():
    """Test name qualification."""
    print("Testing qualify...")

    store = _store()

    assert store.qualify("Person") == "schema:Person"
    assert store.qualify("schema:Person") == "schema:Person"
    assert store.qualify("https://schema.org/Person") == "schema:Person"
    assert store.qualify("  Person ") == "schema:Person"

    print("✓ qualify working correctly")


def test_local_name():
    """Test namespace stripping."""
    print("Testing local_name...")

    store = _store()

    assert store.local_name("schema:MediaObject") == "MediaObject"
    assert store.local_name("https://schema.org/MediaObject") == "MediaObject"
    assert store.local_name("ex:Other") == "ex:Other"

    print("✓ local_name working correctly")


def test_lookup():
    """Test lookup by id, label and full IRI."""
    print("Testing lookup...")

    store = _store()

    assert store.lookup("Person").id == "schema:Person"
    assert store.lookup("schema:Person").id == "schema:Person"
    assert store.lookup("https://schema.org/Person").id == "schema:Person"
    assert store.lookup("Unknown") is None
    assert store.lookup_class("name") is None
    assert store.lookup_class("Person") is not None

    print("✓ lookup working correctly")


def test_label_fallback_for_dangling_reference():
    """Test that absent entities resolve to their stripped identifier."""
    print("Testing label fallback...")

    store = _store()

    assert store.label_of("schema:Article") == "Article"
    assert store.label_of("schema:MediaObject") == "MediaObject"
    ref = store.ref("schema:Duration")
    assert ref.id == "schema:Duration"
    assert ref.name == "Duration"

    print("✓ label fallback working correctly")


def test_url_for():
    """Test documentation URL construction."""
    print("Testing url_for...")

    store = _store()
    assert store.url_for("Person") == "https://schema.org/Person"
    assert store.url_for("Bare Class") == "https://schema.org/Bare%20Class"

    print("✓ url_for working correctly")


def test_custom_namespace():
    """Test a vocabulary with a different prefix and namespace."""
    print("Testing custom namespace...")

    document = {"@graph": [
        {"@id": "http://example.org/vocab#Animal", "@type": "owl:Class", "rdfs:label": "Animal"},
        {"@id": "ex:Dog", "@type": "owl:Class", "rdfs:label": "Dog",
         "rdfs:subClassOf": {"@id": "ex:Animal"}},
    ]}
    store = IndexBuilder(prefix="ex:", base_url="http://example.org/vocab#").build(document)

    assert store.class_ids == ("ex:Animal", "ex:Dog")
    assert store.lookup("Dog").super_ids == ("ex:Animal",)
    assert store.url_for("Dog") == "http://example.org/vocab#Dog"

    print("✓ custom namespace working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running GraphStore Tests")
    print("=" * 50)

    test_functions = [
        test_qualify,
        test_local_name,
        test_lookup,
        test_label_fallback_for_dangling_reference,
        test_url_for,
        test_custom_namespace,
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
