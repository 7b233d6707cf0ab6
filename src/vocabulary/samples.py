"""
A small schema.org excerpt in the shape of the official JSON-LD release.

Used by the tests and by ``vocabulary_cli.py --sample`` so the module can be
exercised without the full vocabulary file. ``schema:MediaObject`` and
``schema:Duration`` are referenced but intentionally not defined.
"""

from typing import Any, Dict, List


def _ref(*names: str):
    refs = [{"@id": f"schema:{name}"} for name in names]
    return refs[0] if len(refs) == 1 else refs


def _class(name: str, comment: str, *parents: str) -> Dict[str, Any]:
    item = {
        "@id": f"schema:{name}",
        "@type": "rdfs:Class",
        "rdfs:comment": comment,
        "rdfs:label": name,
    }
    if parents:
        item["rdfs:subClassOf"] = _ref(*parents)
    return item


def _datatype(name: str, comment: str, *parents: str) -> Dict[str, Any]:
    item = _class(name, comment, *parents)
    item["@type"] = ["schema:DataType", "rdfs:Class"]
    return item


def _property(name: str, comment: str, domains: List[str], ranges: List[str]) -> Dict[str, Any]:
    return {
        "@id": f"schema:{name}",
        "@type": "rdf:Property",
        "rdfs:comment": comment,
        "rdfs:label": name,
        "schema:domainIncludes": _ref(*domains),
        "schema:rangeIncludes": _ref(*ranges),
    }


def sample_document() -> Dict[str, Any]:
    """Return a fresh copy of the sample vocabulary document."""
    graph = [
        _class("Thing", "The most generic type of item."),
        _class("CreativeWork", "The most generic kind of creative work, including books, movies, photographs, software programs, etc.", "Thing"),
        _class("Article", "An article, such as a news article or piece of investigative report.", "CreativeWork"),
        _class("NewsArticle", "A NewsArticle is an article whose content reports news, or provides background context and supporting materials for understanding the news.", "Article"),
        _class("Recipe", "A recipe. For dietary restrictions covered by the recipe, a few common restrictions are enumerated via suitableForDiet.", "CreativeWork"),
        _class("ImageObject", "An image file.", "MediaObject"),
        _class("Organization", "An organization such as a school, NGO, corporation, club, etc.", "Thing"),
        _class("Person", "A person (alive, dead, undead, or fictional).", "Thing"),
        _datatype("DataType", "The basic data types such as Integers, Strings, etc."),
        _datatype("Text", "Data type: Text."),
        _datatype("URL", "Data type: URL.", "Text"),
        _datatype("Date", "A date value in ISO 8601 date format."),
        _datatype("DateTime", "A combination of date and time of day in the form [-]CCYY-MM-DDThh:mm:ss[Z|(+|-)hh:mm]."),
        _datatype("Number", "Data type: Number."),
        _datatype("Integer", "Data type: Integer.", "Number"),
        _datatype("Boolean", "Boolean: True or False."),
        _property("name", "The name of the item.", ["Thing"], ["Text"]),
        _property("description", "A description of the item.", ["Thing"], ["Text"]),
        _property("url", "URL of the item.", ["Thing"], ["URL"]),
        _property("image", "An image of the item.", ["Thing"], ["ImageObject", "URL"]),
        _property("identifier", "The identifier property represents any kind of identifier.", ["Thing"], ["Text", "URL"]),
        _property("headline", "Headline of the article.", ["CreativeWork"], ["Text"]),
        _property("datePublished", "Date of first publication or broadcast.", ["CreativeWork"], ["Date", "DateTime"]),
        _property("articleBody", "The actual body of the article.", ["Article"], ["Text"]),
        _property("dateline", "A dateline is a brief piece of text included in news articles that describes where and when the story was written or filed.", ["NewsArticle"], ["Text"]),
        _property("cookTime", "The time it takes to actually cook the dish.", ["Recipe"], ["Duration"]),
        _property("recipeIngredient", "A single ingredient used in the recipe.", ["Recipe"], ["Text"]),
        _property("email", "Email address.", ["Person", "Organization"], ["Text"]),
        _property("birthDate", "Date of birth.", ["Person"], ["Date"]),
        _property("foundingDate", "The date that this organization was founded.", ["Organization"], ["Date"]),
        _property("numberOfEmployees", "The number of employees in an organization.", ["Organization"], ["Integer"]),
    ]
    return {
        "@context": {
            "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
            "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
            "schema": "https://schema.org/",
        },
        "@graph": graph,
    }
