#!/usr/bin/env python3
"""
Command-line tool for querying a vocabulary such as schema.org.

HOW TO RUN:
The virtual environment .venv should be activated before running the script.

From the src directory, run:
    python vocabulary_cli.py <command> [arguments]

Examples:
    python vocabulary_cli.py --sample type Person
    python vocabulary_cli.py --sample search article --limit 5
    python vocabulary_cli.py --document data/schemaorg-current-https.jsonld hierarchy NewsArticle
    python vocabulary_cli.py properties Organization --direct-only
    python vocabulary_cli.py example Recipe --set name="Test Recipe" --set cookTime=PT30M

Without --document the path from VOCABULARY_DOCUMENT_PATH (or .env) is used.
Results are printed as JSON.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from vocabulary import VocabularyError, VocabularyService
from vocabulary.config import VocabularySettings
from vocabulary.datasource import FileDataSource, StaticDataSource
from vocabulary.samples import sample_document


def _parse_assignments(assignments: List[str]) -> Dict[str, Any]:
    """Turn ["key=value", ...] into a dict; values are parsed as JSON when possible."""
    result = {}
    for assignment in assignments:
        if "=" not in assignment:
            raise argparse.ArgumentTypeError(f"Expected key=value, got: {assignment}")
        key, value = assignment.split("=", 1)
        try:
            result[key] = json.loads(value)
        except ValueError:
            result[key] = value
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query a linked-data vocabulary (types, search, hierarchy, properties, examples)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--document", help="Path to the JSON-LD vocabulary document")
    source.add_argument("--sample", action="store_true", help="Use the built-in sample vocabulary")

    commands = parser.add_subparsers(dest="command", required=True)

    type_parser = commands.add_parser("type", help="Show details of a type")
    type_parser.add_argument("name")

    search_parser = commands.add_parser("search", help="Search types by keyword")
    search_parser.add_argument("query")
    search_parser.add_argument("--limit", type=int, default=None, help="Maximum results (1-100, default 10)")

    hierarchy_parser = commands.add_parser("hierarchy", help="Show direct parents and children of a type")
    hierarchy_parser.add_argument("name")
    hierarchy_parser.add_argument("--full", action="store_true", help="Also list the complete ancestor chain")

    properties_parser = commands.add_parser("properties", help="List properties of a type")
    properties_parser.add_argument("name")
    properties_parser.add_argument("--direct-only", action="store_true", help="Skip inherited properties")

    example_parser = commands.add_parser("example", help="Generate an example instance of a type")
    example_parser.add_argument("name")
    example_parser.add_argument("--set", action="append", default=[], metavar="KEY=VALUE",
                                help="Property value to include (repeatable)")

    commands.add_parser("stats", help="Show vocabulary statistics")
    return parser


def run(args: argparse.Namespace, service: VocabularyService) -> Any:
    """Execute a parsed command and return a JSON-serializable result."""
    if args.command == "type":
        return service.get_type(args.name).model_dump()
    if args.command == "search":
        return [hit.model_dump() for hit in service.search(args.query, args.limit)]
    if args.command == "hierarchy":
        result = service.get_type_hierarchy(args.name).model_dump()
        if args.full:
            result["lineage"] = [ref.model_dump() for ref in service.lineage(args.name)]
        return result
    if args.command == "properties":
        properties = service.get_type_properties(args.name, include_inherited=not args.direct_only)
        return [prop.model_dump(exclude_none=True) for prop in properties]
    if args.command == "example":
        return service.generate_example(args.name, _parse_assignments(args.set) or None)
    if args.command == "stats":
        return service.stats().model_dump()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = VocabularySettings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.sample:
        datasource = StaticDataSource(sample_document())
    else:
        datasource = FileDataSource(args.document or settings.document_path)
    service = VocabularyService(datasource=datasource, settings=settings)

    try:
        result = run(args, service)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except VocabularyError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
