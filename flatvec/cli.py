"""Command-line demo: a small store searched with a metadata filter."""

from __future__ import annotations

import argparse
from typing import List, Optional

from flatvec.search_engine import FlatSearchEngine
from flatvec.similarity import DotProductSimilarity
from flatvec.store import Document, Metadata, VectorStore

DEFAULT_FILTER = '{"op": "NEQ", "field": "class", "value": "4"}'


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_metadata(metadata: Metadata) -> str:
    """Render metadata as ``key: value, `` pairs."""
    return "".join(f"{key}: {_format_value(value)}, " for key, value in metadata.items())


def _sample_store() -> VectorStore:
    store = VectorStore()
    for embedding, metadata in [
        ([1.0, 0.0], {"id": 1, "type": "A"}),
        ([0.5, 1.0], {"id": 2, "type": "B"}),
        ([1.0, 1.0], {"id": 3, "type": "C"}),
        ([1.6, 0.3], {"id": 4, "type": "A"}),
        ([0.5, 0.8], {"id": 5, "type": "A"}),
        ([1.6, 0.3], {"id": 6, "class": 5, "type": "A"}),
        ([0.5, 0.8], {"id": 7, "class": 4}),
    ]:
        store.insert(Document(embedding, metadata))
    return store


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Search a small sample vector store.")
    parser.add_argument("-k", type=int, default=2, help="number of results")
    parser.add_argument("--filter", default=DEFAULT_FILTER, help="JSON metadata filter")
    parser.add_argument("--no-filter", action="store_true", help="search without a filter")
    args = parser.parse_args(argv)

    engine = FlatSearchEngine(_sample_store(), DotProductSimilarity())
    query = [1.0, 1.0]
    results = engine.search(query, args.k, None if args.no_filter else args.filter)

    print(f"Top {args.k} matches:")
    for score, doc in results:
        print(f"Score: {score:g} | Metadata: {format_metadata(doc.metadata)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())