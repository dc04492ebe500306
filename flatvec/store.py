"""Documents and the in-memory store that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Union

MetadataValue = Union[str, int, float]
Metadata = Dict[str, MetadataValue]


@dataclass
class Document:
    """An embedding together with its metadata."""

    embedding: List[float] = field(default_factory=list)
    metadata: Metadata = field(default_factory=dict)


class VectorStore:
    """Keeps documents in insertion order."""

    def __init__(self) -> None:
        self._documents: List[Document] = []

    def insert(self, document: Document) -> None:
        """Append a document to the store."""
        self._documents.append(document)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)