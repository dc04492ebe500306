"""Search engines that rank stored documents against a query."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from flatvec.metadata_filter import InvalidFilterError, evaluate, parse_filter
from flatvec.similarity import SimilarityMetric
from flatvec.store import Document, VectorStore

logger = logging.getLogger(__name__)

FilterSpec = Union[str, Mapping[str, Any], None]
Result = Tuple[float, Document]


class SearchEngine(ABC):
    """Base class holding a store and a similarity metric."""

    def __init__(self, store: VectorStore, metric: SimilarityMetric) -> None:
        self.store = store
        self.metric = metric

    @abstractmethod
    def search(
        self, query: Sequence[float], k: int = 5, filter: FilterSpec = None
    ) -> List[Result]:
        """Return up to ``k`` (score, document) pairs, best first."""


class FlatSearchEngine(SearchEngine):
    """Exhaustive search over every stored document."""

    def search(
        self, query: Sequence[float], k: int = 5, filter: FilterSpec = None
    ) -> List[Result]:
        """Score every document passing the filter and keep the top ``k``.

        An invalid filter is logged and yields no results.
        """
        documents = list(self.store)
        if filter:
            try:
                parsed = parse_filter(filter)
            except InvalidFilterError as exc:
                logger.warning("Invalid filter: %s", exc)
                return []
            documents = [doc for doc in documents if evaluate(doc.metadata, parsed)]

        scored = [(self.metric.compute(query, doc.embedding), doc) for doc in documents]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return scored[:k]