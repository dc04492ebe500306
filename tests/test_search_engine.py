import logging

import pytest

from flatvec.search_engine import FlatSearchEngine, SearchEngine
from flatvec.similarity import CosineSimilarity, DotProductSimilarity
from flatvec.store import Document, VectorStore


@pytest.fixture
def store():
    s = VectorStore()
    s.insert(Document([1.0, 0.0], {"id": 1, "type": "A"}))
    s.insert(Document([0.5, 1.0], {"id": 2, "type": "B"}))
    s.insert(Document([1.0, 1.0], {"id": 3, "type": "C"}))
    s.insert(Document([1.6, 0.3], {"id": 4, "type": "A"}))
    s.insert(Document([0.5, 0.8], {"id": 5, "type": "A"}))
    s.insert(Document([1.6, 0.3], {"id": 6, "class": 5, "type": "A"}))
    s.insert(Document([0.5, 0.8], {"id": 7, "class": 4}))
    return s


@pytest.fixture
def engine(store):
    return FlatSearchEngine(store, DotProductSimilarity())


def ids(results):
    return [doc.metadata["id"] for _, doc in results]


def test_search_engine_is_abstract(store):
    with pytest.raises(TypeError):
        SearchEngine(store, DotProductSimilarity())


def test_results_sorted_descending_and_limited(engine):
    results = engine.search([1.0, 1.0], k=3)
    scores = [score for score, _ in results]
    assert len(results) == 3
    assert scores == sorted(scores, reverse=True)
    assert set(ids(results)) == {3, 4, 6}


def test_default_k_is_five(engine):
    assert len(engine.search([1.0, 1.0])) == 5


def test_k_larger_than_store(engine, store):
    results = engine.search([1.0, 1.0], k=100)
    assert len(results) == len(store)


def test_scores_come_from_metric(store):
    engine = FlatSearchEngine(store, CosineSimilarity())
    metric = CosineSimilarity()
    for score, doc in engine.search([0.3, 0.9], k=7):
        assert score == metric.compute([0.3, 0.9], doc.embedding)


def test_neq_filter_from_demo(engine):
    results = engine.search([1.0, 1.0], k=2, filter={"op": "NEQ", "field": "class", "value": "4"})
    assert ids(results) == [6, 7]


def test_eq_filter(engine):
    results = engine.search([1.0, 1.0], k=10, filter={"op": "EQ", "field": "type", "value": "A"})
    assert set(ids(results)) == {1, 4, 5, 6}


def test_or_filter_json_string(engine):
    raw = (
        '{"op": "OR", "children": ['
        '{"field": "type", "op": "EQ", "value": "B"},'
        '{"field": "class", "op": "EQ", "value": 4}]}'
    )
    assert set(ids(engine.search([1.0, 1.0], k=10, filter=raw))) == {2, 7}


def test_empty_filter_means_no_filter(engine):
    assert ids(engine.search([1.0, 1.0], k=7, filter={})) == ids(engine.search([1.0, 1.0], k=7))


def test_invalid_filter_returns_empty_and_logs(engine, caplog):
    with caplog.at_level(logging.WARNING):
        results = engine.search([1.0, 1.0], filter={"op": "BOGUS"})
    assert results == []
    assert "Invalid filter" in caplog.text


def test_dimension_mismatch_raises(engine):
    with pytest.raises(ValueError):
        engine.search([1.0, 1.0, 1.0])


def test_empty_store():
    engine = FlatSearchEngine(VectorStore(), DotProductSimilarity())
    assert engine.search([1.0]) == []