# flatvec

flatvec keeps documents in memory. Each document is an embedding vector plus a
small metadata mapping. The package ranks every stored document against a query
vector by exhaustive ("flat") search and returns the top `k`. You can narrow the
search with a JSON-style metadata filter.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from flatvec.store import Document, VectorStore
from flatvec.similarity import DotProductSimilarity
from flatvec.search_engine import FlatSearchEngine

store = VectorStore()
store.insert(Document([1.0, 0.0], {"id": 1, "type": "A"}))
store.insert(Document([0.5, 1.0], {"id": 2, "type": "B"}))
store.insert(Document([1.6, 0.3], {"id": 4, "type": "A"}))

engine = FlatSearchEngine(store, DotProductSimilarity())

for score, doc in engine.search([1.0, 1.0], 2):
    print(score, doc.metadata)
```

`search(query, k=5, filter=None)` returns a list of `(score, document)` pairs,
highest score first, with at most `k` entries.

## Store

`flatvec.store` has two classes:

- `Document`: a dataclass with an `embedding` (a list of floats) and `metadata`
  (a dict of string keys to `str`, `int` or `float` values). Both default to
  empty.
- `VectorStore`: keeps documents in insertion order. `insert(document)` adds a
  document. `len(store)` counts the documents, and iterating over the store
  yields them in insertion order.

## Similarity metrics

All metrics live in `flatvec.similarity` and subclass `SimilarityMetric`, whose
single method is `compute(a, b)`. Each one raises `ValueError` when the two
vectors differ in length.

- `DotProductSimilarity`: the plain dot product.
- `CosineSimilarity`: the cosine of the angle between the vectors. It is `0.0`
  when either vector is all zeros.
- `EuclideanSimilarity`: `exp(-distance)`. Identical vectors score `1.0`, and the
  score falls towards `0` as the vectors move apart.

## Metadata filters

A filter is a mapping, or a JSON string holding an object, with an `op` key:

| `op`                         | other keys                      |
|------------------------------|---------------------------------|
| `EQ`, `NEQ`                  | `field`, `value`                |
| `LT`, `LTE`, `GT`, `GTE`     | `field`, `value`                |
| `IN`, `NIN`                  | `field`, `values` (a list)      |
| `AND`, `OR`                  | `children` (a list of filters)  |

Values are matched strictly by type. The string `"4"` never equals the integer
`4`. Ordering comparisons only apply between two integers or two floats. A
document without the named field never matches a field filter, and that includes
`NEQ` and `NIN`. `AND` over no children matches everything, and `OR` over no
children matches nothing.

```python
spec = {
    "op": "OR",
    "children": [
        {"field": "type", "op": "EQ", "value": "A"},
        {"field": "class", "op": "EQ", "value": 5},
    ],
}
results = engine.search([1.0, 1.0], 2, spec)
```

You can also work with filters directly through `flatvec.metadata_filter`:

```python
from flatvec.metadata_filter import parse_filter, evaluate, InvalidFilterError

flt = parse_filter({"op": "GTE", "field": "id", "value": 3})
evaluate({"id": 4}, flt)   # True
```

`parse_filter` returns a frozen `Filter` dataclass (`op`, `field`, `value`,
`values`, `children`); `op` is an `Operator` enum member, and
`parse_operator(text)` maps a name such as `"EQ"` to it. `parse_filter` raises
`InvalidFilterError`, a subclass of `ValueError`, on a malformed filter: invalid
JSON, a non-object, unknown operators, missing keys, a non-string `field`, and
value types other than strings, integers and floats (booleans included) all
count as malformed.

`FlatSearchEngine.search` does not raise when the filter is invalid. It logs a
warning through the `flatvec.search_engine` logger and returns an empty list.
An empty filter, or none at all, searches every document.

## Command line

```
flatvec
```

This runs a small demonstration. It loads seven sample documents, queries them
with `[1.0, 1.0]` using the dot product under the filter
`{"op": "NEQ", "field": "class", "value": "4"}`, and prints the top matches with
their scores and metadata.

Options:

- `-k N`: number of results (default 2).
- `--filter JSON`: use another metadata filter.
- `--no-filter`: search without a filter.

## What it does not do

flatvec holds everything in memory: documents are not saved to disk and are lost
when the process ends. There is no index structure beyond the exhaustive scan,
no server and no way to remove or update documents once inserted. The command
line only searches its built-in sample documents.