"""Metadata filters: parsing from JSON-like specs and evaluation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

from flatvec.store import Metadata, MetadataValue


class InvalidFilterError(ValueError):
    """Raised when a filter specification cannot be parsed."""


class Operator(Enum):
    EQ = "EQ"
    NEQ = "NEQ"
    LT = "LT"
    LTE = "LTE"
    GT = "GT"
    GTE = "GTE"
    NIN = "NIN"
    IN = "IN"
    AND = "AND"
    OR = "OR"


_LOGICAL = (Operator.AND, Operator.OR)
_ORDERING = (Operator.LT, Operator.LTE, Operator.GT, Operator.GTE)


@dataclass(frozen=True)
class Filter:
    """A single condition or a logical combination of child filters."""

    op: Operator
    field: str = ""
    value: Optional[MetadataValue] = None
    values: Tuple[MetadataValue, ...] = ()
    children: Tuple["Filter", ...] = ()


def parse_operator(text: str) -> Operator:
    """Map an operator name such as ``"EQ"`` to its Operator."""
    if isinstance(text, str) and text in Operator.__members__:
        return Operator[text]
    raise InvalidFilterError(f"Unknown operator: {text}")


def _matches(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


def evaluate(metadata: Metadata, filter: Filter) -> bool:
    """Return whether the metadata satisfies the filter."""
    op = filter.op
    if op is Operator.AND:
        return all(evaluate(metadata, child) for child in filter.children)
    if op is Operator.OR:
        return any(evaluate(metadata, child) for child in filter.children)

    if filter.field not in metadata:
        return False
    value = metadata[filter.field]

    if op is Operator.EQ:
        return _matches(value, filter.value)
    if op is Operator.NEQ:
        return not _matches(value, filter.value)
    if op in _ORDERING:
        target = filter.value
        if type(value) is not type(target) or type(value) not in (int, float):
            return False
        if op is Operator.LT:
            return value < target
        if op is Operator.LTE:
            return value <= target
        if op is Operator.GT:
            return value > target
        return value >= target
    if op is Operator.IN:
        return any(_matches(value, v) for v in filter.values)
    if op is Operator.NIN:
        return not any(_matches(value, v) for v in filter.values)
    return False


def _scalar(raw: Any, error: str) -> MetadataValue:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise InvalidFilterError(error)
    return raw


def _field(spec: Mapping[str, Any]) -> str:
    name = spec["field"]
    if not isinstance(name, str):
        raise InvalidFilterError("'field' must be a string")
    return name


def parse_filter(spec: Union[str, Mapping[str, Any]]) -> Filter:
    """Build a Filter from a mapping or a JSON string.

    Logical operators take ``children``; ``IN`` takes ``field`` and
    ``values``; every other operator takes ``field`` and ``value``.
    """
    if isinstance(spec, str):
        try:
            spec = json.loads(spec)
        except json.JSONDecodeError as exc:
            raise InvalidFilterError(f"JSON parsing error: {exc}") from exc
    if not isinstance(spec, Mapping):
        raise InvalidFilterError("Filter must be a JSON object")
    if "op" not in spec:
        raise InvalidFilterError("Missing required key: 'op'")

    try:
        op = parse_operator(spec["op"])
    except InvalidFilterError:
        raise InvalidFilterError(f"Invalid operator: {spec['op']}") from None

    if op in _LOGICAL:
        children = spec.get("children")
        if not isinstance(children, list):
            raise InvalidFilterError("'children' must be an array for logical operators")
        return Filter(op=op, children=tuple(parse_filter(child) for child in children))

    if op is Operator.IN:
        if "field" not in spec or "values" not in spec:
            raise InvalidFilterError("Missing 'field' or 'values' for IN operator")
        field_name = _field(spec)
        raw_values = spec["values"]
        if not isinstance(raw_values, list):
            raise InvalidFilterError("'values' must be an array for IN operator")
        values = tuple(
            _scalar(v, "Invalid value type in 'values' array") for v in raw_values
        )
        return Filter(op=op, field=field_name, values=values)

    if "field" not in spec or "value" not in spec:
        raise InvalidFilterError("Missing 'field' or 'value' for comparison operator")
    return Filter(
        op=op,
        field=_field(spec),
        value=_scalar(spec["value"], "Invalid 'value' type"),
    )