"""Inspects one level of a value and names its shape.

Precedence (first match wins):
- scalars
- sequences: list_of_scalars, list_of_mappings, list_of_pairs, generic
- mappings: mapping_of_scalars, mapping_of_mappings, generic

Empty sequences and mappings are trivially list_of_scalars and
mapping_of_scalars. Classification is total and never raises.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from data_translators.shapes.schemas import Shape, ShapeKind
from data_translators.values import is_mapping, is_pair, is_scalar, is_sequence


def classify(value: Any) -> Shape:
    """Classify the shape of a value."""
    if is_scalar(value):
        return Shape(kind=ShapeKind.SCALAR)

    if is_sequence(value):
        return _classify_sequence(value)

    if is_mapping(value):
        return _classify_mapping(value)

    return Shape(kind=ShapeKind.GENERIC)


def _classify_sequence(items) -> Shape:
    if all(is_scalar(item) for item in items):
        return Shape(kind=ShapeKind.LIST_OF_SCALARS)

    if all(is_mapping(item) for item in items):
        return Shape(
            kind=ShapeKind.LIST_OF_MAPPINGS,
            homogeneous=is_homogeneous(items),
        )

    if all(is_pair(item) for item in items):
        return Shape(kind=ShapeKind.LIST_OF_PAIRS)

    return Shape(kind=ShapeKind.GENERIC)


def _classify_mapping(mapping: Mapping) -> Shape:
    values = mapping.values()
    if all(is_scalar(v) for v in values):
        return Shape(kind=ShapeKind.MAPPING_OF_SCALARS)

    if all(is_mapping(v) for v in values):
        return Shape(kind=ShapeKind.MAPPING_OF_MAPPINGS)

    return Shape(kind=ShapeKind.GENERIC)


def is_homogeneous(rows: Iterable[Mapping]) -> bool:
    """True iff every row has the same key set (set equality, not order)."""
    key_set = None
    for row in rows:
        keys = set(row.keys())
        if key_set is None:
            key_set = keys
        elif keys != key_set:
            return False
    return True


def column_union(rows: Iterable[Mapping]) -> list:
    """Union of the rows' keys in first-occurrence order."""
    columns: dict = {}
    for row in rows:
        for key in row.keys():
            columns.setdefault(key, None)
    return list(columns)


def is_positional_rows(value: Any) -> bool:
    """True for a non-empty sequence of scalar sequences (rows without keys)."""
    return (
        is_sequence(value)
        and len(value) > 0
        and all(
            is_sequence(row) and all(is_scalar(cell) for cell in row)
            for row in value
        )
    )
