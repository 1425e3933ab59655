"""Regularizes ragged collections into rectangular datasets.

Handles every shape the classifier reports:
- scalar: one row, one synthetic "Value" column
- list_of_scalars: one "Value" row per element
- list_of_mappings: passthrough when homogeneous, else key-union-and-fill
- mapping_of_mappings: key-union-and-fill across the inner mappings
- mapping_of_scalars / list_of_pairs: two-column "Key"/"Value" rows
- generic: left unchanged, with a warning

Normalization never raises and never mutates its input.
"""

import logging
from collections.abc import Mapping
from typing import Any

from data_translators.shapes.classifier import classify, column_union
from data_translators.shapes.schemas import ShapeKind
from data_translators.values import is_mapping

logger = logging.getLogger(__name__)

KEY_COLUMN = "Key"
VALUE_COLUMN = "Value"


def to_dataset(value: Any, missing_value: Any = "") -> Any:
    """Normalize a value into a rectangular dataset.

    Args:
        value: Any JSON-like value
        missing_value: Sentinel written into cells whose key a row lacks

    Returns:
        A list of rows sharing one column list, a mapping of such rows
        (for mapping_of_mappings input), or ``value`` unchanged when its
        shape cannot be normalized.
    """
    shape = classify(value)

    if shape.kind == ShapeKind.SCALAR:
        return [{VALUE_COLUMN: value}]

    if shape.kind == ShapeKind.LIST_OF_SCALARS:
        return [{VALUE_COLUMN: item} for item in value]

    if shape.is_tabular:
        if shape.homogeneous:
            return value
        return fill_rows(value, column_union(value), missing_value)

    if shape.kind == ShapeKind.MAPPING_OF_MAPPINGS:
        columns = column_union(value.values())
        return {
            key: _fill_row(row, columns, missing_value)
            for key, row in value.items()
        }

    if shape.is_key_value:
        entries = value.items() if is_mapping(value) else value
        return [{KEY_COLUMN: entry[0], VALUE_COLUMN: entry[1]} for entry in entries]

    logger.warning(
        f"Cannot normalize a value of shape '{shape.kind.value}' "
        f"({type(value).__name__}); returning it unchanged"
    )
    return value


def fill_rows(rows, columns: list, missing_value: Any = "") -> list[dict]:
    """Rebuild every row with exactly ``columns``, filling absent keys."""
    return [_fill_row(row, columns, missing_value) for row in rows]


def _fill_row(row: Mapping, columns: list, missing_value: Any) -> dict:
    return {
        column: row[column] if column in row else missing_value
        for column in columns
    }
