"""Base class for translators and the shared render(value, options) contract.

A translator classifies a value one level at a time and hands each shape
to a dedicated method:

    scalar              -> render_scalar
    list_of_scalars     -> render_list
    list_of_mappings    -> render_table (columns = key union)
    mapping_of_mappings -> render_mapping
    mapping_of_scalars  -> render_mapping
    list_of_pairs       -> render_pairs
    generic             -> render_list / render_mapping by container type

Top-level ``field_names`` may turn a flat list or positional rows into a
table before any of this happens (see ``top_level_table``).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from data_translators.shapes.classifier import classify, column_union, is_positional_rows
from data_translators.shapes.schemas import ShapeKind
from data_translators.translators.registry import get_target_registry
from data_translators.translators.schemas import RenderOptions
from data_translators.values import is_mapping, is_scalar, is_sequence

logger = logging.getLogger(__name__)


class IncompatibleShapeError(ValueError):
    """A translator was given a shape or option it cannot render."""


class RenderDepthError(IncompatibleShapeError):
    """The value nests deeper than ``RenderOptions.max_depth`` allows."""


class _RenderState:
    """Mutable state shared by every context of one render call."""

    __slots__ = ("outer_table_opened",)

    def __init__(self):
        self.outer_table_opened = False


class RenderContext:
    """Position of the value being rendered within the whole input."""

    __slots__ = ("options", "depth", "table_depth", "state")

    def __init__(
        self,
        options: RenderOptions,
        depth: int = 0,
        table_depth: int = 0,
        state: Optional[_RenderState] = None,
    ):
        self.options = options
        self.depth = depth
        self.table_depth = table_depth
        self.state = state or _RenderState()

    @property
    def outermost(self) -> bool:
        return self.depth == 0

    def child(self, table: bool = False) -> "RenderContext":
        """Context for the values inside the current container."""
        return RenderContext(
            self.options,
            depth=self.depth + 1,
            table_depth=self.table_depth + 1 if table else self.table_depth,
            state=self.state,
        )


def top_level_table(
    value: Any, field_names: Optional[list[str]]
) -> Optional[tuple[list, list]]:
    """Columns and rows for a top-level value read through ``field_names``.

    - list of mappings: columns = field_names, rows unchanged
    - flat list of scalars: one row keyed positionally by field_names
    - positional rows (list of scalar lists): each row keyed positionally

    Returns None when field_names is unset or the value is none of these.
    """
    if not field_names:
        return None

    shape = classify(value)
    if shape.is_tabular:
        return list(field_names), list(value)

    if shape.kind == ShapeKind.LIST_OF_SCALARS and value:
        return list(field_names), [_positional_row(value, field_names)]

    if is_positional_rows(value):
        return list(field_names), [_positional_row(row, field_names) for row in value]

    return None


def _positional_row(cells, field_names: list[str]) -> dict:
    if len(cells) > len(field_names):
        logger.warning(
            f"Row has {len(cells)} values but only {len(field_names)} field "
            f"names; dropping {len(cells) - len(field_names)} trailing values"
        )
    return dict(zip(field_names, cells))


class Translator(ABC):
    """Base class for translators producing one target syntax."""

    target_key: str = ""

    def render(self, value: Any, options: Optional[RenderOptions] = None) -> str:
        """Render a value to target text.

        Args:
            value: Any JSON-like value
            options: Render options; defaults apply when omitted

        Returns:
            The complete text; nothing is returned on failure.

        Raises:
            IncompatibleShapeError: The value or options are unsupported
        """
        options = options or RenderOptions()
        self.check_options(options)
        context = RenderContext(options)

        table = top_level_table(value, options.field_names)
        if table is not None:
            self._check_depth(context)
            columns, rows = table
            return self.render_table(columns, rows, context)

        return self.render_value(value, context)

    def unsupported_options(self, options: RenderOptions) -> list[str]:
        """Options set on ``options`` that this target's definition does not list."""
        definition = get_target_registry().get(self.target_key)
        if definition is None:
            logger.debug(f"No target definition for '{self.target_key}'")
            return []
        return [
            name
            for name in options.options_set()
            if name not in definition.supported_options
        ]

    def check_options(self, options: RenderOptions) -> None:
        """Handle unsupported options. Default: ignore them with a debug log."""
        ignored = self.unsupported_options(options)
        if ignored:
            logger.debug(f"Target '{self.target_key}' ignores option(s): {ignored}")

    def render_value(self, value: Any, context: RenderContext) -> str:
        """Classify one value and render it with the matching method."""
        if not is_scalar(value):
            self._check_depth(context)

        shape = classify(value)

        if shape.kind == ShapeKind.SCALAR:
            return self.render_scalar(value, context)
        if shape.kind == ShapeKind.LIST_OF_SCALARS:
            return self.render_list(value, context)
        if shape.is_tabular:
            return self.render_table(column_union(value), value, context)
        if shape.kind in (ShapeKind.MAPPING_OF_MAPPINGS, ShapeKind.MAPPING_OF_SCALARS):
            return self.render_mapping(value, context)
        if shape.kind == ShapeKind.LIST_OF_PAIRS:
            return self.render_pairs(value, context)

        # generic
        if is_sequence(value):
            return self.render_list(value, context)
        if is_mapping(value):
            return self.render_mapping(value, context)
        return self.render_scalar(str(value), context)

    def _check_depth(self, context: RenderContext) -> None:
        max_depth = context.options.max_depth
        if max_depth is not None and context.depth >= max_depth:
            raise RenderDepthError(
                f"Value nests deeper than max_depth={max_depth}"
            )

    @abstractmethod
    def render_scalar(self, value: Any, context: RenderContext) -> str:
        """Render a null, boolean, number or text value."""

    @abstractmethod
    def render_list(self, items, context: RenderContext) -> str:
        """Render an ordered sequence item by item."""

    @abstractmethod
    def render_table(self, columns: list, rows: list, context: RenderContext) -> str:
        """Render rows of mappings under the given column list."""

    @abstractmethod
    def render_mapping(self, mapping, context: RenderContext) -> str:
        """Render a mapping as key/value entries."""

    @abstractmethod
    def render_pairs(self, pairs, context: RenderContext) -> str:
        """Render a sequence of (key, value) pairs."""
