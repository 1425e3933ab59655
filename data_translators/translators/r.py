"""R translator: column-oriented data.frame construction code.

Tabular data in, tabular code out:

    data.frame(`a` = c(1, 2), `b` = c("x", "y"))

Anything that is not a table of scalar cells raises IncompatibleShapeError
before any text is produced. Ragged rows must be normalized with
``to_dataset`` first.
"""

import json
import math
from typing import Any, Optional

from data_translators.shapes.classifier import classify, column_union
from data_translators.translators.base import (
    IncompatibleShapeError,
    RenderContext,
    Translator,
    top_level_table,
)
from data_translators.translators.schemas import RenderOptions
from data_translators.values import is_scalar, scalar_text

CONSTRUCTOR = "data.frame"


def r_name(name: Any) -> str:
    """Backtick-quoted R column name."""
    escaped = scalar_text(name).replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def r_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return repr(value)


class RTranslator(Translator):
    """Renders tabular values as an R data.frame expression."""

    target_key = "r"

    def render(self, value: Any, options: Optional[RenderOptions] = None) -> str:
        options = options or RenderOptions()
        self.check_options(options)
        context = RenderContext(options)

        table = top_level_table(value, options.field_names)
        if table is None:
            shape = classify(value)
            if not shape.is_tabular:
                raise IncompatibleShapeError(
                    f"R target needs a list of mappings, got {shape.kind.value}"
                )
            table = column_union(value), value

        self._check_depth(context)
        columns, rows = table
        return self.render_table(columns, rows, context)

    def check_options(self, options: RenderOptions) -> None:
        unsupported = self.unsupported_options(options)
        if unsupported:
            raise IncompatibleShapeError(
                f"R target does not support option(s): {', '.join(unsupported)}"
            )

    def render_scalar(self, value: Any, context: RenderContext) -> str:
        if value is None:
            return "NA"
        if value is True:
            return "TRUE"
        if value is False:
            return "FALSE"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return r_number(value)
        return json.dumps(str(value), ensure_ascii=False)

    def render_table(self, columns: list, rows: list, context: RenderContext) -> str:
        vectors = []
        for column in columns:
            cells = []
            for index, row in enumerate(rows):
                if column not in row:
                    raise IncompatibleShapeError(
                        f"Row {index} has no column {column!r}; "
                        f"normalize ragged rows with to_dataset first"
                    )
                cell = row[column]
                if not is_scalar(cell):
                    raise IncompatibleShapeError(
                        f"Row {index}, column {column!r} holds a "
                        f"{type(cell).__name__}; R columns need scalar cells"
                    )
                cells.append(self.render_scalar(cell, context))
            vectors.append(f"{r_name(column)} = c({', '.join(cells)})")
        return f"{CONSTRUCTOR}({', '.join(vectors)})"

    def render_list(self, items, context: RenderContext) -> str:
        raise IncompatibleShapeError("R target cannot render a nested list")

    def render_mapping(self, mapping, context: RenderContext) -> str:
        raise IncompatibleShapeError("R target cannot render a mapping")

    def render_pairs(self, pairs, context: RenderContext) -> str:
        raise IncompatibleShapeError("R target cannot render key/value pairs")
