"""Data Translators - JSON-like values to HTML, R, Wolfram Language and JSON.

Converts scalars, sequences, mappings and arbitrary nestings of them:
- HTML tables (nested per mapping level) and lists
- R data.frame construction code
- Wolfram Language association/list/Dataset literals
- JSON text

Ragged collections can be regularized into rectangular datasets first
with ``to_dataset``.
"""

from typing import Any, Optional

from data_translators.datasets.normalizer import to_dataset
from data_translators.shapes import Shape, ShapeKind, classify
from data_translators.translators.base import IncompatibleShapeError, RenderDepthError
from data_translators.translators.dispatcher import convert, get_translator, to_json
from data_translators.translators.schemas import RenderOptions

__version__ = "0.1.0"

# Same entry point under the command's name
data_translation = convert


def _options(max_depth: Optional[int] = None, **kwargs) -> RenderOptions:
    # An unset max_depth keeps the environment default
    if max_depth is not None:
        kwargs["max_depth"] = max_depth
    return RenderOptions(**kwargs)


def to_html(
    value: Any,
    field_names: Optional[list[str]] = None,
    table_attributes: Optional[str] = None,
    encode: bool = False,
    escape: bool = False,
    max_depth: Optional[int] = None,
) -> str:
    """Render a value as HTML.

    Args:
        value: Any JSON-like value
        field_names: Top-level column order, or keys for positional rows
        table_attributes: Attributes of the outermost table (default border="1")
        encode: Numeric character references for non-ASCII text
        escape: Escape HTML-significant characters
        max_depth: Maximum container nesting levels (None: unbounded)
    """
    options = _options(
        field_names=field_names,
        table_attributes=table_attributes,
        encode=encode,
        escape=escape,
        max_depth=max_depth,
    )
    return get_translator("html").render(value, options)


def to_r(value: Any, field_names: Optional[list[str]] = None) -> str:
    """Render a list of mappings as an R data.frame expression."""
    return get_translator("r").render(value, RenderOptions(field_names=field_names))


def to_wl(
    value: Any,
    field_names: Optional[list[str]] = None,
    max_depth: Optional[int] = None,
) -> str:
    """Render a value as Wolfram Language literal code."""
    options = _options(field_names=field_names, max_depth=max_depth)
    return get_translator("wl").render(value, options)


__all__ = [
    "IncompatibleShapeError",
    "RenderDepthError",
    "RenderOptions",
    "Shape",
    "ShapeKind",
    "classify",
    "convert",
    "data_translation",
    "to_dataset",
    "to_html",
    "to_json",
    "to_r",
    "to_wl",
]
