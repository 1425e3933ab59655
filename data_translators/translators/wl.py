"""Wolfram Language translator: association, list and Dataset literals.

Mirrors the HTML translator's recursion one-for-one:
- mappings          -> <|"key" -> value, ...|>
- sequences         -> {item, ...}
- list of mappings  -> Dataset[{<|...|>, ...}] (absent keys -> Missing[])
- list of pairs     -> {key -> value, ...}
"""

import math
from typing import Any

from data_translators.translators.base import RenderContext, Translator

MISSING = "Missing[]"


def wl_string(text: str) -> str:
    """Double-quoted WL string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def wl_real(value: float) -> str:
    """WL literal for a float; exponents use the *^ notation."""
    if math.isnan(value):
        return "Indeterminate"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    if "." not in mantissa:
        mantissa += "."
    return f"{mantissa}*^{int(exponent)}"


class WLTranslator(Translator):
    """Renders values as Wolfram Language literals."""

    target_key = "wl"

    def render_scalar(self, value: Any, context: RenderContext) -> str:
        if value is None:
            return MISSING
        if value is True:
            return "True"
        if value is False:
            return "False"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return wl_real(value)
        return wl_string(str(value))

    def render_list(self, items, context: RenderContext) -> str:
        inner = context.child()
        return "{" + ", ".join(self.render_value(item, inner) for item in items) + "}"

    def render_table(self, columns: list, rows: list, context: RenderContext) -> str:
        inner = context.child(table=True)
        associations = ", ".join(
            "<|"
            + ", ".join(
                f"{self.render_scalar(column, context)} -> "
                f"{self.render_value(row[column], inner) if column in row else MISSING}"
                for column in columns
            )
            + "|>"
            for row in rows
        )
        return f"Dataset[{{{associations}}}]"

    def render_mapping(self, mapping, context: RenderContext) -> str:
        inner = context.child(table=True)
        rules = ", ".join(
            f"{self.render_scalar(key, context)} -> {self.render_value(value, inner)}"
            for key, value in mapping.items()
        )
        return f"<|{rules}|>"

    def render_pairs(self, pairs, context: RenderContext) -> str:
        inner = context.child(table=True)
        rules = ", ".join(
            f"{self.render_scalar(pair[0], context)} -> {self.render_value(pair[1], inner)}"
            for pair in pairs
        )
        return "{" + rules + "}"
