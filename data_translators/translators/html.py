"""HTML translator: tables, nested tables and unordered lists.

Output grammar:
- tabular:   <table border="1"><thead><tr><th>..</th></tr></thead>
             <tbody><tr><td>..</td></tr>..</tbody></table>
- key/value: <table><tr><th>key</th><td>value</td></tr>..</table>
- lists:     <ul><li>..</li>..</ul>

Only the first outermost table carries attributes; nested tables and
later sibling tables open with a plain <table>.
"""

import html
from typing import Any

from data_translators.translators.base import RenderContext, Translator
from data_translators.translators.schemas import DEFAULT_TABLE_ATTRIBUTES
from data_translators.values import scalar_text


def encode_text(text: str) -> str:
    """Replace non-ASCII characters with numeric character references."""
    return text.encode("ascii", "xmlcharrefreplace").decode("ascii")


class HTMLTranslator(Translator):
    """Renders values as HTML markup."""

    target_key = "html"

    def render_scalar(self, value: Any, context: RenderContext) -> str:
        text = scalar_text(value)
        if context.options.escape:
            text = html.escape(text)
        if context.options.encode:
            text = encode_text(text)
        return text

    def render_list(self, items, context: RenderContext) -> str:
        inner = context.child()
        entries = "".join(
            f"<li>{self.render_value(item, inner)}</li>" for item in items
        )
        return f"<ul>{entries}</ul>"

    def render_table(self, columns: list, rows: list, context: RenderContext) -> str:
        inner = context.child(table=True)
        header = "".join(
            f"<th>{self.render_scalar(column, context)}</th>" for column in columns
        )
        body = "".join(
            "<tr>"
            + "".join(
                f"<td>{self.render_value(row[column], inner) if column in row else ''}</td>"
                for column in columns
            )
            + "</tr>"
            for row in rows
        )
        return (
            f"{self._open_table(context)}"
            f"<thead><tr>{header}</tr></thead>"
            f"<tbody>{body}</tbody></table>"
        )

    def render_mapping(self, mapping, context: RenderContext) -> str:
        return self._key_value_table(mapping.items(), context)

    def render_pairs(self, pairs, context: RenderContext) -> str:
        return self._key_value_table(((pair[0], pair[1]) for pair in pairs), context)

    def _key_value_table(self, entries, context: RenderContext) -> str:
        inner = context.child(table=True)
        rows = "".join(
            f"<tr><th>{self.render_scalar(key, context)}</th>"
            f"<td>{self.render_value(value, inner)}</td></tr>"
            for key, value in entries
        )
        return f"{self._open_table(context)}{rows}</table>"

    def _open_table(self, context: RenderContext) -> str:
        # Attributes go on the first outer table only; sibling tables under a
        # top-level list open plain
        if context.table_depth > 0 or context.state.outer_table_opened:
            return "<table>"
        context.state.outer_table_opened = True
        attributes = context.options.table_attributes
        if attributes is None:
            attributes = DEFAULT_TABLE_ATTRIBUTES
        attributes = attributes.strip()
        return f"<table {attributes}>" if attributes else "<table>"
