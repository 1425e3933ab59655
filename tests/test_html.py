"""Tests for the HTML translator."""

import pytest

from data_translators import RenderDepthError, to_html


class TestTables:
    def test_single_row_table(self):
        assert to_html([{"x": 1, "y": 2}]) == (
            '<table border="1"><thead><tr><th>x</th><th>y</th></tr></thead>'
            "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
        )

    def test_ragged_rows_render_empty_cells(self):
        assert to_html([{"a": 1}, {"b": 2}]) == (
            '<table border="1"><thead><tr><th>a</th><th>b</th></tr></thead>'
            "<tbody><tr><td>1</td><td></td></tr>"
            "<tr><td></td><td>2</td></tr></tbody></table>"
        )

    def test_header_uses_first_occurrence_order(self, ragged_rows):
        html = to_html(ragged_rows)
        assert "<thead><tr><th>a</th><th>b</th><th>c</th></tr></thead>" in html

    def test_nested_cells_are_nested_tables(self):
        assert to_html([{"a": [{"x": 1}]}]) == (
            '<table border="1"><thead><tr><th>a</th></tr></thead><tbody><tr><td>'
            "<table><thead><tr><th>x</th></tr></thead>"
            "<tbody><tr><td>1</td></tr></tbody></table>"
            "</td></tr></tbody></table>"
        )


class TestKeyValue:
    def test_mapping_of_scalars(self):
        assert to_html({"a": 1, "b": "x"}) == (
            '<table border="1"><tr><th>a</th><td>1</td></tr>'
            "<tr><th>b</th><td>x</td></tr></table>"
        )

    def test_one_table_per_mapping_level(self, nested_mapping):
        assert to_html(nested_mapping) == (
            '<table border="1"><tr><th>a</th><td>'
            "<table><tr><th>b</th><td>"
            "<table><tr><th>c</th><td>1</td></tr></table>"
            "</td></tr></table>"
            "</td></tr></table>"
        )

    @pytest.mark.parametrize("depth", [1, 2, 3, 5])
    def test_depth_correspondence(self, depth):
        value = {"leaf": 1}
        for level in range(depth - 1):
            value = {f"k{level}": value}
        assert to_html(value).count("<table") == depth

    def test_list_of_pairs(self):
        assert to_html([["a", 1], ["b", 2]]) == (
            '<table border="1"><tr><th>a</th><td>1</td></tr>'
            "<tr><th>b</th><td>2</td></tr></table>"
        )

    def test_generic_mapping_recurses(self):
        assert to_html({"n": 1, "l": [1, 2]}) == (
            '<table border="1"><tr><th>n</th><td>1</td></tr>'
            "<tr><th>l</th><td><ul><li>1</li><li>2</li></ul></td></tr></table>"
        )


class TestLists:
    def test_list_of_scalars(self):
        assert to_html([1, "a"]) == "<ul><li>1</li><li>a</li></ul>"

    def test_empty_list(self):
        assert to_html([]) == "<ul></ul>"

    def test_generic_list_with_table(self):
        assert to_html([1, {"a": 2}]) == (
            '<ul><li>1</li><li><table border="1"><tr><th>a</th><td>2</td></tr>'
            "</table></li></ul>"
        )


class TestScalars:
    @pytest.mark.parametrize(
        "value, expected",
        [(None, ""), (True, "true"), (False, "false"), (3, "3"), (2.5, "2.5"), ("x", "x")],
    )
    def test_scalar_text(self, value, expected):
        assert to_html(value) == expected

    def test_no_escaping_by_default(self):
        assert to_html("<b>&") == "<b>&"

    def test_escape(self):
        assert to_html("<b>&\"", escape=True) == "&lt;b&gt;&amp;&quot;"

    def test_encode(self):
        assert to_html("café", encode=True) == "caf&#233;"

    def test_escape_then_encode(self):
        assert to_html("<é>", escape=True, encode=True) == "&lt;&#233;&gt;"

    def test_header_text_is_escaped(self):
        assert "<th>&lt;k&gt;</th>" in to_html([{"<k>": 1}], escape=True)


class TestFieldNames:
    def test_reorders_columns(self):
        assert to_html([{"x": 1, "y": 2}], field_names=["y", "x"]) == (
            '<table border="1"><thead><tr><th>y</th><th>x</th></tr></thead>'
            "<tbody><tr><td>2</td><td>1</td></tr></tbody></table>"
        )

    def test_selects_columns(self):
        html = to_html([{"x": 1, "y": 2}], field_names=["y"])
        assert "<th>x</th>" not in html
        assert "<td>2</td>" in html

    def test_flat_list_read_as_one_row(self):
        assert to_html([1, 2], field_names=["a", "b"]) == (
            '<table border="1"><thead><tr><th>a</th><th>b</th></tr></thead>'
            "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
        )

    def test_positional_rows(self):
        assert to_html([[1, 2], [3, 4]], field_names=["a", "b"]) == (
            '<table border="1"><thead><tr><th>a</th><th>b</th></tr></thead>'
            "<tbody><tr><td>1</td><td>2</td></tr>"
            "<tr><td>3</td><td>4</td></tr></tbody></table>"
        )

    def test_only_applies_at_top_level(self):
        html = to_html({"t": [{"x": 1, "y": 2}]}, field_names=["y"])
        assert "<thead><tr><th>x</th><th>y</th></tr></thead>" in html


class TestTableAttributes:
    def test_outermost_table_only(self, nested_mapping):
        html = to_html(nested_mapping, table_attributes='class="data"')
        assert html.startswith('<table class="data">')
        assert html.count('class="data"') == 1
        assert "border" not in html
        assert html.count("<table>") == 2

    def test_sibling_tables_under_a_list(self):
        html = to_html([[{"a": 1}], [{"b": 2}]], table_attributes='id="t"')
        assert html == (
            '<ul><li><table id="t"><thead><tr><th>a</th></tr></thead>'
            "<tbody><tr><td>1</td></tr></tbody></table></li>"
            "<li><table><thead><tr><th>b</th></tr></thead>"
            "<tbody><tr><td>2</td></tr></tbody></table></li></ul>"
        )

    def test_default_border_appears_once(self):
        html = to_html([{"a": 1}, 2, {"b": 3}])
        assert html.count('border="1"') == 1
        assert html.count("<table") == 2

    def test_empty_attributes(self):
        assert to_html({"a": 1}, table_attributes="").startswith("<table><tr>")


class TestDepthLimit:
    def test_exceeding_max_depth_raises(self, nested_mapping):
        with pytest.raises(RenderDepthError):
            to_html(nested_mapping, max_depth=2)

    def test_within_max_depth(self, nested_mapping):
        assert to_html(nested_mapping, max_depth=3).count("<table") == 3

    def test_unbounded_by_default(self):
        value = 1
        for _ in range(50):
            value = {"k": value}
        assert to_html(value).count("<table") == 50
