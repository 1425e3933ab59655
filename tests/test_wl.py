"""Tests for the Wolfram Language translator."""

import logging

import pytest

from data_translators import RenderOptions, to_wl
from data_translators.translators.wl import WLTranslator, wl_real, wl_string


class TestStructure:
    def test_association(self):
        assert to_wl({"a": 1, "b": "x"}) == '<|"a" -> 1, "b" -> "x"|>'

    def test_list(self):
        assert to_wl([1, 2.5, None, True]) == "{1, 2.5, Missing[], True}"

    def test_dataset(self):
        assert to_wl([{"x": 1, "y": 2}]) == 'Dataset[{<|"x" -> 1, "y" -> 2|>}]'

    def test_ragged_dataset_fills_missing(self):
        assert to_wl([{"a": 1}, {"b": 2}]) == (
            'Dataset[{<|"a" -> 1, "b" -> Missing[]|>, <|"a" -> Missing[], "b" -> 2|>}]'
        )

    def test_nested_associations(self, nested_mapping):
        assert to_wl(nested_mapping) == '<|"a" -> <|"b" -> <|"c" -> 1|>|>|>'

    def test_pairs_become_rules(self):
        assert to_wl([["a", 1], ["b", 2]]) == '{"a" -> 1, "b" -> 2}'

    def test_numeric_keys(self):
        assert to_wl({4: "a"}) == '<|4 -> "a"|>'

    def test_empty_containers(self):
        assert to_wl([]) == "{}"
        assert to_wl({}) == "<||>"


class TestFieldNames:
    def test_flat_list_read_as_one_row(self):
        assert to_wl([1, 2], field_names=["a", "b"]) == (
            'Dataset[{<|"a" -> 1, "b" -> 2|>}]'
        )

    def test_reorders_dataset_columns(self):
        assert to_wl([{"x": 1, "y": 2}], field_names=["y", "x"]) == (
            'Dataset[{<|"y" -> 2, "x" -> 1|>}]'
        )

    def test_html_options_ignored(self):
        options = RenderOptions(encode=True, table_attributes="x")
        assert WLTranslator().render({"a": "é"}, options) == '<|"a" -> "é"|>'

    def test_ignored_options_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="data_translators.translators.base"):
            WLTranslator().render([1], RenderOptions(escape=True))
        assert "ignores option(s): ['escape']" in caplog.text


class TestScalars:
    def test_string_escaping(self):
        assert wl_string('a"b\\c') == '"a\\"b\\\\c"'

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.5, "2.5"),
            (1e-05, "1.*^-5"),
            (1.5e20, "1.5*^20"),
            (float("nan"), "Indeterminate"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_reals(self, value, expected):
        assert wl_real(value) == expected

    def test_false_and_null(self):
        assert to_wl([False, None]) == "{False, Missing[]}"
