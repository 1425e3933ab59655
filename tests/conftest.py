"""Shared test fixtures for the data translators test suite.

Provides sample values covering each shape the classifier reports, and
helpers for target definition directories:

    ragged_rows: list of mappings whose rows have different key sets
    nested_mapping: mapping of mappings three levels deep
    definitions_dir: a writable copy of the packaged target definitions
    write_target: writes one target definition JSON file into a directory
"""

import json
import shutil
from pathlib import Path

import pytest

from data_translators.translators import registry as registry_module

PACKAGED_DEFINITIONS = Path(registry_module.__file__).parent / "definitions"


@pytest.fixture
def ragged_rows():
    return [{"a": 1, "b": 2}, {"b": 3}, {"c": "x", "a": 4}]


@pytest.fixture
def nested_mapping():
    return {"a": {"b": {"c": 1}}}


@pytest.fixture
def definitions_dir(tmp_path):
    target = tmp_path / "definitions"
    shutil.copytree(PACKAGED_DEFINITIONS, target)
    return target


@pytest.fixture
def write_target():
    """Write a target definition file; returns its path."""

    def _write(directory: Path, target_key: str, **fields) -> Path:
        data = {
            "target_key": target_key,
            "target_name": fields.pop("target_name", target_key.upper()),
            **fields,
        }
        path = directory / f"{target_key}.json"
        path.write_text(json.dumps(data))
        return path

    return _write
