"""
Tests for DFA record files.
"""

import json

import pytest

from pydfa.automata.enumeration import enumerate_dfas
from pydfa.io import load_dfa, load_dfas, read_record, save_dfas


def test_save_and_load_list(tmp_path):
    dfas = list(enumerate_dfas(limit=8))
    path = tmp_path / "dfas.json"

    save_dfas(dfas, str(path))
    loaded = load_dfas(str(path))

    assert loaded == dfas


def test_saved_file_is_a_json_list_of_records(tmp_path, ends_with_a_dfa):
    path = tmp_path / "dfas.json"
    save_dfas([ends_with_a_dfa], str(path))

    with open(path) as f:
        data = json.load(f)
    assert isinstance(data, list)
    assert data[0]["transitions"] == {"0": {"a": 1, "b": 0}, "1": {"a": 1, "b": 0}}


def test_load_single_record(tmp_path, ends_with_a_dfa):
    path = tmp_path / "dfa.json"
    path.write_text(json.dumps(ends_with_a_dfa.to_record()))

    assert load_dfa(str(path)) == ends_with_a_dfa
    assert read_record(str(path))["finals"] == [1]


def test_load_single_rejects_many(tmp_path, ends_with_a_dfa, contains_a_dfa):
    path = tmp_path / "dfas.json"
    save_dfas([ends_with_a_dfa, contains_a_dfa], str(path))

    with pytest.raises(ValueError, match="exactly one"):
        load_dfa(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_dfas(str(tmp_path / "nope.json"))
