"""Tests for bindings import/export"""

import json

import pytest

from inputio.errors import ValidationError
from inputio.input.input_map import MappingTable
from inputio.input.key_bindings import (
    export_bindings,
    import_bindings,
    load_bindings,
    parse_bindings,
    save_bindings,
)


def make_table():
    table = MappingTable()
    table.add({"action": "up", "keys": ["w", "up"]},
              {"action": "fire", "keys": ["space"], "buttons": ["left"]})
    return table


def test_export_bindings():
    """Export lists canonical names, sorted by action"""
    data = export_bindings(make_table())
    assert data == {
        "mappings": [
            {"action": "fire", "keys": ["spacebar"], "buttons": ["button1"]},
            {"action": "up", "keys": ["up", "w"], "buttons": []},
        ]
    }


def test_import_replaces_by_default():
    """import_bindings overwrites existing mappings"""
    table = make_table()
    import_bindings(table, {"mappings": [{"action": "up", "keys": ["k"]}]})

    assert table.get_mapping("up").keys == ["k"]
    assert table.has("fire")


def test_import_can_append():
    """replace=False merges with existing mappings"""
    table = make_table()
    import_bindings(table, {"mappings": [{"action": "up", "keys": ["k"]}]}, replace=False)

    assert table.get_mapping("up").keys == ["up", "k", "w"]


def test_save_and_load(tmp_path):
    """Bindings survive a trip through a JSON file"""
    path = tmp_path / "keybindings.json"
    original = make_table()
    save_bindings(original, path)

    restored = MappingTable()
    restored.set(*load_bindings(path))

    assert export_bindings(restored) == export_bindings(original)


def test_load_missing_file(tmp_path):
    """A missing file raises FileNotFoundError"""
    with pytest.raises(FileNotFoundError):
        load_bindings(tmp_path / "missing.json")


def test_load_malformed_file(tmp_path):
    """Invalid JSON raises ValidationError"""
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ValidationError):
        load_bindings(path)

    path.write_text(json.dumps({"bindings": []}))
    with pytest.raises(ValidationError):
        load_bindings(path)


def test_parse_rejects_bad_entries():
    """Entries must be objects"""
    with pytest.raises(ValidationError):
        parse_bindings({"mappings": ["up"]})
    with pytest.raises(ValidationError):
        parse_bindings([])


def test_import_validation_is_atomic():
    """An invalid entry leaves the table unchanged"""
    table = make_table()
    with pytest.raises(ValidationError):
        import_bindings(table, {"mappings": [
            {"action": "up", "keys": ["k"]},
            {"action": "down", "keys": ["nope"]},
        ]})
    assert table.get_mapping("up").keys == ["up", "w"]
