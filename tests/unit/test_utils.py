"""
Tests for the `utils.py` module.
"""

from types import SimpleNamespace

import pytest

from schoolbook.utils import load_yaml, merge_dicts, nested_dict_to_namespaces


def test_load_yaml(tmp_path):
    """
    Test reading a YAML file into a dictionary.

    Args:
        tmp_path: A built-in fixture from pytest providing a temporary directory.
    """
    yaml_file = tmp_path / "app.yaml"
    yaml_file.write_text("database:\n  path: school.db\n  journal_mode: WAL\n")

    assert load_yaml(str(yaml_file)) == {"database": {"path": "school.db", "journal_mode": "WAL"}}


def test_merge_dicts():
    """Test that nested dictionaries are merged key by key without changing the inputs."""
    base = {"database": {"path": "a.db", "journal_mode": "WAL"}, "logging": {"level": "INFO"}}
    overrides = {"database": {"path": "b.db"}, "logging": "off"}

    merged = merge_dicts(base, overrides)

    assert merged == {"database": {"path": "b.db", "journal_mode": "WAL"}, "logging": "off"}
    assert base["database"]["path"] == "a.db"
    assert merge_dicts(base, None) == base


def test_nested_dict_to_namespaces():
    """Test that nested dictionaries become nested namespaces."""
    result = nested_dict_to_namespaces({"database": {"path": "a.db"}, "level": "INFO"})

    assert isinstance(result.database, SimpleNamespace)
    assert result.database.path == "a.db"
    assert result.level == "INFO"

    with pytest.raises(TypeError):
        nested_dict_to_namespaces(["not", "a", "dict"])
