"""
Test suite for the surname override table and its file loader.
"""

import sys
import logging
from pathlib import Path

import pytest

# Add the parent directory to path to import nameparse
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparse.surname_overrides import OVERRIDE_FILE_ENV_VAR, SurnameOverrideTable, default_override_path

OVERRIDE_LINES = [
    "# preferred surname spellings",
    "duPont",
    "",
    "   Macquarie   ",
    "FitzGerald",
    "DuPont",
]


def test_from_lines():
    table = SurnameOverrideTable.from_lines(OVERRIDE_LINES)

    assert len(table) == 3
    assert table.lookup("MACQUARIE") == "Macquarie"
    assert table.lookup("fitzgerald") == "FitzGerald"
    # Later duplicates replace earlier ones
    assert table.lookup("dupont") == "DuPont"
    assert table.lookup("smith") is None
    assert sorted(table) == ["DuPont", "FitzGerald", "Macquarie"]


def test_membership_is_case_insensitive():
    table = SurnameOverrideTable.from_lines(OVERRIDE_LINES)
    assert "MACQUARIE" in table
    assert "Macquarie" in table
    assert "Smith" not in table
    assert 42 not in table


def test_table_is_read_only():
    table = SurnameOverrideTable.from_lines(OVERRIDE_LINES)
    with pytest.raises(AttributeError):
        table._entries = {}
    with pytest.raises(TypeError):
        table.as_mapping()["smith"] = "SMITH"


def test_from_file(tmp_path, caplog):
    path = tmp_path / "surnames.txt"
    path.write_text("\n".join(OVERRIDE_LINES) + "\n", encoding="utf-8")

    with caplog.at_level(logging.INFO):
        table = SurnameOverrideTable.from_file(path)

    assert len(table) == 3
    assert table.source == str(path)
    assert "Loaded 3 surname overrides" in caplog.text


def test_missing_file_gives_empty_table(tmp_path, caplog):
    with caplog.at_level(logging.INFO):
        table = SurnameOverrideTable.from_file(tmp_path / "missing.txt")
    assert len(table) == 0
    assert "No surname override file" in caplog.text


def test_unreadable_file_gives_empty_table(tmp_path, caplog):
    path = tmp_path / "surnames.txt"
    path.write_bytes(b"duPont\n\xff\xfe\xfa\n")

    with caplog.at_level(logging.WARNING):
        table = SurnameOverrideTable.from_file(path)

    assert len(table) == 0
    assert "Could not read surname override file" in caplog.text


def test_load_default_reads_environment_path(tmp_path, monkeypatch):
    path = tmp_path / "my_surnames.txt"
    path.write_text("Macquarie\n", encoding="utf-8")
    monkeypatch.setenv(OVERRIDE_FILE_ENV_VAR, str(path))

    assert default_override_path() == path
    table = SurnameOverrideTable.load_default()
    assert table.lookup("macquarie") == "Macquarie"


def test_load_default_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv(OVERRIDE_FILE_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_override_path() == tmp_path / ".config" / "nameparse" / "surnames.txt"
    assert len(SurnameOverrideTable.load_default()) == 0


def test_empty_table():
    table = SurnameOverrideTable.empty()
    assert len(table) == 0
    assert table.lookup("smith") is None
    assert table.source is None
