# ============================================================================
# FILE: tests/unit/test_alias_loader.py
# ============================================================================
"""
Unit tests for the drug alias loader
"""

import pytest

from src.critical_medications.registry.alias_loader import (
    AliasEntry,
    load_aliases,
    parse_aliases,
)
from src.utils.exceptions import LoadError


def test_load_aliases_preserves_order(aliases_file):
    """Entries come back in dataset order with aliases intact"""
    entries = load_aliases(aliases_file)

    assert len(entries) == 9
    assert entries[0].name == "Amoxicillin"
    assert entries[0].aliases == ["Amoxil"]
    assert entries[5].aliases == ["Clexane", "Inhixa"]


def test_canonical_is_lower_case():
    entry = AliasEntry(name="Acetylsalicylic Acid", aliases=["Aspirin"])
    assert entry.canonical == "acetylsalicylic acid"


def test_empty_aliases_allowed(write_json_file):
    path = write_json_file([{"name": "Prednisolone", "aliases": []}])
    entries = load_aliases(path)
    assert entries[0].aliases == []


def test_missing_file_raises_load_error(tmp_path):
    """Missing file is reported with its path"""
    missing = tmp_path / "nope.json"

    with pytest.raises(LoadError) as exc_info:
        load_aliases(missing)

    assert exc_info.value.path == missing
    assert "not found" in str(exc_info.value)


def test_invalid_json_raises_load_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{\"name\": ", encoding="utf-8")

    with pytest.raises(LoadError) as exc_info:
        load_aliases(path)

    assert exc_info.value.path == path


@pytest.mark.parametrize("data", [
    {"name": "Warfarin", "aliases": []},
    [{"name": "Warfarin"}],
    [{"aliases": ["Coumadin"]}],
    [{"name": "", "aliases": []}],
    [{"name": "Warfarin", "aliases": "Coumadin"}],
    [{"name": 42, "aliases": []}],
])
def test_malformed_documents_rejected(write_json_file, data):
    """Anything other than an array of {name, aliases} is a LoadError"""
    path = write_json_file(data)

    with pytest.raises(LoadError):
        load_aliases(path)


def test_parse_aliases_accepts_decoded_data(sample_alias_data):
    entries = parse_aliases(sample_alias_data)
    assert [e.name for e in entries][:2] == ["Amoxicillin", "Ciprofloxacin"]


def test_load_accepts_string_path(aliases_file):
    assert len(load_aliases(str(aliases_file))) == 9
