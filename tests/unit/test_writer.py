# ============================================================================
# FILE: tests/unit/test_writer.py
# ============================================================================
"""
Unit tests for the registry writer
"""

import json
import os
import stat
import pytest

from src.critical_medications.constants import Category
from src.critical_medications.registry.classifier import CriticalRegistry, classify
from src.critical_medications.registry.writer import write_registry
from src.utils.exceptions import WriteError


@pytest.fixture
def small_registry():
    registry = CriticalRegistry()
    registry.add(Category.ANTIBIOTICS, "amoxicillin")
    registry.add(Category.ANTICOAGULANTS, "warfarin")
    registry.add(Category.ANTICOAGULANTS, "enoxaparin")
    return registry


def test_write_flat_category_map(tmp_path, small_registry):
    """Artifact is a flat {category: sorted names} object with all categories"""
    output = tmp_path / "critical_medications.json"

    summary = write_registry(small_registry, output)
    data = json.loads(output.read_text(encoding="utf-8"))

    assert list(data) == [c.value for c in Category]
    assert data["anticoagulants"] == ["enoxaparin", "warfarin"]
    assert data["antibiotics"] == ["amoxicillin"]
    assert summary.total_entries == 3
    assert summary.category_count == 12
    assert summary.path == output


def test_summary_message(tmp_path, small_registry):
    summary = write_registry(small_registry, tmp_path / "out.json")
    assert summary.message().startswith(
        "Wrote 3 canonical critical medication entries across 12 categories to "
    )


def test_pretty_printed(tmp_path, small_registry):
    output = tmp_path / "out.json"
    write_registry(small_registry, output)

    text = output.read_text(encoding="utf-8")
    assert '\n  "antibiotics": [\n    "amoxicillin"\n  ],' in text
    assert text.endswith("}\n")


def test_overwrites_previous_artifact(tmp_path, small_registry):
    output = tmp_path / "out.json"
    output.write_text('{"stale": true}', encoding="utf-8")

    write_registry(small_registry, output)

    assert "stale" not in json.loads(output.read_text(encoding="utf-8"))


def test_identical_input_gives_identical_bytes(tmp_path, sample_entries):
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"

    write_registry(classify(sample_entries), first)
    write_registry(classify(sample_entries), second)

    assert first.read_bytes() == second.read_bytes()


def test_no_temp_files_left_behind(tmp_path, small_registry):
    write_registry(small_registry, tmp_path / "out.json")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.json"]


def test_missing_directory_raises_write_error(tmp_path, small_registry):
    output = tmp_path / "missing" / "out.json"

    with pytest.raises(WriteError) as exc_info:
        write_registry(small_registry, output)

    assert exc_info.value.path == output
    assert not output.exists()


def test_failed_rename_keeps_old_artifact(tmp_path, small_registry, monkeypatch):
    """A failure while replacing leaves the previous file untouched"""
    output = tmp_path / "out.json"
    output.write_text('{"previous": []}', encoding="utf-8")

    def failing_replace(src, dst):
        raise PermissionError("read-only file system")

    monkeypatch.setattr("src.utils.file_utils.os.replace", failing_replace)

    with pytest.raises(WriteError):
        write_registry(small_registry, output)

    assert output.read_text(encoding="utf-8") == '{"previous": []}'
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.json"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
@pytest.mark.parametrize("mode", [0o644, 0o640])
def test_rewrite_keeps_file_mode(tmp_path, small_registry, mode):
    """Regenerating the registry leaves its permissions as they were"""
    output = tmp_path / "critical_medications.json"
    output.write_text("{}", encoding="utf-8")
    os.chmod(output, mode)

    write_registry(small_registry, output)

    assert stat.S_IMODE(output.stat().st_mode) == mode


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_new_file_follows_umask(tmp_path, small_registry):
    output = tmp_path / "critical_medications.json"
    old_mask = os.umask(0o022)
    try:
        write_registry(small_registry, output)
    finally:
        os.umask(old_mask)

    assert stat.S_IMODE(output.stat().st_mode) == 0o644
