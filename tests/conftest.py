# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import json
import logging
import pytest

from src.critical_medications.registry.alias_loader import AliasEntry
from src.critical_medications.registry.lookup import (
    CriticalMedicationLookup,
    set_critical_lookup,
)


@pytest.fixture
def sample_alias_data():
    """Small alias dataset covering every rule group"""
    return [
        {"name": "Amoxicillin", "aliases": ["Amoxil"]},
        {"name": "Ciprofloxacin", "aliases": ["Ciproxin"]},
        {"name": "Ceftriaxone", "aliases": ["Rocephin"]},
        {"name": "Fluconazole", "aliases": ["Diflucan"]},
        {"name": "Oseltamivir", "aliases": ["Tamiflu"]},
        {"name": "Enoxaparin", "aliases": ["Clexane", "Inhixa"]},
        {"name": "Acetylsalicylic Acid", "aliases": ["Aspirin"]},
        {"name": "Warfarin", "aliases": ["Coumadin"]},
        {"name": "Paracetamol", "aliases": ["Panadol"]},
    ]


@pytest.fixture
def sample_entries(sample_alias_data):
    """Sample alias data as AliasEntry models"""
    return [AliasEntry(**item) for item in sample_alias_data]


@pytest.fixture
def write_json_file(tmp_path):
    """Factory writing a JSON document to a file under tmp_path"""
    def _write(data, name="data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def aliases_file(write_json_file, sample_alias_data):
    """drug_aliases.json built from sample_alias_data"""
    return write_json_file(sample_alias_data, "drug_aliases.json")


@pytest.fixture
def registry_file(write_json_file):
    """Small persisted registry in the current flat format"""
    return write_json_file(
        {
            "antibiotics": ["amoxicillin"],
            "antifungals": ["fluconazole"],
            "anticoagulants": ["enoxaparin", "warfarin"],
            "opioids": [],
        },
        "critical_medications.json",
    )


@pytest.fixture
def lookup(registry_file):
    """Fresh lookup bound to registry_file"""
    return CriticalMedicationLookup(registry_file)


@pytest.fixture(autouse=True)
def reset_default_lookup():
    """Clear the process-wide default lookup after each test"""
    yield
    set_critical_lookup(None)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() calls made by the command-line entry point"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
