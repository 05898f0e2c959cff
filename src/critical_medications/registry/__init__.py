# ============================================================================
# src/critical_medications/registry/__init__.py
# ============================================================================
"""
Critical medication registry: build pipeline and runtime lookup.
"""

from .alias_loader import AliasEntry, load_aliases, parse_aliases
from .classifier import AliasResolver, CriticalRegistry, classify, sorted_names
from .writer import WriteSummary, write_registry
from .builder import ExtraSeed, build_critical_list, parse_extra
from .lookup import (
    CriticalMedicationLookup,
    get_critical_lookup,
    set_critical_lookup,
    is_critical_drug,
    load_critical,
    parse_registry,
)

__all__ = [
    'AliasEntry',
    'load_aliases',
    'parse_aliases',
    'AliasResolver',
    'CriticalRegistry',
    'classify',
    'sorted_names',
    'WriteSummary',
    'write_registry',
    'ExtraSeed',
    'build_critical_list',
    'parse_extra',
    'CriticalMedicationLookup',
    'get_critical_lookup',
    'set_critical_lookup',
    'is_critical_drug',
    'load_critical',
    'parse_registry',
]
