# ============================================================================
# src/critical_medications/registry/lookup.py
# ============================================================================
"""
Critical Medication Lookup

Answers "is this a critical drug" for order validation. The generated
registry is read lazily on the first query and kept for the lifetime of the
lookup object; regenerating the file on disk has no effect until
``load_critical()`` or ``reset()`` is called (or the process restarts).

Load failures never reach the caller: a missing or corrupt registry is
logged and treated as empty, so every lookup answers "not critical".

Example:
    lookup = CriticalMedicationLookup(Path("data/critical_medications.json"))
    lookup.is_critical_drug("Warfarin")      # True
    lookup.categories_for("fluconazole")     # ["antifungals"]
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Union

from src.utils.file_utils import read_json
from ..config import registry_settings

logger = logging.getLogger(__name__)

# Older registries nested the whole mapping under this key
LEGACY_ROOT_KEY = "critical"


def parse_registry(data: Any) -> Dict[str, FrozenSet[str]]:
    """
    Convert a decoded registry document into lower-cased name sets.

    Accepts the flat ``{category: [names]}`` shape and the legacy
    ``{"critical": {category: [names]}}`` shape.

    Raises:
        ValueError: If the document has neither shape
    """
    if isinstance(data, dict) and data.get(LEGACY_ROOT_KEY):
        data = data[LEGACY_ROOT_KEY]

    if not isinstance(data, dict):
        raise ValueError(f"Registry root must be an object, got {type(data).__name__}")

    sets = {}
    for category, names in data.items():
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError(f"Category '{category}' must be a list of strings")
        sets[category] = frozenset(n.lower() for n in names)
    return sets


class CriticalMedicationLookup:
    """
    Lazily loaded, process-lifetime cache of the critical medication registry.

    Thread-safe: concurrent first callers trigger exactly one load.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._sets: Optional[Dict[str, FrozenSet[str]]] = None
        self._lock = threading.Lock()
        self.load_count = 0

    @property
    def loaded(self) -> bool:
        return self._sets is not None

    def _load_locked(self) -> None:
        self.load_count += 1
        try:
            self._sets = parse_registry(read_json(self.path))
            logger.debug(f"Loaded {len(self._sets)} critical medication categories from {self.path}")
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
            logger.error(f"Failed to load critical medication registry {self.path}: {e}")
            self._sets = {}

    def load_critical(self) -> None:
        """Read (or re-read) the registry from disk."""
        with self._lock:
            self._load_locked()

    def _ensure_loaded(self) -> Dict[str, FrozenSet[str]]:
        sets = self._sets
        if sets is None:
            with self._lock:
                if self._sets is None:
                    self._load_locked()
                sets = self._sets
        return sets

    def reset(self) -> None:
        """Drop the cached registry; the next query reloads it."""
        with self._lock:
            self._sets = None

    def is_critical_drug(self, drug_name: Optional[str]) -> bool:
        """
        Check whether a drug name is on the critical list.

        Args:
            drug_name: Canonical drug name, case-insensitive

        Returns:
            True if the name appears in any category
        """
        if not drug_name:
            return False
        name_lc = drug_name.lower()
        return any(name_lc in names for names in self._ensure_loaded().values())

    def categories_for(self, drug_name: Optional[str]) -> List[str]:
        """Categories containing drug_name, in registry order"""
        if not drug_name:
            return []
        name_lc = drug_name.lower()
        return [cat for cat, names in self._ensure_loaded().items() if name_lc in names]

    def sort_critical_first(
        self,
        orders: Iterable[Any],
        name_key: Callable[[Any], Optional[str]],
    ) -> List[Any]:
        """
        Stable sort placing orders for critical medications first.

        Args:
            orders: Orders in their current display order
            name_key: Extracts the medication name from an order

        Returns:
            New list; relative order within each group is preserved
        """
        return sorted(orders, key=lambda order: not self.is_critical_drug(name_key(order)))


# =============================================================================
# DEFAULT INSTANCE
# =============================================================================

_default_lookup: Optional[CriticalMedicationLookup] = None
_default_lock = threading.Lock()


def get_critical_lookup() -> CriticalMedicationLookup:
    """Get or create the lookup bound to the configured registry path."""
    global _default_lookup

    if _default_lookup is None:
        with _default_lock:
            if _default_lookup is None:
                _default_lookup = CriticalMedicationLookup(registry_settings.output_path)

    return _default_lookup


def set_critical_lookup(lookup: Optional[CriticalMedicationLookup]) -> None:
    """Install a host-constructed lookup as the default (None clears it)."""
    global _default_lookup

    with _default_lock:
        _default_lookup = lookup


def is_critical_drug(drug_name: Optional[str]) -> bool:
    return get_critical_lookup().is_critical_drug(drug_name)


def load_critical() -> None:
    get_critical_lookup().load_critical()
