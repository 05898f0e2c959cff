# ============================================================================
# src/critical_medications/registry/classifier.py
# ============================================================================
"""
Critical Medication Classifier

Derives the categorized critical medication registry from the drug alias
dataset:

1. Explicit seed names per category are resolved to canonical names
   through the alias dataset (unknown seeds pass through unchanged).
2. Every canonical name is tested against the antibiotic, antifungal and
   antiviral name patterns.

The transform is pure: the same alias data and tables always yield the same
registry. Names are stored lower-cased.
"""

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..constants import CATEGORY_ORDER, CATEGORY_SEEDS, PATTERN_RULES, Category, matches_any
from .alias_loader import AliasEntry

logger = logging.getLogger(__name__)


def _fold_accents(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def sorted_names(names: Iterable[str]) -> List[str]:
    """
    Deterministic ordering of drug names, independent of the host locale.

    Names are compared with accents stripped and case folded, so "éfavirenz"
    sorts next to "efavirenz" rather than after "z". Ties fall back to the
    case-folded name and then the raw string.
    """
    return sorted(names, key=lambda n: (_fold_accents(n), n.casefold(), n))


class AliasResolver:
    """
    Maps any drug name or alias (case-insensitive) to its canonical name.

    When several entries claim the same name or alias, the entry appearing
    first in the dataset wins.
    """

    def __init__(self, entries: Sequence[AliasEntry]):
        self._index: Dict[str, str] = {}
        for entry in entries:
            canonical = entry.canonical
            for term in (entry.name, *entry.aliases):
                self._index.setdefault(term.lower(), canonical)

    def __len__(self) -> int:
        return len(self._index)

    def lookup(self, term: str) -> Optional[str]:
        """Canonical name for term, or None if the dataset does not know it"""
        return self._index.get(term.lower())

    def resolve(self, term: str) -> str:
        """Canonical name for term, falling back to the lower-cased term itself"""
        canonical = self.lookup(term)
        return canonical if canonical is not None else term.lower()


@dataclass
class CriticalRegistry:
    """
    Category -> set of lower-cased canonical drug names.

    All categories are always present, possibly empty.
    """
    categories: Dict[Category, Set[str]] = field(
        default_factory=lambda: {cat: set() for cat in CATEGORY_ORDER}
    )

    def add(self, category: Category, name: str) -> None:
        self.categories[Category(category)].add(name.lower())

    def __contains__(self, name: str) -> bool:
        name_lc = name.lower()
        return any(name_lc in names for names in self.categories.values())

    def categories_for(self, name: str) -> List[str]:
        """Categories (in registry order) that contain name"""
        name_lc = name.lower()
        return [cat.value for cat in CATEGORY_ORDER if name_lc in self.categories[cat]]

    @property
    def total_entries(self) -> int:
        return sum(len(names) for names in self.categories.values())

    @property
    def category_count(self) -> int:
        return len(self.categories)

    def to_dict(self) -> Dict[str, List[str]]:
        """Serializable form: every category in fixed order, names sorted"""
        return {cat.value: sorted_names(self.categories[cat]) for cat in CATEGORY_ORDER}


def classify(
    entries: Sequence[AliasEntry],
    seeds: Optional[Mapping[Category, Iterable[str]]] = None,
    patterns: Optional[Sequence[Tuple[Category, Sequence]]] = None,
    extra: Optional[Iterable[Tuple[Category, str]]] = None,
) -> CriticalRegistry:
    """
    Build the critical medication registry.

    Args:
        entries: Alias dataset
        seeds: Explicit names per category (defaults to CATEGORY_SEEDS)
        patterns: (category, compiled patterns) pairs (defaults to PATTERN_RULES)
        extra: Supplementary (category, name) pairs, resolved like seeds

    Returns:
        Fully built CriticalRegistry
    """
    seeds = CATEGORY_SEEDS if seeds is None else seeds
    patterns = PATTERN_RULES if patterns is None else patterns

    resolver = AliasResolver(entries)
    registry = CriticalRegistry()

    for category, names in seeds.items():
        for name in names:
            registry.add(category, resolver.resolve(name))

    for category, name in extra or ():
        registry.add(category, resolver.resolve(name))

    # Only canonical names are pattern-matched, never aliases
    for entry in entries:
        canonical = entry.canonical
        for category, rules in patterns:
            if matches_any(canonical, rules):
                registry.add(category, canonical)

    logger.debug(
        f"Classified {len(entries)} alias entries into "
        f"{registry.total_entries} category memberships"
    )
    return registry
