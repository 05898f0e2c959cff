# ============================================================================
# src/critical_medications/constants/drug_patterns.py
# ============================================================================
"""
Drug Class Name Patterns
- Suffix/substring rules recognising antimicrobial classes
- Applied to the lower-cased canonical drug name only, never to aliases
"""

import re

from .categories import Category

ANTIBIOTIC_PATTERNS = tuple(re.compile(p) for p in (
    r"cillin$", r"cycline$", r"mycin$", r"floxacin$", r"cef", r"ceph",
    r"penem$", r"thromycin$", r"cillin ", r"pime$", r"bactam$", r"oxacin$",
))

ANTIFUNGAL_PATTERNS = tuple(re.compile(p) for p in (
    r"azole$", r"fungin$", r"terbinafine", r"amphotericin",
))

ANTIVIRAL_PATTERNS = tuple(re.compile(p) for p in (
    r"vir$", r"vir ", r"avir$", r"navir$", r"vudine$", r"covir$",
))

# Evaluated in this order; a name may match several groups
PATTERN_RULES = (
    (Category.ANTIBIOTICS, ANTIBIOTIC_PATTERNS),
    (Category.ANTIFUNGALS, ANTIFUNGAL_PATTERNS),
    (Category.ANTIVIRALS, ANTIVIRAL_PATTERNS),
)


def matches_any(name: str, patterns) -> bool:
    """True if any pattern matches anywhere in the (lower-cased) name."""
    return any(p.search(name) for p in patterns)
