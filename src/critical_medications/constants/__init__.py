# ============================================================================
# src/critical_medications/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .categories import Category, CATEGORY_ORDER
from .seed_lists import CATEGORY_SEEDS
from .drug_patterns import (
    ANTIBIOTIC_PATTERNS,
    ANTIFUNGAL_PATTERNS,
    ANTIVIRAL_PATTERNS,
    PATTERN_RULES,
    matches_any,
)
