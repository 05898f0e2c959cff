# ============================================================================
# src/critical_medications/constants/categories.py
# ============================================================================
"""
Critical Medication Categories
- Closed set of medication classes flagged for order-safety checks
- Declaration order is the key order of the persisted registry
"""

from enum import Enum

class Category(str, Enum):
    """
    Critical medication classes. A drug may belong to several.
    """
    ANTIBIOTICS = "antibiotics"
    ANTIFUNGALS = "antifungals"
    ANTIVIRALS = "antivirals"
    ANTICOAGULANTS = "anticoagulants"
    PARKINSONS = "parkinsons"
    ANTIEPILEPTICS = "antiepileptics"
    ANTIPSYCHOTICS = "antipsychotics"
    INSULINS = "insulins"
    IMMUNOSUPPRESSANTS = "immunosuppressants"
    CORTICOSTEROIDS = "corticosteroids"
    OPIOIDS = "opioids"
    SUBSTANCE_MISUSE = "substance_misuse"

CATEGORY_ORDER = tuple(Category)
