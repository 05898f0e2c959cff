# ============================================================================
# src/critical_medications/constants/seed_lists.py
# ============================================================================
"""
Explicit Critical Medication Seeds
- Generic and brand names per category (lower case)
- Each seed is resolved to its canonical name through the alias dataset;
  seeds absent from the dataset are kept as written
"""

from .categories import Category

CATEGORY_SEEDS = {
    Category.ANTICOAGULANTS: (
        "enoxaparin", "clexane", "inhixa", "tinzaparin", "innohep",
        "dalteparin", "fragmin", "apixaban", "eliquis", "rivaroxaban",
        "xarelto", "dabigatran", "pradaxa", "edoxaban", "lixiana",
        "heparin", "warfarin", "coumadin", "acenocoumarol", "sinthrome",
    ),
    Category.PARKINSONS: (
        "co-beneldopa", "madopar", "co-careldopa", "sinemet", "rotigotine",
        "stalevo", "sastravi", "pramipexole", "ropinirole",
    ),
    Category.ANTIEPILEPTICS: (
        "sodium valproate", "epilim", "phenytoin", "epanutin",
        "levetiracetam", "keppra", "lamotrigine", "lamictal",
        "carbamazepine", "tegretol", "topiramate", "topamax",
    ),
    Category.ANTIPSYCHOTICS: (
        "clozapine", "clozaril", "lithium", "priadel", "camcolit",
        "liskonum", "quetiapine", "sorequel", "olanzapine", "zyprexa",
        "risperidone", "risperdal",
    ),
    Category.INSULINS: (
        "humulin i", "insulatard", "insuman basal", "actrapid", "humulin s",
        "insuman rapid", "humulin m3", "insuman comb 15", "insuman comb 25",
        "lantus", "levemir", "tresiba", "toujeo", "abasaglar", "detemir",
        "novorapid", "humalog", "apidra", "fiasp", "novomix 30",
        "humalog mix 25", "humalog mix 50",
    ),
    Category.IMMUNOSUPPRESSANTS: (
        "tacrolimus", "prograf", "advagraf", "mycophenolic acid", "ceptava",
        "myfortic", "mycophenolate mofetil", "cellcept", "mycofenax",
        "cyclosporin", "neoral", "azathioprine", "azasan",
    ),
    Category.CORTICOSTEROIDS: (
        "prednisolone", "deltasone", "hydrocortisone", "colifoam",
        "budesonide", "budenofalk", "endocort", "pulmicort",
    ),
    # No generic opioid list yet; pattern rules do not cover opioids either
    Category.OPIOIDS: (),
    Category.SUBSTANCE_MISUSE: (
        "methadone", "buprenorphine + naloxone", "suboxone", "buprenorphine",
        "subutex",
    ),
}
