"""
Canonical ingredient table and alias map.
Mapped against FSSAI Food Safety and Standards (Food Products Standards and
Food Additives) Regulations, 2011.

Keys of both tables are already normalized (see wellness.text.normalize_text).
Table order matters: the resolver tries keys in the order listed here.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from wellness.knowledge_base.models import IngredientKind, IngredientStatus, MasterIngredient


def _entry(
    status: str,
    kind: str,
    penalty: int,
    clause: str,
    functional_class: Optional[str] = None,
    ins: Optional[str] = None,
) -> MasterIngredient:
    return MasterIngredient(
        status=IngredientStatus(status),
        kind=IngredientKind(kind),
        penalty_score=penalty,
        clause=clause,
        functional_class=functional_class,
        ins=ins,
    )


# ─── SYNONYMS ───
# Variations mapped to the canonical key in FSSAI_MASTER_DATA, so that
# "Cane Sugar" on one extraction and "Sugar" on the next score the same.

_SYNONYMS: Dict[str, str] = {
    "cane sugar": "sugar",
    "refined sugar": "sugar",
    "granulated sugar": "sugar",
    "white sugar": "sugar",
    "sucrose": "sugar",
    "corn syrup solids": "liquid glucose",
    "glucose syrup": "liquid glucose",
    "hfcs": "high fructose corn syrup",
    "invert syrup": "invert sugar",
    # Indian labels rarely specify; assume the worst unless it says oil
    "vegetable fat": "hydrogenated vegetable oil",
    "partially hydrogenated oil": "hydrogenated vegetable oil",
    "shortening": "hydrogenated vegetable oil",
    "margarine": "hydrogenated vegetable oil",
    "dalda": "vanaspati",
    "palm kernel oil": "palm oil",
    "palmolein oil": "palmolein",
    "ins 621": "monosodium glutamate",
    "e621": "monosodium glutamate",
    "ajitop": "monosodium glutamate",
    "flavour enhancer 621": "monosodium glutamate",
    "ins 211": "sodium benzoate",
    "e211": "sodium benzoate",
    "ins 202": "potassium sorbate",
    "e202": "potassium sorbate",
    "ins 102": "tartrazine",
    "e102": "tartrazine",
    "yellow 5": "tartrazine",
    "ins 110": "sunset yellow",
    "e110": "sunset yellow",
    "yellow 6": "sunset yellow",
    "ins 951": "aspartame",
    "e951": "aspartame",
    "ins 955": "sucralose",
    "e955": "sucralose",
    "white flour": "maida",
    "refined wheat flour": "maida",
    "all purpose flour": "maida",
}


# ─── MASTER DATA ───

_MASTER_DATA: Dict[str, MasterIngredient] = {
    # Sweeteners & sugars
    "sugar": _entry("permitted", "ingredient", 2, "FSSAI 2.1 (Sweetener)", "Added Sugar"),
    "liquid glucose": _entry("permitted", "ingredient", 4, "FSSAI 2.1 (Sweetener)", "Added Sugar"),
    "invert sugar": _entry("permitted", "ingredient", 4, "FSSAI 2.1 (Sweetener)", "Added Sugar"),
    "maltodextrin": _entry("permitted", "ingredient", 3, "General Standard", "Thickener/Filler"),
    "high fructose corn syrup": _entry("permitted", "ingredient", 8, "FSSAI 2.1", "Added Sugar"),
    "aspartame": _entry(
        "restricted", "additive", 8, "FSSAI 2.4.5 (24) - Warning Required", "Artificial Sweetener", "951"
    ),
    "sucralose": _entry("restricted", "additive", 5, "FSSAI 2.4.5 (43)", "Artificial Sweetener", "955"),
    "acesulfame potassium": _entry(
        "restricted", "additive", 6, "FSSAI 2.4.5 (28)", "Artificial Sweetener", "950"
    ),

    # Fats & oils
    "palm oil": _entry("permitted", "ingredient", 6, "Labelling Regs 2020", "Saturated Fat Source"),
    "palmolein": _entry("permitted", "ingredient", 6, "Labelling Regs 2020", "Saturated Fat Source"),
    "hydrogenated vegetable oil": _entry(
        "restricted", "ingredient", 15, "FSSAI Trans Fat Regs (Limit <2%)", "Trans Fat Source"
    ),
    "vanaspati": _entry("restricted", "ingredient", 15, "FSSAI Trans Fat Regs", "Trans Fat Source"),
    "interesterified vegetable fat": _entry("permitted", "ingredient", 5, "General Standard", "Modified Fat"),

    # Preservatives (class II)
    "sodium benzoate": _entry(
        "restricted", "additive", 5, "FSSAI 2.3.2 (Class II Preservative)", "Preservative", "211"
    ),
    "potassium sorbate": _entry(
        "restricted", "additive", 4, "FSSAI 2.3.2 (Class II Preservative)", "Preservative", "202"
    ),
    "sulphur dioxide": _entry("restricted", "additive", 6, "FSSAI 2.3.2 (Allergen)", "Preservative", "220"),

    # Flavour enhancers
    "monosodium glutamate": _entry(
        "warning", "additive", 8, "FSSAI 2.2.1:1 (Msg Declaration)", "Flavour Enhancer", "621"
    ),
    "ins 627": _entry("permitted", "additive", 3, "GMP", "Flavour Enhancer"),
    "ins 631": _entry("permitted", "additive", 3, "GMP", "Flavour Enhancer"),

    # Synthetic colours
    "tartrazine": _entry("restricted", "additive", 10, "FSSAI 2.3.1 (Synthetic Colour)", "Colour", "102"),
    "sunset yellow": _entry("restricted", "additive", 10, "FSSAI 2.3.1 (Synthetic Colour)", "Colour", "110"),
    "ponceau 4r": _entry("restricted", "additive", 10, "FSSAI 2.3.1 (Synthetic Colour)", "Colour", "124"),
    "allura red": _entry("restricted", "additive", 10, "FSSAI 2.3.1 (Synthetic Colour)", "Colour", "129"),

    # Others
    "caffeine": _entry("restricted", "ingredient", 8, "FSSAI 2.4.5 (34) - Limit 320mg/L", "Stimulant"),
    "potassium bromate": _entry(
        "prohibited", "additive", 50, "FSSAI Notification 2016 (BANNED)", "Improver", "924a"
    ),
    "maida": _entry("permitted", "ingredient", 5, "General Standard", "Refined Carbohydrate"),
}


INGREDIENT_SYNONYMS: Mapping[str, str] = MappingProxyType(_SYNONYMS)
FSSAI_MASTER_DATA: Mapping[str, MasterIngredient] = MappingProxyType(_MASTER_DATA)


def get_entry(canonical_key: str) -> MasterIngredient:
    """Look up a canonical key. Raises KeyError for keys outside the table."""
    return FSSAI_MASTER_DATA[canonical_key]
