"""
Flat FSSAI rule table for annotation-only lookups.
Each rule lists the textual variants that identify it; the first rule whose
term matches an ingredient wins.
"""
from typing import Tuple

from wellness.knowledge_base.models import InsightStatus, LookupRule


FSSAI_DATABASE: Tuple[LookupRule, ...] = (
    LookupRule(
        id="MSG",
        match_terms=("monosodium glutamate", "msg", "e621", "flavour enhancer 621"),
        status=InsightStatus.WARNING,
        clause="FSSAI Regulation 2.2.1:1",
        details=(
            "Shall not be added to food for infants below 12 months. "
            "Must carry declaration 'CONTAINS MONOSODIUM GLUTAMATE'."
        ),
    ),
    LookupRule(
        id="Aspartame",
        match_terms=("aspartame", "e951", "methyl ester"),
        status=InsightStatus.RESTRICTED,
        clause="FSSAI Regulation 2.4.5 (24)",
        details=(
            "Not recommended for children. Not for Phenylketonurics. "
            "Max limit varies by category (e.g., 700ppm in carbonated water)."
        ),
    ),
    LookupRule(
        id="Tartrazine",
        match_terms=("tartrazine", "e102", "yellow 5", "fd&c yellow 5"),
        status=InsightStatus.RESTRICTED,
        clause="FSSAI Regulation 2.3.1",
        details=(
            "Synthetic food colour. Permitted in specific categories with strict limits "
            "(usually 100ppm). Must be declared."
        ),
    ),
    LookupRule(
        id="Potassium Bromate",
        match_terms=("potassium bromate", "e924a", "bromate"),
        status=InsightStatus.BANNED,
        clause="FSSAI Notification 2016",
        details="Prohibited for use in bread and bakery products due to potential carcinogenicity.",
    ),
    LookupRule(
        id="Trans Fat",
        match_terms=(
            "partially hydrogenated vegetable oil", "phvo", "trans fat",
            "vegetable shortening", "vanaspati",
        ),
        status=InsightStatus.RESTRICTED,
        clause="FSSAI Amendment 2021",
        details="Limit reduced to not more than 2% by weight of the total oils/fats in the product.",
    ),
    LookupRule(
        id="Caffeine",
        match_terms=("caffeine",),
        status=InsightStatus.RESTRICTED,
        clause="FSSAI Regulation 2.4.5 (34)",
        details="In energy drinks: Not to exceed 320mg/L. Must display 'High Caffeine' warning if >145mg/L.",
    ),
    LookupRule(
        id="Maida",
        match_terms=("refined wheat flour", "maida", "white flour"),
        status=InsightStatus.INFO,
        clause="General Food Standards",
        details=(
            "Refined flour lacks fiber and essential nutrients found in whole wheat. "
            "No specific ban, but creates high glycemic load."
        ),
    ),
    LookupRule(
        id="Palm Oil",
        match_terms=("palm oil", "palmolein", "palm kernel oil"),
        status=InsightStatus.INFO,
        clause="Labelling & Display Regs 2020",
        details="High in saturated fats. FSSAI requires specific declaration of vegetable oil source.",
    ),
    LookupRule(
        id="Sorbitol",
        match_terms=("sorbitol", "e420"),
        status=InsightStatus.WARNING,
        clause="FSSAI Regulation 2.4.5",
        details="Polyol. May have laxative effect if consumed in excess (>50g/day).",
    ),
    LookupRule(
        id="Sodium Benzoate",
        match_terms=("sodium benzoate", "e211"),
        status=InsightStatus.PERMITTED,
        clause="FSSAI Regulation 2.3.2",
        details="Class II Preservative. Permitted in squashes, syrups, and crushes up to specific limits.",
    ),
)
