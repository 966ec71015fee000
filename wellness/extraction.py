"""
Boundary between upstream extraction (AI/OCR, barcode lookups) and the engine.

Payloads are validated here, before scoring. Anything that cannot be turned
into a well-formed ScoringInput raises ExtractionFailedError; the engine is
never handed partially parsed data.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from wellness.scoring.models import LabelInfo, NutritionFacts, ScoringInput, VegNonVegMark

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"(-?\d+(?:\.\d+)?)")

# Open Food Facts per-100g nutriment -> (NutritionFacts field, multiplier)
OFF_NUTRIMENTS = {
    "energy-kcal_100g": ("calories", 1),
    "proteins_100g": ("protein", 1),
    "carbohydrates_100g": ("total_carbohydrates", 1),
    "sugars_100g": ("total_sugars", 1),
    "fat_100g": ("total_fat", 1),
    "sodium_100g": ("sodium", 1000),  # g -> mg
}


class ExtractionFailedError(ValueError):
    """Raised when upstream extraction output cannot be scored."""


def parse_number(raw_value: Any) -> float:
    """
    Read a numeric nutrition value.

    Numbers pass through; strings like "12.5 g" or "450mg" yield their first
    number; None, "" and "--" count as 0. Anything else is malformed.
    """
    if raw_value is None:
        return 0.0
    if isinstance(raw_value, bool):
        raise ExtractionFailedError(f"Expected a number, got {raw_value!r}")
    if isinstance(raw_value, (int, float)):
        return float(raw_value)
    if isinstance(raw_value, str):
        cleaned_str = raw_value.strip()
        if cleaned_str in ("", "--"):
            return 0.0
        match = _NUMBER.search(cleaned_str)
        if match:
            return float(match.group(1))
    raise ExtractionFailedError(f"Expected a number, got {raw_value!r}")


def split_ingredients(text: str) -> List[str]:
    """Comma-split a pasted ingredient list, dropping empty items."""
    return [part.strip() for part in text.split(",") if part.strip()]


def _string_list(payload: Dict[str, Any], key: str) -> List[str]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ExtractionFailedError(f"'{key}' must be a list, got {type(value).__name__}")
    if not all(isinstance(item, str) for item in value):
        raise ExtractionFailedError(f"'{key}' must contain only strings")
    return value


def _nutrition(raw: Any) -> NutritionFacts:
    if raw is None:
        return NutritionFacts()
    if not isinstance(raw, dict):
        raise ExtractionFailedError(f"'nutrition' must be an object, got {type(raw).__name__}")

    values = {}
    for field_name, field in NutritionFacts.model_fields.items():
        for key in (field.alias, field_name):
            if key in raw:
                values[field_name] = parse_number(raw[key])
                break
    return NutritionFacts(**values)


def scoring_input_from_extraction(payload: Any) -> ScoringInput:
    """
    Validate an AI extraction payload into a ScoringInput.

    Expected keys: ingredients, nutrition, claims, regulatoryInfo. Missing
    nutrition counts as zeros, missing claims as none, missing regulatory
    info as "no license, no veg mark".

    Raises:
        ExtractionFailedError: payload is not an object or a field is malformed
    """
    if not isinstance(payload, dict):
        raise ExtractionFailedError(f"Extraction payload must be an object, got {type(payload).__name__}")

    try:
        regulatory_info = payload.get("regulatoryInfo") or {}
        if not isinstance(regulatory_info, dict):
            raise ExtractionFailedError("'regulatoryInfo' must be an object")

        return ScoringInput(
            ingredients=_string_list(payload, "ingredients"),
            nutrition=_nutrition(payload.get("nutrition")),
            claims=_string_list(payload, "claims"),
            label_info=LabelInfo.model_validate(regulatory_info),
        )
    except ValidationError as e:
        logger.warning("Rejected extraction payload: %s", e)
        raise ExtractionFailedError(f"Invalid extraction payload: {e}") from e


def scoring_input_from_text(text: str) -> ScoringInput:
    """
    Pasted ingredient text. License and veg mark cannot be verified from
    text, so the label is assumed compliant rather than penalized.
    """
    if not isinstance(text, str) or not text.strip():
        raise ExtractionFailedError("No ingredient text supplied")

    return ScoringInput(
        ingredients=split_ingredients(text),
        label_info=LabelInfo(license_found=True, veg_non_veg_mark=VegNonVegMark.GREEN),
    )


def scoring_input_from_open_food_facts(off_data: Optional[Dict[str, Any]]) -> ScoringInput:
    """
    Adapt an Open Food Facts product document (already fetched by the caller).

    Uses the English ingredient text when present and per-100g nutriments.
    OFF carries no FSSAI label signals, so LabelInfo defaults apply.

    Raises:
        ExtractionFailedError: product not found or document malformed
    """
    if not isinstance(off_data, dict) or off_data.get("status") != 1:
        raise ExtractionFailedError("Product not found in Open Food Facts")

    product = off_data.get("product")
    if not isinstance(product, dict):
        raise ExtractionFailedError("Open Food Facts document has no product")

    ingredients_text = product.get("ingredients_text_en") or product.get("ingredients_text") or ""
    if not isinstance(ingredients_text, str):
        raise ExtractionFailedError("Open Food Facts ingredients text must be a string")

    nutriments = product.get("nutriments") or {}
    if not isinstance(nutriments, dict):
        raise ExtractionFailedError("Open Food Facts nutriments must be an object")

    values = {}
    for off_key, (field_name, multiplier) in OFF_NUTRIMENTS.items():
        if off_key in nutriments:
            # round off float noise from the unit conversion (0.4 g -> 400.00000000000006 mg)
            values[field_name] = round(parse_number(nutriments[off_key]) * multiplier, 6)

    try:
        nutrition = NutritionFacts(**values)
    except ValidationError as e:
        raise ExtractionFailedError(f"Invalid Open Food Facts nutriments: {e}") from e

    return ScoringInput(
        ingredients=split_ingredients(ingredients_text),
        nutrition=nutrition,
    )


def open_food_facts_category(off_data: Optional[Dict[str, Any]]) -> Optional[str]:
    """First OFF category tag without its language prefix ("en:biscuits" -> "biscuits")."""
    product = off_data.get("product") if isinstance(off_data, dict) else None
    tags = product.get("categories_tags") if isinstance(product, dict) else None
    if not isinstance(tags, list) or not tags or not isinstance(tags[0], str):
        return None
    return tags[0].replace("en:", "") or None
