"""Extraction boundary: defaults for missing data, ExtractionFailedError for malformed payloads."""

import pytest

from wellness.extraction import (
    ExtractionFailedError,
    parse_number,
    scoring_input_from_extraction,
    scoring_input_from_open_food_facts,
    scoring_input_from_text,
    split_ingredients,
)
from wellness.scoring.engine import score_input
from wellness.scoring.models import VegNonVegMark


SAMPLE_PAYLOAD = {
    "rawText": "INGREDIENTS: Sugar, Maida, Sodium Benzoate ...",
    "ingredients": ["Sugar", "Maida", "Sodium Benzoate"],
    "nutrition": {
        "calories": 480,
        "protein": "6 g",
        "totalCarbohydrates": 70,
        "totalSugars": "25.4g",
        "totalFat": 18,
        "sodium": "450 mg",
        "servingSize": "30 g",
    },
    "claims": ["Fresh taste"],
    "productCategory": "Biscuits",
    "regulatoryInfo": {"fssaiLicenseFound": True, "vegNonVegLogo": "green"},
}


@pytest.mark.parametrize("raw, expected", [
    (None, 0.0),
    ("", 0.0),
    ("--", 0.0),
    (3, 3.0),
    (2.5, 2.5),
    ("450mg", 450.0),
    (" 12.5 g ", 12.5),
    ("-5 g", -5.0),
    ("Fat -0.5g", -0.5),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", True, [1], {"value": 1}])
def test_parse_number_rejects_garbage(raw):
    with pytest.raises(ExtractionFailedError):
        parse_number(raw)


def test_split_ingredients():
    assert split_ingredients("Sugar, Maida,, E621 ,") == ["Sugar", "Maida", "E621"]


def test_full_payload():
    scoring_input = scoring_input_from_extraction(SAMPLE_PAYLOAD)
    assert scoring_input.ingredients == ["Sugar", "Maida", "Sodium Benzoate"]
    assert scoring_input.nutrition.total_sugars == 25.4
    assert scoring_input.nutrition.sodium == 450
    assert scoring_input.nutrition.protein == 6
    assert scoring_input.claims == ["Fresh taste"]
    assert scoring_input.label_info.license_found is True
    assert scoring_input.label_info.veg_non_veg_mark == VegNonVegMark.GREEN

    result = score_input(scoring_input)
    # sugar 2 + maida 5 + sodium benzoate 5; sugar 15 + sodium 10; fresh with preservative 20
    assert result.breakdown.ingredient_penalty == 12
    assert result.breakdown.nutrition_penalty == 25
    assert result.breakdown.claims_penalty == 20
    assert result.score == 43


def test_missing_fields_use_defaults():
    scoring_input = scoring_input_from_extraction({})
    assert scoring_input.ingredients == []
    assert scoring_input.claims == []
    assert scoring_input.nutrition.total_sugars == 0
    assert scoring_input.label_info.license_found is False
    assert scoring_input.label_info.veg_non_veg_mark == VegNonVegMark.MISSING


def test_null_fields_use_defaults():
    payload = {"ingredients": None, "nutrition": {"sodium": None}, "claims": None, "regulatoryInfo": None}
    scoring_input = scoring_input_from_extraction(payload)
    assert scoring_input.nutrition.sodium == 0
    assert scoring_input.label_info.veg_non_veg_mark == VegNonVegMark.MISSING


def test_null_license_counts_as_not_found():
    payload = {"ingredients": ["Sugar"], "regulatoryInfo": {"fssaiLicenseFound": None, "vegNonVegLogo": "green"}}
    scoring_input = scoring_input_from_extraction(payload)
    assert scoring_input.label_info.license_found is False
    assert scoring_input.label_info.veg_non_veg_mark == VegNonVegMark.GREEN
    assert score_input(scoring_input).breakdown.label_penalty == 15


@pytest.mark.parametrize("payload", [
    None,
    "Sugar, Maida",
    ["Sugar"],
    {"ingredients": "Sugar, Maida"},
    {"ingredients": ["Sugar", 42]},
    {"claims": "Fresh"},
    {"nutrition": [25, 500]},
    {"nutrition": {"sodium": "unknown"}},
    {"nutrition": {"sodium": -5}},
    {"nutrition": {"sodium": "-5 g"}},
    {"nutrition": {"totalSugars": "-12.5g"}},
    {"regulatoryInfo": "licensed"},
    {"regulatoryInfo": {"vegNonVegLogo": "purple"}},
])
def test_malformed_payload_fails_extraction(payload):
    with pytest.raises(ExtractionFailedError):
        scoring_input_from_extraction(payload)


def test_text_mode_assumes_compliant_label():
    scoring_input = scoring_input_from_text("Water, Sugar, E621")
    assert scoring_input.ingredients == ["Water", "Sugar", "E621"]
    assert scoring_input.label_info.license_found is True
    assert score_input(scoring_input).breakdown.label_penalty == 0


@pytest.mark.parametrize("text", ["", "   ", None])
def test_text_mode_rejects_empty(text):
    with pytest.raises(ExtractionFailedError):
        scoring_input_from_text(text)


def test_open_food_facts_product():
    off_data = {
        "status": 1,
        "product": {
            "product_name": "Cream Biscuits",
            "ingredients_text": "Sucre, huile de palme",
            "ingredients_text_en": "Sugar, Palm Oil, Salt",
            "nutriments": {
                "energy-kcal_100g": 500,
                "sugars_100g": 30,
                "sodium_100g": 0.4,
                "fat_100g": "20",
            },
        },
    }
    scoring_input = scoring_input_from_open_food_facts(off_data)
    assert scoring_input.ingredients == ["Sugar", "Palm Oil", "Salt"]
    assert scoring_input.nutrition.sodium == 400
    assert scoring_input.nutrition.calories == 500

    result = score_input(scoring_input)
    assert result.breakdown.ingredient_penalty == 8
    # sugar 15 + fat 5; 0.4 g sodium is exactly 400 mg, not above it
    assert result.breakdown.nutrition_penalty == 20
    assert result.breakdown.label_penalty == 20
    assert result.score == 52


def test_open_food_facts_falls_back_to_generic_ingredients():
    off_data = {"status": 1, "product": {"ingredients_text": "Maida, Sugar"}}
    assert scoring_input_from_open_food_facts(off_data).ingredients == ["Maida", "Sugar"]


@pytest.mark.parametrize("off_data", [
    None,
    {"status": 0, "status_verbose": "product not found"},
    {"status": 1},
    {"status": 1, "product": {"nutriments": {"sodium_100g": -1}}},
])
def test_open_food_facts_not_found(off_data):
    with pytest.raises(ExtractionFailedError):
        scoring_input_from_open_food_facts(off_data)
