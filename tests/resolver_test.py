"""Name resolution: normalization, alias lookup, whole-word keys, substring aliases."""

import pytest

from wellness.knowledge_base.master_data import FSSAI_MASTER_DATA, INGREDIENT_SYNONYMS
from wellness.resolver import resolve_canonical_key, resolve_ingredients
from wellness.text import contains_word, normalize_text


def test_normalize_text():
    assert normalize_text("  Sugar.  ") == "sugar"
    assert normalize_text("INS-621") == "ins621"
    assert normalize_text("Monosodium Glutamate (E621)") == "monosodium glutamate e621"
    assert normalize_text("a\tb") == "ab"
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_contains_word_boundaries():
    assert contains_word("sugar", "sugar")
    assert contains_word("brown sugar syrup", "sugar")
    assert contains_word("sugar syrup", "sugar")
    assert contains_word("brown sugar", "sugar")
    assert not contains_word("sugary", "sugar")
    assert not contains_word("nosugar", "sugar")


def test_every_synonym_points_at_a_master_key():
    for alias, key in INGREDIENT_SYNONYMS.items():
        assert key in FSSAI_MASTER_DATA, alias
        assert normalize_text(alias) == alias


@pytest.mark.parametrize("raw, expected", [
    ("Sugar", "sugar"),
    ("Cane Sugar", "sugar"),
    ("SUCROSE", "sugar"),
    ("E621", "monosodium glutamate"),
    ("INS 211", "sodium benzoate"),
    ("Yellow 5", "tartrazine"),
    ("Refined Wheat Flour (Maida)", "maida"),
    ("Potassium Bromate", "potassium bromate"),
    ("contains cane sugar", "sugar"),
    ("Palm Kernel Oil", "palm oil"),
])
def test_resolves_known_names(raw, expected):
    assert resolve_canonical_key(raw) == expected


def test_whole_word_key_inside_phrase():
    assert resolve_canonical_key("Acidity regulator, caffeine anhydrous") == "caffeine"


def test_key_inside_longer_word_does_not_match():
    assert resolve_canonical_key("sugarcane juice") is None


@pytest.mark.parametrize("raw", ["Water", "Salt", "", "   ", "!!!"])
def test_unknown_names_resolve_to_none(raw):
    assert resolve_canonical_key(raw) is None


def test_alias_substring_false_positive_is_preserved():
    """Aliases match as plain substrings, so "ins 211" fires inside "ins 2110"."""
    assert resolve_canonical_key("INS 2110") == "sodium benzoate"


def test_resolve_ingredients_keeps_first_raw_per_key():
    resolved = resolve_ingredients(["Water", "Cane Sugar", "Sugar", "Sucrose", "E211"])
    assert resolved == [("Cane Sugar", "sugar"), ("E211", "sodium benzoate")]
