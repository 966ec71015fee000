"""Product analysis assembly: good vs flagged ingredients, reasoning, category pass mark."""

from wellness.analysis import analyze_product
from wellness.extraction import scoring_input_from_text
from wellness.scoring.models import ScoringInput


def test_text_product_analysis():
    analysis = analyze_product(
        scoring_input_from_text("Water, Sugar, Tartrazine"),
        product_category="Soft Drink",
        category_threshold=60,
    )
    assert analysis.wellness_score == 88
    assert analysis.good_ingredients == ["Water", "Sugar"]
    assert analysis.flagged_ingredients == ["Tartrazine"]
    assert analysis.score_reasoning.negative == ["Restricted: Tartrazine"]
    assert analysis.product_category == "Soft Drink"
    assert analysis.meets_threshold is True
    assert len(analysis.regulatory_insights) == 1


def test_threshold_boundary():
    scoring_input = scoring_input_from_text("Potassium Bromate")
    assert analyze_product(scoring_input, category_threshold=60).meets_threshold is True
    assert analyze_product(scoring_input, category_threshold=61).meets_threshold is False


def test_unknown_category_default():
    analysis = analyze_product(ScoringInput(), category_threshold=60)
    assert analysis.product_category == "Unknown"
    assert analysis.wellness_score == 80


def test_camel_case_dump():
    data = analyze_product(ScoringInput(), category_threshold=60).model_dump(by_alias=True)
    assert "wellnessScore" in data
    assert "regulatoryInsights" in data
    assert "ingredientPenalty" in data["breakdown"]
