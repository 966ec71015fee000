"""Rule-table lookup: short-term tokens, substring terms, first rule wins, de-dup by details."""

import pytest

from wellness.base_evaluator import BaseIngredientEvaluator
from wellness.knowledge_base.models import InsightStatus, LookupRule
from wellness.rule_engine.evaluator import RuleTableEvaluator, run_fssai_rules, term_matches
from wellness.scoring.engine import PenaltyEvaluator


def test_short_term_requires_whole_token():
    assert term_matches("msg", "msg")
    assert term_matches("contains msg", "msg")
    assert not term_matches("msgstore", "msg")
    assert not term_matches("contains msgs", "msg")


def test_long_term_matches_substring():
    assert term_matches("contains aspartame", "aspartame")
    assert term_matches("fdc yellow 5 lake", "FD&C Yellow 5")
    assert term_matches("phvo", "phvo")


@pytest.mark.parametrize("raw, rule_status, clause", [
    ("MSG", InsightStatus.WARNING, "FSSAI Regulation 2.2.1:1"),
    ("Contains Aspartame", InsightStatus.RESTRICTED, "FSSAI Regulation 2.4.5 (24)"),
    ("FD&C Yellow 5", InsightStatus.RESTRICTED, "FSSAI Regulation 2.3.1"),
    ("Potassium Bromate", InsightStatus.BANNED, "FSSAI Notification 2016"),
    ("Vegetable Shortening", InsightStatus.RESTRICTED, "FSSAI Amendment 2021"),
    ("Maida", InsightStatus.INFO, "General Food Standards"),
    ("Sodium Benzoate", InsightStatus.PERMITTED, "FSSAI Regulation 2.3.2"),
])
def test_single_ingredient_findings(raw, rule_status, clause):
    insights = run_fssai_rules([raw])
    assert len(insights) == 1
    assert insights[0].ingredient == raw
    assert insights[0].status == rule_status
    assert insights[0].clause == clause
    assert insights[0].source == "FSSAI Standards"


def test_unknown_and_embedded_short_terms_are_ignored():
    assert run_fssai_rules(["Water", "msgstore", "", "Salt"]) == []


def test_synonyms_of_one_rule_reported_once():
    insights = run_fssai_rules(["MSG", "E621", "Monosodium Glutamate"])
    assert len(insights) == 1
    assert insights[0].ingredient == "MSG"


def test_first_matching_rule_wins():
    insights = run_fssai_rules(["aspartame and msg"])
    assert len(insights) == 1
    assert insights[0].clause == "FSSAI Regulation 2.2.1:1"


def test_custom_rule_table():
    rules = [
        LookupRule(
            id="Salt",
            match_terms=("salt", "iodised salt"),
            status=InsightStatus.INFO,
            clause="Test Clause",
            details="Salt declared.",
        ),
    ]
    evaluator = RuleTableEvaluator(rules)
    assert [i.ingredient for i in evaluator.evaluate_ingredients(["Iodised Salt", "MSG"])] == ["Iodised Salt"]


def test_both_evaluators_share_interface():
    ingredients = ["Sugar", "Tartrazine", "E102"]
    for evaluator in (PenaltyEvaluator(), RuleTableEvaluator()):
        assert isinstance(evaluator, BaseIngredientEvaluator)
        insights = evaluator.evaluate_ingredients(ingredients)
        assert [i.ingredient for i in insights] == ["Tartrazine"]
