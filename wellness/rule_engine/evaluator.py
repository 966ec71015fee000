"""
Rule-table lookup: regulatory annotations without a score.

Walks the flat FSSAI rule table. Match terms of three characters or fewer
must equal the ingredient or appear as a whole token ("msg" must not fire
inside "msgstore"); longer terms match as substrings ("Contains Aspartame").
"""
import logging
from typing import List, Optional, Sequence

from wellness.base_evaluator import BaseIngredientEvaluator
from wellness.insights.collector import InsightCollector, by_details
from wellness.insights.models import RegulatoryInsight
from wellness.knowledge_base.models import LookupRule
from wellness.knowledge_base.rules_table import FSSAI_DATABASE
from wellness.text import normalize_text

logger = logging.getLogger(__name__)

SHORT_TERM_LENGTH = 3


def term_matches(normalized_input: str, term: str) -> bool:
    normalized_term = normalize_text(term)
    if not normalized_term:
        return False

    if len(normalized_term) <= SHORT_TERM_LENGTH:
        return normalized_input == normalized_term or normalized_term in normalized_input.split(' ')

    return normalized_term in normalized_input


class RuleTableEvaluator(BaseIngredientEvaluator):
    """First matching rule wins per ingredient; findings de-duplicated by rule details."""

    name = "rule_table"

    def __init__(self, rules: Sequence[LookupRule] = FSSAI_DATABASE):
        self.rules = tuple(rules)

    def match_rule(self, ingredient: str) -> Optional[LookupRule]:
        normalized_input = normalize_text(ingredient)
        if not normalized_input:
            return None

        for rule in self.rules:
            for term in rule.match_terms:
                if term_matches(normalized_input, term):
                    return rule
        return None

    def evaluate_ingredient(self, ingredient: str) -> Optional[RegulatoryInsight]:
        rule = self.match_rule(ingredient)
        if rule is None:
            return None

        return RegulatoryInsight(
            ingredient=ingredient,  # original name for display
            status=rule.status,
            clause=rule.clause,
            details=rule.details,
            source="FSSAI Standards",
        )

    def evaluate_ingredients(self, ingredients: Sequence[str]) -> List[RegulatoryInsight]:
        # Synonyms of one rule (MSG, E621) share details text and show once
        collector = InsightCollector(key=by_details)

        for ingredient in ingredients:
            insight = self.evaluate_ingredient(ingredient)
            if insight is None:
                continue
            if not collector.add(insight):
                logger.debug("Rule %r already reported; skipping %r", insight.clause, ingredient)

        return collector.insights


def run_fssai_rules(ingredients: Sequence[str]) -> List[RegulatoryInsight]:
    """Evaluate a list of ingredients against the default rule table."""
    return RuleTableEvaluator().evaluate_ingredients(ingredients)
