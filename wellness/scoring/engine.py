"""
Deterministic wellness scoring. Pure code, no LLM.

Same ingredients, nutrition, claims and label signals always give the same
score, whatever wording the upstream extraction happened to use.
"""
import logging
from typing import List, Mapping, Sequence, Union

from wellness.base_evaluator import BaseIngredientEvaluator
from wellness.insights.collector import InsightCollector, by_clause
from wellness.insights.models import RegulatoryInsight
from wellness.resolver import resolve_ingredients
from wellness.scoring.models import (
    LabelInfo,
    NutritionFacts,
    ScoreBreakdown,
    ScoringInput,
    ScoringResult,
)
from wellness.scoring.penalties import (
    additive_penalty,
    claims_penalty,
    ingredient_penalty,
    label_penalty,
    nutrition_penalty,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 100


def clamp_score(total_penalty: int) -> int:
    return max(0, min(MAX_SCORE, MAX_SCORE - total_penalty))


def calculate_product_score(
    ingredients: Sequence[str],
    nutrition: Union[NutritionFacts, Mapping, None] = None,
    claims: Sequence[str] = (),
    label_info: Union[LabelInfo, Mapping, None] = None,
) -> ScoringResult:
    """
    Score one product.

    Args:
        ingredients: Raw ingredient strings as extracted (order irrelevant)
        nutrition: NutritionFacts, or a dict of the same fields; missing or unusable values count as 0
        claims: Raw marketing claim strings
        label_info: LabelInfo, or a dict; defaults to no license and no veg mark, an
            unrecognised mark counts as missing

    Returns:
        ScoringResult with the clamped score, per-category breakdown,
        de-duplicated insights and flagged raw ingredient names
    """
    ingredients = list(ingredients or ())
    claims = list(claims or ())
    if not isinstance(nutrition, NutritionFacts):
        nutrition = NutritionFacts.lenient(nutrition)
    if not isinstance(label_info, LabelInfo):
        label_info = LabelInfo.lenient(label_info)

    collector = InsightCollector(key=by_clause)

    resolved = resolve_ingredients(ingredients)
    tally = ingredient_penalty(resolved, collector)

    breakdown = ScoreBreakdown(
        ingredient_penalty=tally.penalty,
        additive_penalty=additive_penalty(tally.additive_count, collector),
        nutrition_penalty=nutrition_penalty(nutrition, collector),
        label_penalty=label_penalty(label_info, collector),
        claims_penalty=claims_penalty(claims, tally.preservative_count, collector),
    )
    score = clamp_score(breakdown.total)

    logger.debug(
        "Scored %d ingredients (%d resolved): score=%d breakdown=%s",
        len(ingredients), len(resolved), score, breakdown.model_dump(),
    )

    return ScoringResult(
        score=score,
        breakdown=breakdown,
        insights=collector.insights,
        flagged_ingredients=tally.flagged,
    )


def score_input(scoring_input: ScoringInput) -> ScoringResult:
    """Score a validated ScoringInput."""
    return calculate_product_score(
        scoring_input.ingredients,
        scoring_input.nutrition,
        scoring_input.claims,
        scoring_input.label_info,
    )


class PenaltyEvaluator(BaseIngredientEvaluator):
    """Ingredient findings from the full knowledge base, without nutrition, label or claims."""

    name = "penalty"

    def evaluate_ingredients(self, ingredients: Sequence[str]) -> List[RegulatoryInsight]:
        collector = InsightCollector(key=by_clause)
        tally = ingredient_penalty(resolve_ingredients(ingredients), collector)
        additive_penalty(tally.additive_count, collector)
        return collector.insights
