"""
Product analysis assembly: the scored result plus the display fields the
result screen needs (good vs flagged ingredients, score reasoning, category
pass mark). No AI summary or alternatives are produced here.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from config import CATEGORY_THRESHOLD
from wellness.insights.models import RegulatoryInsight
from wellness.scoring.engine import score_input
from wellness.scoring.models import ScoreBreakdown, ScoringInput


class ScoreReasoning(BaseModel):
    model_config = ConfigDict(frozen=True)

    positive: List[str]
    negative: List[str]


class ProductAnalysis(BaseModel):
    """Scored product ready for display."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    wellness_score: int
    breakdown: ScoreBreakdown
    good_ingredients: List[str]
    flagged_ingredients: List[str]
    regulatory_insights: List[RegulatoryInsight]
    score_reasoning: ScoreReasoning
    product_category: str
    category_threshold: int
    meets_threshold: bool


def analyze_product(
    scoring_input: ScoringInput,
    product_category: Optional[str] = None,
    category_threshold: int = CATEGORY_THRESHOLD,
) -> ProductAnalysis:
    result = score_input(scoring_input)
    flagged = set(result.flagged_ingredients)

    return ProductAnalysis(
        wellness_score=result.score,
        breakdown=result.breakdown,
        good_ingredients=[i for i in scoring_input.ingredients if i not in flagged],
        flagged_ingredients=result.flagged_ingredients,
        regulatory_insights=result.insights,
        score_reasoning=ScoreReasoning(
            positive=["FSSAI-aligned Algorithm"],
            negative=[f"Restricted: {i}" for i in result.flagged_ingredients],
        ),
        product_category=product_category or "Unknown",
        category_threshold=category_threshold,
        meets_threshold=result.score >= category_threshold,
    )
