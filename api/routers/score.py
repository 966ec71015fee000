"""
Score API Router - deterministic wellness scoring and regulatory lookups
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from api.models import InsightsRequest, TextScoreRequest
from wellness.analysis import ProductAnalysis, analyze_product
from wellness.extraction import (
    ExtractionFailedError,
    open_food_facts_category,
    scoring_input_from_extraction,
    scoring_input_from_open_food_facts,
    scoring_input_from_text,
)
from wellness.insights.models import RegulatoryInsight
from wellness.rule_engine.evaluator import run_fssai_rules
from wellness.scoring.engine import score_input
from wellness.scoring.models import ScoringInput, ScoringResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["score"])


@router.post("/api/score", response_model=ScoringResult)
async def score_product(data: ScoringInput):
    """Score an already-structured product."""
    return score_input(data)


@router.post("/api/score/extraction", response_model=ProductAnalysis)
async def score_extraction(payload: Dict[str, Any]):
    """Validate raw extraction output, then score it."""
    try:
        scoring_input = scoring_input_from_extraction(payload)
    except ExtractionFailedError as e:
        logger.info("Extraction rejected: %s", e)
        raise HTTPException(status_code=422, detail=f"extraction failed: {e}")

    category = payload.get("productCategory")
    return analyze_product(scoring_input, product_category=category if isinstance(category, str) else None)


@router.post("/api/score/text", response_model=ProductAnalysis)
async def score_text(data: TextScoreRequest):
    """Score a pasted, comma separated ingredient list."""
    try:
        scoring_input = scoring_input_from_text(data.text)
    except ExtractionFailedError as e:
        raise HTTPException(status_code=422, detail=f"extraction failed: {e}")

    return analyze_product(scoring_input, product_category=data.productCategory)


@router.post("/api/score/off", response_model=ProductAnalysis)
async def score_open_food_facts(off_data: Dict[str, Any]):
    """Score an Open Food Facts product document fetched by the caller."""
    try:
        scoring_input = scoring_input_from_open_food_facts(off_data)
    except ExtractionFailedError as e:
        logger.info("Open Food Facts document rejected: %s", e)
        raise HTTPException(status_code=422, detail=f"extraction failed: {e}")

    return analyze_product(scoring_input, product_category=open_food_facts_category(off_data))


@router.post("/api/insights", response_model=List[RegulatoryInsight])
async def ingredient_insights(data: InsightsRequest):
    """Regulatory annotations from the rule table, without a score."""
    return run_fssai_rules(data.ingredients)
