"""
Category penalty rules.

Each function computes one capped category subtotal and records the findings
it triggers on the shared InsightCollector. Category order is fixed by the
engine: ingredients, additive load, nutrition, label, claims.
"""
import logging
import math
from typing import List, NamedTuple, Sequence, Tuple

from wellness.insights.collector import InsightCollector
from wellness.insights.models import STATUS_TO_INSIGHT
from wellness.knowledge_base.claims_db import CLAIMS_RULES, MISLEADING_FRESH_PENALTY
from wellness.knowledge_base.master_data import get_entry
from wellness.knowledge_base.models import ClaimClass, InsightStatus
from wellness.scoring.models import LabelInfo, NutritionFacts, VegNonVegMark
from wellness.text import normalize_text

logger = logging.getLogger(__name__)

INGREDIENT_PENALTY_CAP = 40
NUTRITION_PENALTY_CAP = 30

UPF_ADDITIVE_COUNT = 5
UPF_PENALTY = 15
MODERATE_ADDITIVE_COUNT = 3
MODERATE_ADDITIVE_PENALTY = 5

# HFSS thresholds (per 100g)
HIGH_SUGAR_G = 22
HIGH_SUGAR_PENALTY = 15
MODERATE_SUGAR_G = 12
MODERATE_SUGAR_PENALTY = 5
HIGH_SODIUM_MG = 400
HIGH_SODIUM_PENALTY = 10
HIGH_FAT_G = 18
HIGH_FAT_PENALTY = 5

MISSING_LICENSE_PENALTY = 15
MISSING_VEG_MARK_PENALTY = 5


class IngredientTally(NamedTuple):
    penalty: int
    flagged: List[str]
    additive_count: int
    preservative_count: int


def ingredient_penalty(resolved: Sequence[Tuple[str, str]], collector: InsightCollector) -> IngredientTally:
    """
    Sum penalties over distinct canonical keys (capped) and flag restricted items.

    `resolved` holds (raw_text, canonical_key) pairs with unique keys.
    """
    penalty = 0
    additive_count = 0
    preservative_count = 0
    flagged: List[str] = []

    for raw, key in resolved:
        data = get_entry(key)

        if data.is_additive:
            additive_count += 1
            if data.is_preservative:
                preservative_count += 1

        penalty += data.penalty_score

        insight_status = STATUS_TO_INSIGHT.get(data.status)
        if insight_status is None:
            continue

        # Keep the original name for display
        flagged.append(raw)
        collector.record(
            ingredient=raw,
            status=insight_status,
            clause=data.clause,
            details=(
                f"{data.functional_class or 'Additive'}: {data.status.value.upper()} use. "
                f"Penalty: {data.penalty_score}"
            ),
            source="FSSAI Regulations",
        )

    return IngredientTally(
        penalty=min(penalty, INGREDIENT_PENALTY_CAP),
        flagged=flagged,
        additive_count=additive_count,
        preservative_count=preservative_count,
    )


def additive_penalty(additive_count: int, collector: InsightCollector) -> int:
    """Flat penalty for additive load; five or more suggests ultra-processed food."""
    if additive_count >= UPF_ADDITIVE_COUNT:
        collector.record(
            ingredient="Total Additives",
            status=InsightStatus.WARNING,
            clause="General Standard",
            details=f"Contains {additive_count} additives. Likely Ultra-Processed Food (UPF).",
            source="NOVA / FSSAI Draft",
        )
        return UPF_PENALTY

    if additive_count >= MODERATE_ADDITIVE_COUNT:
        return MODERATE_ADDITIVE_PENALTY

    return 0


def nutrition_penalty(nutrition: NutritionFacts, collector: InsightCollector) -> int:
    """
    HFSS thresholds on ceiled values, so OCR noise like 21.8 vs 22 lands in a
    consistent bucket.
    """
    penalty = 0
    sugar = math.ceil(nutrition.total_sugars)
    sodium = math.ceil(nutrition.sodium)
    fat = math.ceil(nutrition.total_fat)

    if sugar > HIGH_SUGAR_G:
        penalty += HIGH_SUGAR_PENALTY
        collector.record(
            ingredient="Total Sugar",
            status=InsightStatus.WARNING,
            clause="HFSS Draft (Sugar)",
            details=f"High Sugar (>{HIGH_SUGAR_G}g). Detected ~{nutrition.total_sugars:g}g.",
            source="FSSAI Labelling Draft",
        )
    elif sugar > MODERATE_SUGAR_G:
        penalty += MODERATE_SUGAR_PENALTY

    if sodium > HIGH_SODIUM_MG:
        penalty += HIGH_SODIUM_PENALTY
        collector.record(
            ingredient="Sodium",
            status=InsightStatus.WARNING,
            clause="HFSS Draft (Sodium)",
            details=f"High Sodium (>{HIGH_SODIUM_MG}mg). Detected ~{nutrition.sodium:g}mg.",
            source="FSSAI Labelling Draft",
        )

    if fat > HIGH_FAT_G:
        penalty += HIGH_FAT_PENALTY

    return min(penalty, NUTRITION_PENALTY_CAP)


def label_penalty(label_info: LabelInfo, collector: InsightCollector) -> int:
    """Mandatory label elements: FSSAI license number and the veg/non-veg mark."""
    penalty = 0

    if not label_info.license_found:
        penalty += MISSING_LICENSE_PENALTY
        collector.record(
            ingredient="Label Audit",
            status=InsightStatus.WARNING,
            clause="FSSAI Lic. Reg 2.1",
            details="FSSAI License Number not detected. Mandatory.",
            source="FSSAI Licensing Regs",
        )

    if label_info.veg_non_veg_mark == VegNonVegMark.MISSING:
        penalty += MISSING_VEG_MARK_PENALTY
        collector.record(
            ingredient="Label Audit",
            status=InsightStatus.INFO,
            clause="FSSAI Labelling Reg 2.2.2",
            details="Veg/Non-Veg logo not detected.",
            source="FSSAI Labelling Regs",
        )

    return penalty


def claims_penalty(claims: Sequence[str], preservative_count: int, collector: InsightCollector) -> int:
    """
    Every trigger phrase found in every claim costs its rule penalty. A
    freshness claim on a product with preservatives is treated as banned.
    """
    penalty = 0

    for claim in claims:
        norm_claim = normalize_text(claim)
        if not norm_claim:
            continue

        for trigger, rule in CLAIMS_RULES.items():
            if trigger not in norm_claim:
                continue

            if rule.classification == ClaimClass.MISLEADING_FRESH and preservative_count > 0:
                penalty += MISLEADING_FRESH_PENALTY
                collector.record(
                    ingredient="Misleading Claim",
                    status=InsightStatus.BANNED,
                    clause=rule.clause,
                    details="Cannot claim 'Fresh' with preservatives.",
                    source="FSSAI Advertising Regs",
                )
            else:
                penalty += rule.penalty
                collector.record(
                    ingredient="Marketing Claim",
                    status=InsightStatus.WARNING,
                    clause=rule.clause,
                    details=f"Claim '{claim}' requires substantiation.",
                    source="Advertising Regs",
                )
            logger.debug("Claim %r matched trigger %r", claim, trigger)

    return penalty
