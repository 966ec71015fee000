"""
Marketing claim triggers.
Based on FSSAI Advertising and Claims Regulations, 2018.

Triggers are normalized phrases matched by substring search against each
normalized claim, so "Farm Fresh!" hits "fresh".
"""
from types import MappingProxyType
from typing import Dict, Mapping

from wellness.knowledge_base.models import ClaimClass, ClaimRule


_CLAIMS_RULES: Dict[str, ClaimRule] = {
    "immunity": ClaimRule(
        classification=ClaimClass.UNSUPPORTED_FUNCTIONAL,
        penalty=10,
        clause="FSSAI Adv. Reg 4.0 (No unsubstantiated immunity claims)",
    ),
    "cures": ClaimRule(
        classification=ClaimClass.PROHIBITED_MEDICAL,
        penalty=25,
        clause="FSSAI Adv. Reg 7.1 (Food cannot claim to cure disease)",
    ),
    "fresh": ClaimRule(
        classification=ClaimClass.MISLEADING_FRESH,
        penalty=10,
        clause="FSSAI Adv. Reg (Cannot claim 'Fresh' if processed/preserved)",
    ),
    "natural": ClaimRule(
        classification=ClaimClass.MISLEADING_NATURAL,
        penalty=5,
        clause="FSSAI Adv. Reg (Strict composite food rules)",
    ),
    "healthiest": ClaimRule(
        classification=ClaimClass.SUBJECTIVE_SUPERLATIVE,
        penalty=5,
        clause="FSSAI Adv. Reg 4.0 (Ambiguous)",
    ),
    "grow tall": ClaimRule(
        classification=ClaimClass.UNSUPPORTED_NUTRIENT,
        penalty=10,
        clause="FSSAI Adv. Reg 5.2",
    ),
}

CLAIMS_RULES: Mapping[str, ClaimRule] = MappingProxyType(_CLAIMS_RULES)

# Penalty applied instead of the rule's own when a freshness claim sits next to preservatives
MISLEADING_FRESH_PENALTY = 20
