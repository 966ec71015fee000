from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class IngredientStatus(str, Enum):
    PERMITTED = "permitted"
    WARNING = "warning"
    RESTRICTED = "restricted"
    PROHIBITED = "prohibited"

    @property
    def severity(self) -> int:
        """Ordinal severity: permitted < warning < restricted < prohibited."""
        return _SEVERITY[self]


_SEVERITY = {
    IngredientStatus.PERMITTED: 0,
    IngredientStatus.WARNING: 1,
    IngredientStatus.RESTRICTED: 2,
    IngredientStatus.PROHIBITED: 3,
}


class IngredientKind(str, Enum):
    INGREDIENT = "ingredient"
    ADDITIVE = "additive"


class InsightStatus(str, Enum):
    """Severity label shown next to a regulatory finding."""
    PERMITTED = "Permitted"
    RESTRICTED = "Restricted"
    BANNED = "Banned"
    WARNING = "Warning"
    INFO = "Info"


class ClaimClass(str, Enum):
    UNSUPPORTED_FUNCTIONAL = "unsupported_functional"
    PROHIBITED_MEDICAL = "prohibited_medical"
    MISLEADING_FRESH = "misleading_fresh"
    MISLEADING_NATURAL = "misleading_natural"
    SUBJECTIVE_SUPERLATIVE = "subjective_superlative"
    UNSUPPORTED_NUTRIENT = "unsupported_nutrient"


class MasterIngredient(BaseModel):
    """Regulatory data for one canonical substance."""
    model_config = ConfigDict(frozen=True)

    status: IngredientStatus
    kind: IngredientKind
    penalty_score: int = Field(..., ge=0)
    clause: str
    functional_class: Optional[str] = None
    ins: Optional[str] = Field(None, description="International Numbering System code")

    @property
    def is_additive(self) -> bool:
        return self.kind == IngredientKind.ADDITIVE

    @property
    def is_preservative(self) -> bool:
        return "Preservative" in (self.functional_class or "")


class ClaimRule(BaseModel):
    """Penalty and citation for one marketing-claim trigger phrase."""
    model_config = ConfigDict(frozen=True)

    classification: ClaimClass
    penalty: int = Field(..., ge=0)
    clause: str


class LookupRule(BaseModel):
    """One entry of the flat rule table used for annotation-only lookups."""
    model_config = ConfigDict(frozen=True)

    id: str
    match_terms: Tuple[str, ...]
    status: InsightStatus
    clause: str
    details: str
