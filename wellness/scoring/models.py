import math
from enum import Enum
from typing import Any, List, Mapping, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wellness.insights.models import RegulatoryInsight


class VegNonVegMark(str, Enum):
    GREEN = "green"
    BROWN = "brown"
    MISSING = "missing"


class NutritionFacts(BaseModel):
    """Declared nutrition per 100g/100ml. Sodium in mg, everything else in g (calories in kcal)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    calories: float = 0
    protein: float = 0
    total_carbohydrates: float = 0
    total_sugars: float = 0
    total_fat: float = 0
    sodium: float = 0

    @field_validator('*', mode='before')
    def missing_as_zero(cls, v):
        return 0 if v is None else v

    @field_validator('*')
    def check_non_negative(cls, v):
        if not math.isfinite(v) or v < 0:
            raise ValueError('Nutrition value must be a finite, non-negative number')
        return v

    @classmethod
    def lenient(cls, data: Optional[Mapping[str, Any]]) -> "NutritionFacts":
        """
        Build from an unchecked mapping without raising. Missing, negative,
        non-finite or non-numeric values count as 0.
        """
        data = data or {}
        values = {}
        for field_name, field in cls.model_fields.items():
            raw = data.get(field.alias, data.get(field_name))
            if isinstance(raw, bool):
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                continue
            if math.isfinite(value) and value >= 0:
                values[field_name] = value
        return cls(**values)


class LabelInfo(BaseModel):
    """Label compliance signals read off the package."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    license_found: bool = Field(
        False, validation_alias=AliasChoices("license_found", "licenseFound", "fssaiLicenseFound")
    )
    veg_non_veg_mark: VegNonVegMark = Field(
        VegNonVegMark.MISSING,
        validation_alias=AliasChoices("veg_non_veg_mark", "vegNonVegMark", "vegNonVegLogo"),
    )

    @field_validator('license_found', mode='before')
    def null_license_is_not_found(cls, v):
        return False if v is None else v

    @field_validator('veg_non_veg_mark', mode='before')
    def blank_mark_is_missing(cls, v):
        if v is None or v == "":
            return VegNonVegMark.MISSING
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def lenient(cls, data: Optional[Mapping[str, Any]]) -> "LabelInfo":
        """
        Build from an unchecked mapping without raising. Anything but a real
        True counts as no license; an unrecognised mark counts as missing.
        """
        data = data or {}
        license_found = next(
            (data[k] for k in ("license_found", "licenseFound", "fssaiLicenseFound") if k in data), False
        )
        mark = next(
            (data[k] for k in ("veg_non_veg_mark", "vegNonVegMark", "vegNonVegLogo") if k in data), None
        )
        try:
            mark = VegNonVegMark(mark.lower() if isinstance(mark, str) else mark or VegNonVegMark.MISSING)
        except (TypeError, ValueError):
            mark = VegNonVegMark.MISSING
        return cls(license_found=license_found is True, veg_non_veg_mark=mark)


class ScoringInput(BaseModel):
    """Everything the engine needs for one product."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ingredients: List[str] = []
    nutrition: NutritionFacts = Field(default_factory=NutritionFacts)
    claims: List[str] = []
    label_info: LabelInfo = Field(
        default_factory=LabelInfo,
        validation_alias=AliasChoices("label_info", "labelInfo", "regulatoryInfo"),
    )


class ScoreBreakdown(BaseModel):
    """Capped penalty subtotal per category."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    ingredient_penalty: int = 0
    additive_penalty: int = 0
    nutrition_penalty: int = 0
    label_penalty: int = 0
    claims_penalty: int = 0

    @property
    def total(self) -> int:
        return (
            self.ingredient_penalty
            + self.additive_penalty
            + self.nutrition_penalty
            + self.label_penalty
            + self.claims_penalty
        )


class ScoringResult(BaseModel):
    """Complete scoring result."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    insights: List[RegulatoryInsight]
    flagged_ingredients: List[str]
