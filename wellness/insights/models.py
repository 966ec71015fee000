from pydantic import BaseModel, ConfigDict

from wellness.knowledge_base.models import IngredientStatus, InsightStatus


class RegulatoryInsight(BaseModel):
    """One human-readable regulatory finding tied to a clause or rule."""
    model_config = ConfigDict(frozen=True)

    ingredient: str
    status: InsightStatus
    clause: str
    details: str
    source: str


# Knowledge-base statuses that surface as findings; permitted never does
STATUS_TO_INSIGHT = {
    IngredientStatus.PROHIBITED: InsightStatus.BANNED,
    IngredientStatus.WARNING: InsightStatus.WARNING,
    IngredientStatus.RESTRICTED: InsightStatus.RESTRICTED,
}
