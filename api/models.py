from typing import List, Optional
from pydantic import BaseModel


class TextScoreRequest(BaseModel):
    text: str
    productCategory: Optional[str] = None


class InsightsRequest(BaseModel):
    ingredients: List[str] = []
