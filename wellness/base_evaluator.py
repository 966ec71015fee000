"""
Base Ingredient Evaluator

Abstract base class for the two ways of annotating an ingredient list:
the full penalty evaluator and the flat rule-table lookup.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from wellness.insights.models import RegulatoryInsight


class BaseIngredientEvaluator(ABC):
    """
    Each evaluator:
    - Receives raw ingredient strings exactly as extracted
    - Normalizes them with wellness.text.normalize_text
    - Returns de-duplicated regulatory insights, keeping the raw text for display
    """

    name: str = "base"

    @abstractmethod
    def evaluate_ingredients(self, ingredients: Sequence[str]) -> List[RegulatoryInsight]:
        """Return regulatory insights for `ingredients`, in input order."""
        pass
