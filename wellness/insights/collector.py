from typing import Callable, List

from wellness.insights.models import RegulatoryInsight
from wellness.knowledge_base.models import InsightStatus


def by_clause(insight: RegulatoryInsight) -> str:
    return insight.clause


def by_details(insight: RegulatoryInsight) -> str:
    return insight.details


class InsightCollector:
    """
    Accumulates insights for one evaluation call.

    Two insights with the same key (clause text by default) are the same
    finding; only the first is kept, so its raw ingredient text is the one
    shown.
    """

    def __init__(self, key: Callable[[RegulatoryInsight], str] = by_clause):
        self._key = key
        self._seen = set()
        self._insights: List[RegulatoryInsight] = []

    def add(self, insight: RegulatoryInsight) -> bool:
        """Record `insight`. Returns False if an equivalent one was already recorded."""
        dedup_key = self._key(insight)
        if dedup_key in self._seen:
            return False
        self._seen.add(dedup_key)
        self._insights.append(insight)
        return True

    def record(
        self,
        ingredient: str,
        status: InsightStatus,
        clause: str,
        details: str,
        source: str,
    ) -> bool:
        return self.add(RegulatoryInsight(
            ingredient=ingredient,
            status=status,
            clause=clause,
            details=details,
            source=source,
        ))

    @property
    def insights(self) -> List[RegulatoryInsight]:
        return list(self._insights)

    def __len__(self) -> int:
        return len(self._insights)
