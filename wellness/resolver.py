"""
Name resolution: raw ingredient text -> canonical knowledge-base key.

Canonical keys match only as whole words so short keys do not fire inside
longer words. Synonym phrases match by plain substring, which supports
"contains cane sugar" but also lets an alias fire inside an unrelated token
(e.g. "ins 2110" resolves through "ins 211").
"""
import logging
from typing import Iterable, List, Optional, Tuple

from wellness.knowledge_base.master_data import FSSAI_MASTER_DATA, INGREDIENT_SYNONYMS
from wellness.text import contains_word, normalize_text

logger = logging.getLogger(__name__)


def resolve_canonical_key(raw_ingredient: str) -> Optional[str]:
    """Return the canonical key `raw_ingredient` refers to, or None."""
    norm = normalize_text(raw_ingredient)
    if not norm:
        return None

    # 1. Exact alias
    if norm in INGREDIENT_SYNONYMS:
        return INGREDIENT_SYNONYMS[norm]

    # 2. Canonical key, exact or as a whole word
    for key in FSSAI_MASTER_DATA:
        if contains_word(norm, key):
            return key

    # 3. Alias anywhere in the text
    for alias, key in INGREDIENT_SYNONYMS.items():
        if alias in norm:
            return key

    logger.debug("No canonical key for ingredient %r", raw_ingredient)
    return None


def resolve_ingredients(ingredients: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Resolve a list of raw ingredients to (raw, canonical_key) pairs.

    Each canonical key appears once, paired with the first raw string that
    resolved to it. Unresolvable strings are dropped.
    """
    resolved: List[Tuple[str, str]] = []
    seen = set()

    for raw in ingredients:
        key = resolve_canonical_key(raw)
        if key is None or key in seen:
            continue
        seen.add(key)
        resolved.append((raw, key))

    return resolved
