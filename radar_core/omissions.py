"""Decision-readiness from skipped (time-boxed) items."""
from __future__ import annotations
import math
from typing import Dict, List, Sequence

from . import config
from .normalizer import NormalizedItem
from .types import OmissionAnalysis


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def readiness_index(omitted: int, total: int) -> int:
    if total <= 0:
        return 100
    return max(0, min(100, round_half_up(100.0 - 100.0 * omitted / total)))


def impacted_categories(omitted: Sequence[NormalizedItem], top: int) -> List[str]:
    tally: Dict[str, int] = {}
    for item in omitted:
        for cat in item.categories:
            tally[cat] = tally.get(cat, 0) + 1
    # sorted() is stable: ties keep first-seen order
    ranked = sorted(tally.items(), key=lambda kv: kv[1], reverse=True)
    return [cat for cat, _ in ranked[:max(0, top)]]


def _interpretation(count: int, categories: List[str]) -> str:
    if categories:
        return (
            "Under time pressure you hesitated most on "
            + ", ".join(categories)
            + ". These themes may need more clarity before you decide."
        )
    if count == 0:
        return "Excellent! You answered every item within the time limit, showing strong decision readiness."
    return "Your hesitations were dispersed across themes, with no concentrated pattern."


def analyze_omissions(omitted: Sequence[NormalizedItem], total_items: int) -> OmissionAnalysis:
    count = len(omitted)
    pct = round(100.0 * count / total_items, 1) if total_items > 0 else 0.0
    cats = impacted_categories(omitted, config.OMISSION_TOP_CATEGORIES)
    return OmissionAnalysis(
        count=count,
        percentage=pct,
        readiness_index=readiness_index(count, total_items),
        main_impacted_categories=cats,
        interpretation=_interpretation(count, cats),
    )
