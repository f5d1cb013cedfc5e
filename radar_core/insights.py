# radar_core/insights.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

from . import config
from .omissions import round_half_up
from .types import Answers, Dilemma, HORIZONS, ScoreResult


def consistency_index(std_dev: float) -> int:
    # std-dev 0 -> 100, CONSISTENCY_INDEX_SPAN or more -> 0
    raw = round_half_up((1.0 - float(std_dev) / config.CONSISTENCY_INDEX_SPAN) * 100.0)
    return max(0, min(100, raw))


def axis_percentages(x: float, y: float) -> Dict[str, int]:
    return {
        "people": round_half_up(float(x) / config.LIKERT_MAX * 100.0),
        "results": round_half_up(float(y) / config.LIKERT_MAX * 100.0),
    }


def horizon_gaps(horizons: Dict[int, float], level: str) -> Dict[int, float]:
    """Actual minus expected horizon average for the respondent level."""
    ideal = config.IDEAL_HORIZON_CURVES.get(level) or config.IDEAL_HORIZON_CURVES["Common"]
    return {h: round(float(horizons.get(h, 0.0)) - ideal[h], 1) for h in HORIZONS}


def category_extremes(categories: Dict[str, float]) -> Tuple[Optional[str], Optional[str]]:
    if not categories:
        return None, None
    ranked = sorted(categories.items(), key=lambda kv: kv[1])
    return ranked[0][0], ranked[-1][0]


def dilemma_recommendations(dilemmas: Sequence[Dilemma], answers: Answers) -> List[Dict[str, str]]:
    """Recommendations for dilemmas answered with their lowest-valued option."""
    out: List[Dict[str, str]] = []
    for d in dilemmas:
        if not d.low_score_recommendation or not d.options:
            continue
        val = answers.get(d.id)
        if val is None:
            continue
        if int(val) == min(o.value for o in d.options):
            out.append({"id": d.id, "title": d.title, "recommendation": d.low_score_recommendation})
    return out


def build_insights(result: ScoreResult, dilemmas: Sequence[Dilemma], answers: Answers) -> Dict[str, object]:
    lowest, highest = category_extremes(result.categories)
    return {
        "consistency_index": consistency_index(result.consistency.std_dev),
        "axis_percentages": axis_percentages(result.matrix.x, result.matrix.y),
        "horizon_gaps": horizon_gaps(result.horizons, result.level),
        "lowest_category": lowest,
        "highest_category": highest,
        "recommendations": dilemma_recommendations(dilemmas, answers),
    }
