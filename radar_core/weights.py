# radar_core/weights.py
from __future__ import annotations
from typing import Optional

from . import config


def weight(level: str, horizon: Optional[int]) -> float:
    """Relevance of a horizon to overall maturity for a respondent level."""
    rule = config.LEVEL_WEIGHTS.get(level)
    if rule is None or horizon is None:
        return 1.0
    boosted, boost = rule
    return float(boost) if horizon in boosted else 1.0


def item_weight(level: str, source: str, horizon: Optional[int]) -> float:
    if source == "dilemma":
        return config.DILEMMA_WEIGHT
    return weight(level, horizon)
