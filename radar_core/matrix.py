# radar_core/matrix.py
from __future__ import annotations
from typing import Dict, Tuple

from . import config

# (people bucket, results bucket) -> (quadrant, name)
QUADRANTS: Dict[Tuple[str, str], Tuple[int, str]] = {
    ("Low", "Low"): (1, "Technical"),
    ("Medium", "Low"): (2, "Executor"),
    ("High", "Low"): (3, "Demanding"),
    ("Low", "Medium"): (4, "Relational"),
    ("Medium", "Medium"): (5, "Balanced"),
    ("High", "Medium"): (6, "Strategic"),
    ("Low", "High"): (7, "Inspirational"),
    ("Medium", "High"): (8, "Builder"),
    ("High", "High"): (9, "Complete"),
}


def bucket(score: float) -> str:
    s = float(score)
    if s < config.MATRIX_MEDIUM_FROM: return "Low"
    if s < config.MATRIX_HIGH_FROM: return "Medium"
    return "High"


def classify(people: float, results: float) -> Tuple[int, str]:
    return QUADRANTS[(bucket(people), bucket(results))]
