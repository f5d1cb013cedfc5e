
from __future__ import annotations
from dataclasses import dataclass
from statistics import pstdev
from typing import Callable, Dict, List, Sequence, Tuple

from . import config
from .normalizer import invert
from .types import Answers, CategoryValidation, ConsistencyResult, Question, ROLES

STATUS_MESSAGES: Dict[str, str] = {
    "Contradictory": "There is a misalignment between your aspirational vision and your day-to-day practice.",
    "Fragmented": "Your profile shows important inconsistencies between fundamental roles.",
    "Imbalanced": "You have clear strengths, but marked weaknesses in other roles.",
    "Consistent": "You show balanced practices and maturity between intention and behaviour.",
    "Balanced": "You show natural tendencies in some roles while keeping good overall coherence.",
}


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation; 0 for an empty sequence."""
    if not values: return 0.0
    return float(pstdev(values))


@dataclass
class RoleSpread:
    scores: Dict[str, float]
    std: float
    low: float
    high: float


def _contradictory(p: RoleSpread) -> bool:
    aspirational = p.scores.get(config.ASPIRATIONAL_ROLE, 0.0)
    return aspirational >= config.CONTRADICTORY_HIGH and any(
        p.scores.get(r, 0.0) <= config.CONTRADICTORY_LOW for r in config.FOUNDATIONAL_ROLES
    )


def _fragmented(p: RoleSpread) -> bool:
    critical = sum(1 for v in p.scores.values() if v < config.FRAGMENTED_CRITICAL_ROLE)
    split = p.high >= config.SPLIT_HIGH and p.low <= config.SPLIT_LOW
    return p.std > config.FRAGMENTED_STD or critical >= config.FRAGMENTED_CRITICAL_COUNT or split


def _imbalanced(p: RoleSpread) -> bool:
    return p.std >= config.IMBALANCED_STD or (p.high - p.low) > config.IMBALANCED_SPREAD


def _consistent(p: RoleSpread) -> bool:
    strong = sum(1 for v in p.scores.values() if v > config.CONSISTENT_STRONG_ROLE)
    return (
        p.std <= config.CONSISTENT_STD
        and p.low >= config.CONSISTENT_MIN_ROLE
        and strong >= config.CONSISTENT_STRONG_COUNT
    )


# Evaluated top to bottom, first match wins. Order is the precedence.
STATUS_RULES: List[Tuple[Callable[[RoleSpread], bool], str]] = [
    (_contradictory, "Contradictory"),
    (_fragmented, "Fragmented"),
    (_imbalanced, "Imbalanced"),
    (_consistent, "Consistent"),
]
DEFAULT_STATUS = "Balanced"


def role_status(role_scores: Dict[str, float]) -> Tuple[str, float]:
    """Classify the canonical role averages; returns (status, std-dev)."""
    scores = {r: float(role_scores.get(r, 0.0)) for r in ROLES}
    vals = list(scores.values())
    spread = RoleSpread(scores=scores, std=std_dev(vals), low=min(vals), high=max(vals))
    for predicate, status in STATUS_RULES:
        if predicate(spread):
            return status, spread.std
    return DEFAULT_STATUS, spread.std


def _resolved(q: Question, answers: Answers):
    raw = answers.get(q.id)
    if raw is None:
        return None
    return invert(raw) if q.inverted else raw


def contradiction_pairs(questions: Sequence[Question], answers: Answers) -> List[str]:
    """Flag avoidant items that disagree with the active items they mirror.

    Only questions take part; dilemma ids never appear in the pair table.
    """
    by_id = {q.id: q for q in questions}
    out: List[str] = []
    for avoidant_id, active_ids in config.CONTRADICTION_PAIRS.items():
        main_q = by_id.get(avoidant_id)
        if main_q is None: continue
        main_val = _resolved(main_q, answers)
        if main_val is None: continue
        related = [_resolved(by_id[i], answers) for i in active_ids if i in by_id]
        related = [v for v in related if v is not None]
        if not related: continue
        related_avg = sum(related) / len(related)
        if abs(main_val - related_avg) > config.PAIR_GAP_THRESHOLD:
            theme = main_q.categories[0] if main_q.categories else (main_q.category or "Behaviour")
            out.append(f"Inconsistency detected in the {theme} theme (Q{avoidant_id}).")
    return out


def category_clusters(category_values: Dict[str, List[int]]) -> Tuple[Dict[str, CategoryValidation], List[str]]:
    details: Dict[str, CategoryValidation] = {}
    flagged: List[str] = []
    for cat, values in category_values.items():
        if len(values) < config.CLUSTER_MIN_ANSWERS: continue
        sd = std_dev(values)
        if sd >= config.CLUSTER_STD_THRESHOLD:
            details[cat] = CategoryValidation(status="Inconsistent", std_dev=round(sd, 2))
            flagged.append(f"Contradictory answers within {cat} (dispersion {sd:.2f}).")
        else:
            details[cat] = CategoryValidation(status="Consistent", std_dev=round(sd, 2))
    return details, flagged


def _dedupe(messages: Sequence[str]) -> List[str]:
    seen = set(); out = []
    for m in messages:
        if m in seen: continue
        seen.add(m); out.append(m)
    return out


def check_consistency(
    role_scores: Dict[str, float],
    category_values: Dict[str, List[int]],
    questions: Sequence[Question],
    answers: Answers,
) -> ConsistencyResult:
    status, sd = role_status(role_scores)
    details, cluster_msgs = category_clusters(category_values)
    messages = _dedupe(contradiction_pairs(questions, answers) + cluster_msgs)
    return ConsistencyResult(
        std_dev=round(sd, 2),
        status=status,  # type: ignore[arg-type]
        message=STATUS_MESSAGES[status],
        internal_inconsistencies=messages,
        category_details=details,
    )
