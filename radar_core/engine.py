# radar_core/engine.py
from __future__ import annotations
from typing import Dict, Sequence
import logging

from .aggregator import Accumulators, aggregate
from .cross_validation import cross_validate
from .matrix import classify
from .normalizer import normalize_all
from .omissions import analyze_omissions, round_half_up
from .types import (
    AXIS_PEOPLE,
    AXIS_RESULTS,
    HORIZONS,
    Answers,
    BlockResult,
    Dilemma,
    MatrixResult,
    Question,
    RoleResult,
    ScoreResult,
)
from .validators import check_consistency

log = logging.getLogger(__name__)


def _total(acc: Accumulators) -> int:
    if acc.max_sum <= 0:
        return 0
    return round_half_up(acc.weighted_sum / acc.max_sum * 100.0)


def _predominant_horizon(acc: Accumulators) -> int:
    best, best_avg = 0, -1.0
    for h in HORIZONS:
        avg = acc.horizons[h].avg
        if avg > best_avg:
            best, best_avg = h, avg
    return best


def _matrix(acc: Accumulators) -> MatrixResult:
    people = acc.axes[AXIS_PEOPLE].avg
    results = acc.axes[AXIS_RESULTS].avg
    quadrant, name = classify(people, results)
    return MatrixResult(x=round(people, 2), y=round(results, 2), quadrant=quadrant, quadrant_name=name)


def _roles(acc: Accumulators) -> Dict[str, RoleResult]:
    return {
        role: RoleResult(
            score=round(stat.avg, 2),
            horizons={h: round(stat.horizons[h].avg, 1) for h in HORIZONS},
        )
        for role, stat in acc.roles.items()
    }


def score(
    questions: Sequence[Question],
    dilemmas: Sequence[Dilemma],
    answers: Answers,
    level: str,
) -> ScoreResult:
    """Score one assessment.

    Pure: the catalogs and answers are only read, and every accumulator is
    local to this call. Questions are expected to be pre-filtered for
    ``level`` by the caller; ``level`` only selects the weighting policy.
    """
    items = normalize_all(questions, dilemmas, answers)
    acc = aggregate(items, level)

    # Analysis stages read unrounded averages; rounding happens on output only.
    role_overall = {role: stat.avg for role, stat in acc.roles.items()}
    consistency = check_consistency(role_overall, acc.category_values, questions, answers)
    role_validation = cross_validate(role_overall, acc.dilemma_roles)
    omission = analyze_omissions(acc.omitted, len(questions) + len(dilemmas))

    result = ScoreResult(
        total=_total(acc),
        matrix=_matrix(acc),
        roles=_roles(acc),
        horizons={h: round(acc.horizons[h].avg, 1) for h in HORIZONS},
        blocks={
            name: BlockResult(score=round(b.avg, 2), horizon=b.dominant_horizon())
            for name, b in acc.blocks.items()
        },
        categories={name: round(c.avg, 2) for name, c in acc.categories.items()},
        consistency=consistency,
        role_validation=role_validation,
        predominant_horizon=_predominant_horizon(acc),
        omission_analysis=omission,
        level=level,
    )
    log.debug(
        "scored level=%s total=%d quadrant=%s status=%s omitted=%d",
        level, result.total, result.matrix.quadrant_name, consistency.status, omission.count,
    )
    return result
