from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

from .catalog import catalog_for_level
from .config import DEBUG_TRACE, TRACE_FIELDS
from .engine import score
from .normalizer import invert
from .types import Answers, Dilemma, LEVELS, Question, ScoreResult


def _maybe_enable_trace() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if DEBUG_TRACE:
        logging.getLogger("radar_core.aggregator").setLevel(logging.INFO)


def _intended(q: Question, effective: int) -> int:
    # raw answer that produces ``effective`` after inversion
    return invert(effective) if q.inverted else effective


def _strong(questions: Sequence[Question], dilemmas: Sequence[Dilemma]) -> Answers:
    answers: Answers = {q.id: _intended(q, 5) for q in questions}
    answers.update({d.id: 5 for d in dilemmas})
    return answers


def _overrater(questions: Sequence[Question], dilemmas: Sequence[Dilemma]) -> Answers:
    answers: Answers = {q.id: _intended(q, 5) for q in questions}
    answers.update({d.id: 1 for d in dilemmas})
    return answers


def _hesitant(questions: Sequence[Question], dilemmas: Sequence[Dilemma]) -> Answers:
    answers: Answers = {}
    for idx, q in enumerate(questions):
        answers[q.id] = None if idx % 3 == 0 else _intended(q, 3)
    for idx, d in enumerate(dilemmas):
        answers[d.id] = None if idx % 2 == 0 else 3
    return answers


def _raw_literal(questions: Sequence[Question], dilemmas: Sequence[Dilemma]) -> Answers:
    # answers 5 everywhere, including avoidant items, to trip contradiction pairs
    answers: Answers = {q.id: 5 for q in questions}
    answers.update({d.id: 3 for d in dilemmas})
    return answers


ARCHETYPES: Dict[str, Callable[[Sequence[Question], Sequence[Dilemma]], Answers]] = {
    "strong": _strong,
    "overrater": _overrater,
    "hesitant": _hesitant,
    "raw_literal": _raw_literal,
}


def run_archetypes(level: str) -> Dict[str, ScoreResult]:
    questions, dilemmas = catalog_for_level(level)
    return {name: score(questions, dilemmas, build(questions, dilemmas), level) for name, build in ARCHETYPES.items()}


def main(levels: List[str] | None = None) -> None:
    _maybe_enable_trace()
    logging.info("Trace fields: %s", ", ".join(TRACE_FIELDS))
    for level in levels or [lvl for lvl in LEVELS if lvl != "Common"]:
        for name, res in run_archetypes(level).items():
            logging.info(
                "%s/%s total=%d quadrant=%s status=%s readiness=%d alerts=%d flags=%d",
                level,
                name,
                res.total,
                res.matrix.quadrant_name,
                res.consistency.status,
                res.omission_analysis.readiness_index,
                len(res.role_validation.alerts),
                len(res.consistency.internal_inconsistencies),
            )


if __name__ == "__main__":
    main()
