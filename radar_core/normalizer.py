from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, TypeVar

from . import config
from .errors import AnswerError
from .types import Answers, Dilemma, Question

T = TypeVar("T")


@dataclass
class NormalizedItem:
    """One presented item, resolved to the shape every accumulator reads."""

    item_id: object
    source: str  # "question" | "dilemma"
    value: Optional[int]
    omitted: bool
    axis: str
    block: str
    weight_horizon: Optional[int]
    categories: List[str] = field(default_factory=list)
    roles: List[str] = field(default_factory=list)
    horizons: List[int] = field(default_factory=list)


def _unique(values: Iterable[T]) -> List[T]:
    out: List[T] = []
    for v in values:
        if v not in out:
            out.append(v)
    return out


def expand_tags(explicit: Optional[Sequence[T]], legacy: Optional[T]) -> List[T]:
    """Explicit tag lists win; otherwise a singleton from the legacy tag.

    Blank legacy tags ("" or None) expand to an empty list.
    """
    if explicit is not None:
        return _unique(t for t in explicit if t is not None and t != "")
    if legacy is None or legacy == "":
        return []
    return [legacy]


def invert(value: int) -> int:
    return (config.LIKERT_MIN + config.LIKERT_MAX) - value


def normalize_question(q: Question, raw: Optional[int]) -> NormalizedItem:
    omitted = raw is None
    value = None
    if not omitted:
        value = invert(int(raw)) if q.inverted else int(raw)
    horizons = expand_tags(q.horizons, q.horizon)
    return NormalizedItem(
        item_id=q.id,
        source="question",
        value=value,
        omitted=omitted,
        axis=q.axis,
        block=q.block,
        weight_horizon=horizons[0] if horizons else None,
        categories=expand_tags(q.categories, q.category),
        roles=expand_tags(q.roles, q.role),
        horizons=horizons,
    )


def normalize_dilemma(d: Dilemma, raw: Optional[int]) -> NormalizedItem:
    # Option values already encode direction; never inverted.
    omitted = raw is None
    roles = _unique(r for r in (d.role, d.secondary_role) if r)
    return NormalizedItem(
        item_id=d.id,
        source="dilemma",
        value=None if omitted else int(raw),
        omitted=omitted,
        axis=d.axis,
        block=d.block,
        weight_horizon=None,
        categories=expand_tags(None, d.category),
        roles=roles,
        horizons=expand_tags(None, d.horizon),
    )


def normalize_all(questions: Sequence[Question], dilemmas: Sequence[Dilemma], answers: Answers) -> List[NormalizedItem]:
    """Resolve every presented item, questions first then dilemmas.

    Items whose id is absent from ``answers`` were never presented and are
    dropped here.
    """
    items: List[NormalizedItem] = []
    for q in questions:
        if q.id in answers:
            items.append(normalize_question(q, answers[q.id]))
    for d in dilemmas:
        if d.id in answers:
            items.append(normalize_dilemma(d, answers[d.id]))
    return items


def validate_answers(answers: Answers) -> None:
    """Enforce the intake contract: integers in 1..5 or None."""
    for item_id, value in answers.items():
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise AnswerError(item_id, value)
        if not config.LIKERT_MIN <= value <= config.LIKERT_MAX:
            raise AnswerError(item_id, value)
