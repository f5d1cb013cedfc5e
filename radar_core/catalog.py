
from __future__ import annotations
import json, logging, importlib.resources as ir
from pathlib import Path
from typing import List, Sequence, Tuple

from . import config
from .errors import CatalogError
from .types import Dilemma, DilemmaOption, LEVELS, Question

log = logging.getLogger(__name__)

COMMON_LEVEL = "Common"


def _read(name: str) -> list:
    try:
        if config.CATALOG_DIR:
            text = (Path(config.CATALOG_DIR) / name).read_text(encoding="utf-8")
        else:
            text = ir.files(__package__).joinpath(f"data/{name}").read_text(encoding="utf-8")
        raw = json.loads(text)
    except (OSError, ValueError) as exc:
        raise CatalogError(f"cannot read catalog file {name}: {exc}") from exc
    if not isinstance(raw, list):
        raise CatalogError(f"catalog file {name} must hold a JSON list")
    return raw


def question_from_dict(r: dict) -> Question:
    try:
        q = Question(**r)
    except TypeError as exc:
        raise CatalogError(f"bad question entry {r.get('id')!r}: {exc}") from exc
    if q.level not in LEVELS:
        raise CatalogError(f"question {q.id} has unknown level {q.level!r}")
    return q


def dilemma_from_dict(r: dict) -> Dilemma:
    data = dict(r)
    try:
        data["options"] = [DilemmaOption(**o) for o in data.get("options", [])]
        return Dilemma(**data)
    except TypeError as exc:
        raise CatalogError(f"bad dilemma entry {r.get('id')!r}: {exc}") from exc


def load_questions() -> List[Question]:
    return [question_from_dict(r) for r in _read("questions.json")]


def load_dilemmas() -> List[Dilemma]:
    return [dilemma_from_dict(r) for r in _read("dilemmas.json")]


def filter_for_level(questions: Sequence[Question], level: str) -> List[Question]:
    """Items a respondent of ``level`` is shown: common ones plus their own level."""
    return [q for q in questions if q.level == COMMON_LEVEL or q.level == level]


def catalog_for_level(level: str) -> Tuple[List[Question], List[Dilemma]]:
    questions = filter_for_level(load_questions(), level)
    dilemmas = load_dilemmas()
    log.debug("catalog for %s: %d questions, %d dilemmas", level, len(questions), len(dilemmas))
    return questions, dilemmas
