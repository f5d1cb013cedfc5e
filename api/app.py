from __future__ import annotations
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import logging, os, typing as t

from radar_core.catalog import catalog_for_level, dilemma_from_dict, question_from_dict
from radar_core.config import load_config
from radar_core.engine import score
from radar_core.errors import AnswerError, CatalogError
from radar_core.insights import build_insights
from radar_core.normalizer import validate_answers
from radar_core.types import LEVELS

log = logging.getLogger(__name__)

app = FastAPI(title="Leadership Radar API")


@app.get("/")
def root():
    return {"status": "ok", "service": "leadership-radar-api"}


ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class ScoreReq(BaseModel):
    level: str
    # keys are question ids ("10") or dilemma ids ("D1"); null = skipped under time pressure
    answers: dict[str, int | None] = Field(default_factory=dict)
    questions: list[dict[str, t.Any]] | None = None
    dilemmas: list[dict[str, t.Any]] | None = None


# ---- Helpers ----
def _check_level(level: str) -> str:
    if level not in LEVELS:
        raise HTTPException(422, f"unknown level {level!r}; expected one of {list(LEVELS)}")
    return level


def _answer_keys(raw: dict[str, int | None], questions, dilemmas) -> dict[int | str, int | None]:
    # JSON object keys are strings; resolve each against the catalog being scored.
    question_ids = {str(q.id): q.id for q in questions}
    dilemma_ids = {str(d.id): d.id for d in dilemmas}
    out: dict[int | str, int | None] = {}
    for key, val in raw.items():
        if key in dilemma_ids:
            if key in question_ids:
                log.warning("answer key %r matches both a question and a dilemma; using the dilemma", key)
            out[dilemma_ids[key]] = val
        else:
            out[question_ids.get(key, key)] = val
    return out


def _serialize_catalog(questions, dilemmas) -> dict[str, t.Any]:
    return {
        "questions": [
            {"id": q.id, "text": q.text, "block": q.block, "level": q.level, "inverted": q.inverted}
            for q in questions
        ],
        "dilemmas": [
            {
                "id": d.id,
                "title": d.title,
                "scenario": d.scenario,
                "options": [{"text": o.text, "value": o.value} for o in d.options],
            }
            for d in dilemmas
        ],
    }


# ---- Health ----
@app.get("/health")
def health():
    cfg = load_config()
    return {
        "catalog_dir": cfg.get("CATALOG_DIR") or "bundled",
        "levels": list(LEVELS),
    }


@app.get("/catalog")
def get_catalog(level: str = Query(..., description="Respondent level, e.g. L2")):
    _check_level(level)
    try:
        questions, dilemmas = catalog_for_level(level)
    except CatalogError as exc:
        raise HTTPException(500, str(exc))
    return {"level": level, **_serialize_catalog(questions, dilemmas)}


@app.post("/score")
def score_endpoint(req: ScoreReq):
    level = _check_level(req.level)
    # either list switches to an inline catalog; the other then defaults to empty
    inline = req.questions is not None or req.dilemmas is not None
    try:
        if not inline:
            questions, dilemmas = catalog_for_level(level)
        else:
            questions = [question_from_dict(r) for r in req.questions or []]
            dilemmas = [dilemma_from_dict(r) for r in req.dilemmas or []]
    except CatalogError as exc:
        # inline catalogs are client input; bundled catalog failures are ours
        status = 422 if inline else 500
        raise HTTPException(status, str(exc))
    answers = _answer_keys(req.answers, questions, dilemmas)
    try:
        validate_answers(answers)
    except AnswerError as exc:
        raise HTTPException(422, str(exc))
    result = score(questions, dilemmas, answers, level)
    log.info("scored level=%s total=%d quadrant=%s", level, result.total, result.matrix.quadrant_name)
    return {"result": result.to_dict(), "insights": build_insights(result, dilemmas, answers)}
