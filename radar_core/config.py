from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

# 9-box axis buckets: Low < MATRIX_MEDIUM_FROM <= Medium < MATRIX_HIGH_FROM <= High
MATRIX_MEDIUM_FROM: float = 2.5
MATRIX_HIGH_FROM: float = 4.0

# level -> (boosted horizons, boost); anything else weighs 1.0
LEVEL_WEIGHTS: dict[str, tuple[tuple[int, ...], float]] = {
    "L1": ((0, 1), 1.5),
    "L2": ((1, 2), 1.25),
    "L3": ((2, 3), 1.5),
}
DILEMMA_WEIGHT: float = 1.0

# Role dispersion cascade
ASPIRATIONAL_ROLE: str = "Intrapreneur"
FOUNDATIONAL_ROLES: tuple[str, ...] = ("Leader", "Manager")
CONTRADICTORY_HIGH: float = 4.5
CONTRADICTORY_LOW: float = 2.5
FRAGMENTED_STD: float = 0.90
FRAGMENTED_CRITICAL_ROLE: float = 2.8
FRAGMENTED_CRITICAL_COUNT: int = 2
SPLIT_HIGH: float = 4.0
SPLIT_LOW: float = 2.0
IMBALANCED_STD: float = 0.56
IMBALANCED_SPREAD: float = 1.5
CONSISTENT_STD: float = 0.30
CONSISTENT_MIN_ROLE: float = 3.0
CONSISTENT_STRONG_ROLE: float = 4.0
CONSISTENT_STRONG_COUNT: int = 2

# Static contradiction pairs: avoidant question id -> active ids it should mirror
CONTRADICTION_PAIRS: dict[int, tuple[int, ...]] = {
    10: (6,),
    22: (13, 14),
    49: (40, 42),
    62: (6,),
    80: (67, 69),
    99: (92, 93),
    110: (102,),
    149: (139,),
    199: (193,),
}
PAIR_GAP_THRESHOLD: float = 2.0
# Same-category std-dev that mixing 1s and 5s produces; kept separate from the pair gap.
CLUSTER_STD_THRESHOLD: float = 1.2
CLUSTER_MIN_ANSWERS: int = 2

CROSS_VALIDATION_GAP: float = 1.25

OMISSION_TOP_CATEGORIES: int = 3

# Expected horizon profile per level (H0..H4), used by insights.
IDEAL_HORIZON_CURVES: dict[str, tuple[float, ...]] = {
    "L1": (4.2, 4.0, 3.0, 2.0, 1.5),
    "L2": (3.5, 4.0, 4.2, 3.0, 2.0),
    "L3": (2.0, 3.0, 4.0, 4.5, 3.5),
    "L4": (1.5, 2.5, 3.5, 4.5, 4.5),
    "Common": (3.0, 3.0, 3.0, 3.0, 3.0),
}
CONSISTENCY_INDEX_SPAN: float = 1.5

CATALOG_DIR: str | None = None
DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "item_id",
    "source",
    "value",
    "weight",
    "axis",
    "roles",
    "horizons",
    "categories",
)
# env overrides for staging/ops; defaults match the published scoring rules.
PAIR_GAP_THRESHOLD = _env_float("PAIR_GAP_THRESHOLD", PAIR_GAP_THRESHOLD)
CLUSTER_STD_THRESHOLD = _env_float("CLUSTER_STD_THRESHOLD", CLUSTER_STD_THRESHOLD)
CROSS_VALIDATION_GAP = _env_float("CROSS_VALIDATION_GAP", CROSS_VALIDATION_GAP)
OMISSION_TOP_CATEGORIES = _env_int("OMISSION_TOP_CATEGORIES", OMISSION_TOP_CATEGORIES)
CATALOG_DIR = os.getenv("CATALOG_DIR") or None
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)


def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("CATALOG_DIR"): cfg["CATALOG_DIR"] = e.get("CATALOG_DIR")
    if e.get("DEFAULT_LEVEL"): cfg["DEFAULT_LEVEL"] = e.get("DEFAULT_LEVEL")
    if e.get("LOG_LEVEL"): cfg["LOG_LEVEL"] = e.get("LOG_LEVEL")
    return cfg
