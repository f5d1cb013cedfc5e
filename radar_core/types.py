
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Dict, Mapping, Optional, Literal, Tuple, Union

LeadershipLevel = Literal["L1", "L2", "L3", "L4", "Common"]
Horizon = int  # 0..4
ItemId = Union[int, str]
# None marks an explicit, time-boxed skip; a missing key means "never presented".
Answers = Dict[ItemId, Optional[int]]
OMITTED = None

LEVELS: tuple[str, ...] = ("L1", "L2", "L3", "L4", "Common")
AXIS_PEOPLE = "People"
AXIS_RESULTS = "Results"
AXIS_BOTH = "Both"
AXES: tuple[str, ...] = (AXIS_PEOPLE, AXIS_RESULTS)
ROLES: tuple[str, ...] = ("Leader", "Manager", "Strategist", "Intrapreneur")
HORIZONS: tuple[int, ...] = (0, 1, 2, 3, 4)
HORIZON_LABELS: Dict[int, str] = {0: "Immediate", 1: "Short", 2: "Medium", 3: "Long", 4: "Expansion"}


def _freeze(obj: Any, **fields: Any) -> None:
    # results are snapshots: mappings become read-only views, lists become tuples
    for name, value in fields.items():
        frozen = MappingProxyType(dict(value)) if isinstance(value, Mapping) else tuple(value)
        object.__setattr__(obj, name, frozen)


@dataclass
class Question:
    id: int; text: str; block: str; level: str; axis: str
    category: str = ""
    role: str = ""
    inverted: bool = False
    horizon: Optional[int] = None
    categories: Optional[List[str]] = None
    roles: Optional[List[str]] = None
    horizons: Optional[List[int]] = None


@dataclass
class DilemmaOption:
    text: str; value: int  # 1 (low), 3 (medium), 5 (high)


@dataclass
class Dilemma:
    id: str; title: str; scenario: str; block: str; axis: str; category: str; role: str
    horizon: int = 0
    secondary_role: Optional[str] = None
    options: List[DilemmaOption] = field(default_factory=list)
    low_score_recommendation: Optional[str] = None


@dataclass(frozen=True)
class RoleResult:
    score: float
    horizons: Mapping[int, float]

    def __post_init__(self) -> None:
        _freeze(self, horizons=self.horizons)


@dataclass(frozen=True)
class BlockResult:
    score: float
    horizon: int  # dominant horizon by plurality


@dataclass(frozen=True)
class MatrixResult:
    x: float  # People
    y: float  # Results
    quadrant: int
    quadrant_name: str


@dataclass(frozen=True)
class CategoryValidation:
    status: Literal["Consistent", "Inconsistent"]
    std_dev: float


ConsistencyStatus = Literal["Consistent", "Balanced", "Imbalanced", "Fragmented", "Contradictory"]


@dataclass(frozen=True)
class ConsistencyResult:
    std_dev: float
    status: ConsistencyStatus
    message: str
    internal_inconsistencies: Tuple[str, ...] = ()
    category_details: Mapping[str, CategoryValidation] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze(self, internal_inconsistencies=self.internal_inconsistencies, category_details=self.category_details)


@dataclass(frozen=True)
class RoleDivergence:
    role: str
    declared: float
    situational: float
    gap: float
    direction: Literal["over", "under"]


@dataclass(frozen=True)
class RoleValidation:
    alerts: Tuple[str, ...] = ()
    divergences: Tuple[RoleDivergence, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, alerts=self.alerts, divergences=self.divergences)


@dataclass(frozen=True)
class OmissionAnalysis:
    count: int
    percentage: float
    readiness_index: int  # 0..100
    main_impacted_categories: Tuple[str, ...]
    interpretation: str

    def __post_init__(self) -> None:
        _freeze(self, main_impacted_categories=self.main_impacted_categories)


@dataclass(frozen=True)
class ScoreResult:
    total: int  # 0..100
    matrix: MatrixResult
    roles: Mapping[str, RoleResult]
    horizons: Mapping[int, float]
    blocks: Mapping[str, BlockResult]
    categories: Mapping[str, float]
    consistency: ConsistencyResult
    role_validation: RoleValidation
    predominant_horizon: int
    omission_analysis: OmissionAnalysis
    level: str = "Common"

    def __post_init__(self) -> None:
        _freeze(self, roles=self.roles, horizons=self.horizons, blocks=self.blocks, categories=self.categories)

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly snapshot for reporting layers."""

        return {
            "total": self.total,
            "level": self.level,
            "matrix": {
                "x": self.matrix.x,
                "y": self.matrix.y,
                "quadrant": self.matrix.quadrant,
                "quadrant_name": self.matrix.quadrant_name,
            },
            "roles": {
                name: {"score": r.score, "horizons": dict(r.horizons)}
                for name, r in self.roles.items()
            },
            "horizons": dict(self.horizons),
            "blocks": {name: {"score": b.score, "horizon": b.horizon} for name, b in self.blocks.items()},
            "categories": dict(self.categories),
            "consistency": {
                "std_dev": self.consistency.std_dev,
                "status": self.consistency.status,
                "message": self.consistency.message,
                "internal_inconsistencies": list(self.consistency.internal_inconsistencies),
                "category_details": {
                    cat: {"status": v.status, "std_dev": v.std_dev}
                    for cat, v in self.consistency.category_details.items()
                },
            },
            "role_validation": {
                "alerts": list(self.role_validation.alerts),
                "divergences": [vars(d).copy() for d in self.role_validation.divergences],
            },
            "predominant_horizon": self.predominant_horizon,
            "omission_analysis": {
                "count": self.omission_analysis.count,
                "percentage": self.omission_analysis.percentage,
                "readiness_index": self.omission_analysis.readiness_index,
                "main_impacted_categories": list(self.omission_analysis.main_impacted_categories),
                "interpretation": self.omission_analysis.interpretation,
            },
        }
