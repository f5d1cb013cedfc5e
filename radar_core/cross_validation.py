# radar_core/cross_validation.py
from __future__ import annotations
from typing import Dict, List

from . import config
from .aggregator import Stat
from .types import ROLES, RoleDivergence, RoleValidation


def _alert(d: RoleDivergence) -> str:
    verdict = "over-estimated" if d.direction == "over" else "under-estimated"
    return (
        f"{d.role}: self-rating {d.declared:.2f} vs situational {d.situational:.2f} "
        f"(gap {d.gap:.2f}); declarative score looks {verdict} against dilemma choices."
    )


def cross_validate(role_overall: Dict[str, float], dilemma_roles: Dict[str, Stat]) -> RoleValidation:
    """Compare each role's overall average with its dilemma-only average.

    role_overall: { role: unrounded average over every contributing item }
    dilemma_roles: { role: Stat fed only by dilemmas }
    Roles without dilemma observations are skipped.
    """
    divergences: List[RoleDivergence] = []
    for role in ROLES:
        sit = dilemma_roles.get(role)
        if sit is None or sit.count == 0:
            continue
        declared = float(role_overall.get(role, 0.0))
        situational = sit.avg
        gap = declared - situational
        if abs(gap) <= config.CROSS_VALIDATION_GAP:
            continue
        divergences.append(
            RoleDivergence(
                role=role,
                declared=round(declared, 2),
                situational=round(situational, 2),
                gap=round(abs(gap), 2),
                direction="over" if gap > 0 else "under",
            )
        )
    return RoleValidation(alerts=[_alert(d) for d in divergences], divergences=divergences)
