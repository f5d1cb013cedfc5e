from __future__ import annotations

import pytest

from radar_core.types import HORIZONS, ROLES, Dilemma, DilemmaOption, Question

_ROLE_AXIS = {"Leader": "People", "Manager": "Results", "Strategist": "Results", "Intrapreneur": "Both"}


def make_question(qid: int, **overrides) -> Question:
    fields = dict(
        id=qid,
        text=f"Question {qid}",
        block="Block A",
        level="Common",
        axis="People",
        category="Category A",
        role="Leader",
        inverted=False,
        horizon=0,
    )
    fields.update(overrides)
    return Question(**fields)


def make_dilemma(did: str, **overrides) -> Dilemma:
    fields = dict(
        id=did,
        title=f"Dilemma {did}",
        scenario="A scenario",
        block="Block D",
        axis="People",
        category="Category D",
        role="Leader",
        secondary_role=None,
        horizon=2,
        options=[DilemmaOption("low", 1), DilemmaOption("mid", 3), DilemmaOption("high", 5)],
    )
    fields.update(overrides)
    return Dilemma(**fields)


def build_synthetic_catalog(*, dilemmas_per_role: int = 1) -> tuple[list[Question], list[Dilemma]]:
    """Deterministic catalog: one question per role and horizon, plus dilemmas."""

    questions: list[Question] = []
    qid = 1
    for role in ROLES:
        for h in HORIZONS:
            questions.append(
                make_question(
                    qid,
                    role=role,
                    axis=_ROLE_AXIS[role],
                    horizon=h,
                    block=f"{role} block",
                    category=f"{role} practice",
                )
            )
            qid += 1

    dilemmas: list[Dilemma] = []
    for idx, role in enumerate(ROLES):
        for n in range(dilemmas_per_role):
            dilemmas.append(
                make_dilemma(
                    f"D{idx + 1}_{n}",
                    role=role,
                    secondary_role=ROLES[(idx + 1) % len(ROLES)],
                    axis=_ROLE_AXIS[role],
                    category=f"{role} practice",
                    horizon=(idx + n) % len(HORIZONS),
                )
            )
    return questions, dilemmas


@pytest.fixture
def synthetic_catalog() -> tuple[list[Question], list[Dilemma]]:
    return build_synthetic_catalog()
