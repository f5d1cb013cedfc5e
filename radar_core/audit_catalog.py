from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from . import config
from .catalog import load_dilemmas, load_questions
from .normalizer import normalize_dilemma, normalize_question
from .types import AXES, AXIS_BOTH, Dilemma, HORIZONS, Question, ROLES

ALLOWED_OPTION_VALUES: tuple[int, ...] = (1, 3, 5)


def _blank_role() -> dict[int, int]:
    return {h: 0 for h in HORIZONS}


def audit_items(questions: Iterable[Question], dilemmas: Iterable[Dilemma]) -> dict[str, object]:
    questions = list(questions)
    dilemmas = list(dilemmas)
    coverage: dict[str, dict[int, int]] = {role: _blank_role() for role in ROLES}
    blocks: dict[str, int] = {}
    totals = {"questions": len(questions), "dilemmas": len(dilemmas), "inverted": 0, "multi_tag": 0}
    warnings: list[str] = []

    seen_ids: set[object] = set()
    items = [normalize_question(q, None) for q in questions] + [normalize_dilemma(d, None) for d in dilemmas]
    for item in items:
        if item.item_id in seen_ids:
            warnings.append(f"duplicate item id {item.item_id!r}")
        seen_ids.add(item.item_id)

        if item.axis not in AXES and item.axis != AXIS_BOTH:
            warnings.append(f"{item.item_id!r} has unknown axis {item.axis!r}")
        for role in item.roles:
            if role not in coverage:
                warnings.append(f"{item.item_id!r} has unknown role {role!r}")
                continue
            for h in item.horizons:
                if h in coverage[role]:
                    coverage[role][h] += 1
        for h in item.horizons:
            if h not in HORIZONS:
                warnings.append(f"{item.item_id!r} has horizon {h!r} outside 0..4")
        if not item.categories:
            warnings.append(f"{item.item_id!r} has no category")
        blocks[item.block] = blocks.get(item.block, 0) + 1

    for q in questions:
        if q.inverted:
            totals["inverted"] += 1
        if q.categories or q.roles or q.horizons:
            totals["multi_tag"] += 1

    for d in dilemmas:
        values = sorted(o.value for o in d.options)
        if any(v not in ALLOWED_OPTION_VALUES for v in values):
            warnings.append(f"dilemma {d.id} has option values {values} (allowed {list(ALLOWED_OPTION_VALUES)})")

    question_ids = {q.id for q in questions}
    for avoidant, active in config.CONTRADICTION_PAIRS.items():
        if avoidant not in question_ids:
            continue
        missing = [i for i in active if i not in question_ids]
        if missing:
            warnings.append(f"contradiction pair Q{avoidant} references missing questions {missing}")

    for role, row in coverage.items():
        if not any(row.values()):
            warnings.append(f"role {role} has no items")

    return {"coverage": coverage, "blocks": blocks, "warnings": warnings, "totals": totals}


def _format_row(label: str, data: dict[int, int]) -> str:
    parts = [label]
    for h in HORIZONS:
        parts.append(f"H{h}:{data.get(h, 0):3d}")
    return "  ".join(parts)


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[int, int]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Catalog Coverage (role x horizon) ===")
    for role in ROLES:
        print("  " + _format_row(f"{role:<13}", coverage.get(role, {})))

    blocks: dict[str, int] = summary["blocks"]  # type: ignore[assignment]
    print("\nBlocks:")
    for name in sorted(blocks):
        print(f"  {name}: {blocks[name]}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path = Path("catalog_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(_argv: list[str] | None = None) -> int:
    summary = audit_items(load_questions(), load_dilemmas())
    print_report(summary)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
