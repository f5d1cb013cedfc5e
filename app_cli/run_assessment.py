from __future__ import annotations
import os, json, datetime, logging, argparse
from radar_core.catalog import catalog_for_level
from radar_core.config import load_config
from radar_core.engine import score
from radar_core.insights import build_insights
from radar_core.types import LEVELS, Answers


def ask_likert(prompt: str):
    print(prompt)
    while True:
        v = input("Your answer (1-5, Enter to skip): ").strip()
        if not v: return None
        if v.isdigit() and 1 <= int(v) <= 5: return int(v)
        print("Enter a number from 1 to 5.")


def ask_option(prompt: str, options) -> int | None:
    print(prompt)
    for i, opt in enumerate(options): print(f"  [{i}] {opt.text}")
    while True:
        v = input("Your choice (index, Enter to skip): ").strip()
        if not v: return None
        if v.isdigit() and int(v) < len(options): return options[int(v)].value
        print("Enter a listed index.")


def choose_level(default: str | None) -> str:
    if default in LEVELS: return default
    print("Choose your leadership level: " + "  ".join(f"[{lvl}]" for lvl in LEVELS))
    while True:
        v = input("Level: ").strip()
        if v in LEVELS: return v
        print("Unknown level.")


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    ap = argparse.ArgumentParser(description="Leadership Radar self-assessment")
    ap.add_argument("--level", default=cfg.get("DEFAULT_LEVEL"))
    ap.add_argument("--out", default="reports")
    args = ap.parse_args(argv)
    logging.basicConfig(level=cfg.get("LOG_LEVEL", "WARNING"), format="[%(levelname)s] %(message)s")

    print("Leadership Radar")
    level = choose_level(args.level)
    questions, dilemmas = catalog_for_level(level)
    answers: Answers = {}
    for q in questions:
        answers[q.id] = ask_likert(f"(1-5) {q.text}  [1=never, 5=always]")
    for d in dilemmas:
        answers[d.id] = ask_option(f"{d.title}: {d.scenario}", d.options)

    res = score(questions, dilemmas, answers, level)
    payload = {"result": res.to_dict(), "insights": build_insights(res, dilemmas, answers)}
    os.makedirs(args.out, exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join(args.out, f"radar_{level}_{ts}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    print(f"Total {res.total}/100 - {res.matrix.quadrant_name} ({res.consistency.status})")
    print(f"Done. Profile saved to: {path}")
    return 0


if __name__ == "__main__": raise SystemExit(main())
