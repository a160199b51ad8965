from __future__ import annotations

import argparse

from beltmaster.app_api.factories.build_app import build_graduation_app
from beltmaster.core.engine.evaluator import set_evaluator_debug
from beltmaster.infra.sqlite.db import get_connection
from beltmaster.cli._debug_utils import _dbg, _debug_sink, _effective_limit


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print students eligible for their next belt")
    parser.add_argument("--db", required=True, help="Academy SQLite database path")
    parser.add_argument("--date", required=True, help="Evaluation date (YYYY-MM-DD)")
    parser.add_argument("--academy", default=None, help="Optional academy id filter")
    parser.add_argument("--rules", default=None, help="Optional promotion rules JSON")
    parser.add_argument("--debug", action="store_true", help="Print per-student decisions")
    parser.add_argument(
        "--debug-limit", type=int, default=0, help="Max entries per group to print (0 = all)"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    set_evaluator_debug(_debug_sink(args))

    conn = get_connection(args.db)
    try:
        app = build_graduation_app(conn, academy_id=args.academy, rules_path=args.rules)
        groups = app.review(args.date)
    finally:
        conn.close()
        set_evaluator_debug(None)

    total = sum(len(entries) for entries in groups.values())
    _dbg(args, f"groups={len(groups)} eligible={total}")

    print("GRADUATION_REVIEW")
    print(f"date={args.date} eligible={total}")
    for target, entries in groups.items():
        print(f"== {target} ({len(entries)})")
        for entry in entries[: _effective_limit(args, entries)]:
            years, months, _ = entry.training_time
            print(
                f"{entry.student.id} | {entry.student.name} | "
                f"{entry.current_belt.name} -> {entry.next_belt.name} | {entry.reason} | "
                f"treino={years}a{months}m"
            )


if __name__ == "__main__":
    main()
