from __future__ import annotations

import argparse

from beltmaster.app_api.factories.build_app import build_graduation_app
from beltmaster.infra.sqlite.db import get_connection
from beltmaster.cli._debug_utils import _dbg


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Award stripes to active students that qualify")
    parser.add_argument("--db", required=True, help="Academy SQLite database path")
    parser.add_argument("--date", required=True, help="Award date (YYYY-MM-DD)")
    parser.add_argument("--academy", default=None, help="Optional academy id filter")
    parser.add_argument("--rules", default=None, help="Optional promotion rules JSON")
    parser.add_argument("--dry-run", action="store_true", help="Evaluate without writing")
    parser.add_argument("--debug", action="store_true", help="Print blocked students too")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    conn = get_connection(args.db)
    try:
        app = build_graduation_app(conn, academy_id=args.academy, rules_path=args.rules)
        outcomes = app.award_stripes(args.date, dry_run=args.dry_run)
    finally:
        conn.close()

    awarded = [o for o in outcomes if o.updated is not None]
    for outcome in outcomes:
        if outcome.updated is None:
            _dbg(args, f"{outcome.student.id} blocked {outcome.verdict.reason_code.value}")

    print("STRIPE_AWARD" + (" (dry-run)" if args.dry_run else ""))
    for outcome in awarded:
        print(
            f"{outcome.student.id} | {outcome.student.name} | "
            f"{outcome.student.stripes} -> {outcome.updated.stripes} | {outcome.verdict.reason}"
        )
    print(f"awarded={len(awarded)} evaluated={len(outcomes)}")


if __name__ == "__main__":
    main()
