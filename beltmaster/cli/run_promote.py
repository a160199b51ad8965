from __future__ import annotations

import argparse
import sys

from beltmaster.app_api.factories.build_app import build_graduation_app
from beltmaster.core.domain.errors import InvalidPromotionError
from beltmaster.core.engine.evaluator import set_evaluator_debug
from beltmaster.infra.sqlite.db import get_connection
from beltmaster.cli._debug_utils import _debug_sink


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Promote one eligible student to the next belt")
    parser.add_argument("--db", required=True, help="Academy SQLite database path")
    parser.add_argument("--student", required=True, help="Student id")
    parser.add_argument("--date", required=True, help="Promotion date (YYYY-MM-DD)")
    parser.add_argument("--rules", default=None, help="Optional promotion rules JSON")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    set_evaluator_debug(_debug_sink(args))

    conn = get_connection(args.db)
    try:
        app = build_graduation_app(conn, rules_path=args.rules)
        promoted = app.promote(args.student, args.date)
    except InvalidPromotionError as exc:
        print(f"PROMOTION_REJECTED: {exc}", file=sys.stderr)
        sys.exit(2)
    finally:
        conn.close()
        set_evaluator_debug(None)

    print(
        f"PROMOTED student={promoted.id} belt={promoted.belt_id} "
        f"stripes={promoted.stripes} date={promoted.last_promotion_date}"
    )


if __name__ == "__main__":
    main()
