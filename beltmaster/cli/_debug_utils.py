from __future__ import annotations

import argparse
from typing import Callable, Sequence


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _effective_limit(args: argparse.Namespace, items: Sequence[object]) -> int:
    if not items:
        return 0
    raw = getattr(args, "debug_limit", 0)
    if raw == 0:
        return len(items)
    return min(raw, len(items))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def _debug_sink(args: argparse.Namespace) -> Callable[[str], None] | None:
    if not _debug_enabled(args):
        return None
    return lambda msg: _dbg(args, msg)
