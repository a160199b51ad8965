from __future__ import annotations

from .enums import ReasonCode


class DataIntegrityError(ValueError):
    """Snapshot data cannot support a decision (unknown belt, malformed date)."""

    def __init__(self, reason_code: ReasonCode, message: str) -> None:
        super().__init__(message)
        self.reason_code = reason_code


class InvalidPromotionError(RuntimeError):
    """An applier was called with a verdict that does not allow the change."""
