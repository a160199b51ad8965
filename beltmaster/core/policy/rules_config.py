"""Promotion thresholds and their JSON loader.

Responsibilities:
  - Hold every numeric and name-based threshold used by the rule functions.
  - Load overrides from a JSON object with strict type validation.
Must not:
  - Evaluate students; configuration only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PromotionRules:
    # Adult track
    min_frequency_percent: float = 70.0
    default_required_stripes: int = 4
    black_belt_name: str = "Preta"
    black_belt_required_stripes: int = 6
    black_belt_required_months: int = 84
    coral_belt_name: str = "Coral"
    coral_belt_required_stripes: int = 8
    coral_belt_required_months: int = 120
    # Kids to adult transition
    transition_belt_marker: str = "Verde"
    transition_age: int = 16
    transition_target_name: str = "Azul"
    # Stripe award
    stripe_min_frequency_ratio: float = 0.70
    stripe_interval_months: int = 6
    stripe_max: int = 4
    black_stripe_interval_months: int = 36
    black_stripe_max: int = 6
    low_frequency_percent: float = 75.0


DEFAULT_RULES = PromotionRules()

_FIELD_TYPES: dict[str, type] = {
    "min_frequency_percent": float,
    "default_required_stripes": int,
    "black_belt_name": str,
    "black_belt_required_stripes": int,
    "black_belt_required_months": int,
    "coral_belt_name": str,
    "coral_belt_required_stripes": int,
    "coral_belt_required_months": int,
    "transition_belt_marker": str,
    "transition_age": int,
    "transition_target_name": str,
    "stripe_min_frequency_ratio": float,
    "stripe_interval_months": int,
    "stripe_max": int,
    "black_stripe_interval_months": int,
    "black_stripe_max": int,
    "low_frequency_percent": float,
}

_missing = [f.name for f in fields(PromotionRules) if f.name not in _FIELD_TYPES]
if _missing:
    raise RuntimeError(f"Missing _FIELD_TYPES for: {_missing}")


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in promotion rules")
    value = payload[key]
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be float")
        return float(value)
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be int")
        return value
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def rules_from_dict(payload: dict[str, Any], base: PromotionRules = DEFAULT_RULES) -> PromotionRules:
    unknown = sorted(k for k in payload if k not in _FIELD_TYPES)
    if unknown:
        raise ValueError(f"Unknown promotion rules fields: {unknown}")

    overrides = {key: _require(payload, key, _FIELD_TYPES[key]) for key in payload}

    ratio = overrides.get("stripe_min_frequency_ratio")
    if ratio is not None and (ratio < 0.0 or ratio > 1.0):
        raise ValueError("Field 'stripe_min_frequency_ratio' must be within [0, 1]")
    percent = overrides.get("min_frequency_percent")
    if percent is not None and (percent < 0.0 or percent > 100.0):
        raise ValueError("Field 'min_frequency_percent' must be within [0, 100]")

    return replace(base, **overrides)


def load_promotion_rules(path: str | Path) -> PromotionRules:
    rules_path = Path(path)
    if not rules_path.exists():
        raise ValueError(f"Promotion rules file not found: {rules_path}")

    payload = json.loads(rules_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Promotion rules must be a JSON object")
    return rules_from_dict(payload)
