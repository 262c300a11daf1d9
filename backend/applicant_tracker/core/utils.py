# backend/applicant_tracker/core/utils.py
"""
Generic helpers shared by the scoring, mapping and persistence layers.

Includes:
- half-away-from-zero rounding used for stored and displayed scores
- case-insensitive skill lookup
- optional-text normalization (empty string <-> NULL)
- UTC clock helpers
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

# -------- Numbers ------------------------------------------------------------

def round_half_away_from_zero(value: float, places: int = 2) -> float:
    """
    Round to `places` decimals with ties going away from zero (0.005 -> 0.01,
    -0.005 -> -0.01). Python's round() uses banker's rounding, hence Decimal.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))

# -------- Skills -------------------------------------------------------------

def contains_skill(skills: Optional[Iterable[str]], skill: str) -> bool:
    """Whole-token, case-insensitive membership ("Java" never matches "JavaScript")."""
    if not skills:
        return False
    wanted = skill.lower()
    return any(s.lower() == wanted for s in skills)

# -------- Optional text ------------------------------------------------------

def none_if_empty(text: Optional[str]) -> Optional[str]:
    """Empty string collapses to None. Whitespace-only text is kept as-is."""
    if text is None or text == "":
        return None
    return text

def empty_if_none(text: Optional[str]) -> str:
    return "" if text is None else text

# -------- Time ---------------------------------------------------------------

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo); aware ones pass through."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


__all__ = [
    "round_half_away_from_zero",
    "contains_skill",
    "none_if_empty",
    "empty_if_none",
    "now_utc",
    "as_utc",
]
