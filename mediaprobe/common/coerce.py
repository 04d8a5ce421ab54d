# mediaprobe/common/coerce.py
"""
Permissive converters for ffprobe values.

ffprobe reports most numbers as strings and leaves fields out for damaged
input, so these never raise: absent or non-numeric values fall back to a default.
"""
from __future__ import annotations

from datetime import datetime
from fractions import Fraction
from typing import Any, Optional


def _int(x: Any) -> int:
    # exact for integer strings past 2**53; decimal strings go through float
    try:
        return int(x)
    except ValueError:
        return int(float(x))


def to_int(x: Any, default: int = 0) -> int:
    if x is None:
        return default
    try:
        return _int(x)
    except (TypeError, ValueError, OverflowError):
        return default


def to_float(x: Any, default: float = 0.0) -> float:
    if x is None:
        return default
    try:
        return float(x)
    except (TypeError, ValueError):
        return default


def maybe_int(x: Any) -> Optional[int]:
    if x is None:
        return None
    try:
        return _int(x)
    except (TypeError, ValueError, OverflowError):
        return None


def to_fraction(x: Any) -> Optional[Fraction]:
    """Parse "num/den" (or a plain number); "0/0" and other degenerate rates give None."""
    if x is None or x == "":
        return None
    try:
        return Fraction(str(x))
    except (ValueError, ZeroDivisionError):
        return None


def to_datetime(x: Any) -> Optional[datetime]:
    """ISO-8601 timestamp or None; malformed input is treated as absent."""
    if not x or not isinstance(x, str):
        return None
    try:
        return datetime.fromisoformat(x.strip())
    except ValueError:
        return None
