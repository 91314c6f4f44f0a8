"""Lenient numeric parsing for values arriving from storage or forms."""
from __future__ import annotations

import math
from typing import Any


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce numbers and numeric strings to float, falling back to ``default``."""

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).replace(",", "").strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_int(value: Any, default: int = 0) -> int:
    """Like :func:`to_number` but truncated to an int."""

    return int(to_number(value, float(default)))


def to_optional_number(value: Any) -> float | None:
    """Keep ``None`` and blanks as "not set", otherwise coerce leniently."""

    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return to_number(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""

    return math.floor(value + 0.5)
