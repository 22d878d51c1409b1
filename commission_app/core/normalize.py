"""Input normalization helpers.

Every helper here is total: free text, ``None`` and non-finite numbers all
collapse to zero instead of raising, so callers can feed raw form values
straight through.
"""
import math
import re
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

_TRUTHY = {"true", "yes", "on", "1"}


def to_number(value: Any) -> float:
    """Extract a float from ``value``.

    Strings keep only digits, ``.`` and ``-`` and the longest leading float
    is parsed, so ``"$93,600"`` becomes ``93600.0`` and ``"1.2.3"`` becomes
    ``1.2``. Anything unparsable returns ``0.0``.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # int wider than a double
            return 0.0
    else:
        match = _LEADING_FLOAT.match(_NON_NUMERIC.sub("", str(value)))
        if not match:
            return 0.0
        number = float(match.group(0))
    if not math.isfinite(number):
        return 0.0
    return number


def to_amount(value: Any) -> float:
    """Non-negative monetary amount."""
    return max(0.0, to_number(value))


def to_count(value: Any) -> int:
    """Non-negative whole count, floored."""
    return max(0, math.floor(to_number(value)))


def clamp_pct(value: float) -> float:
    return min(100.0, max(0.0, value))


def to_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return math.isfinite(value) and value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return False
