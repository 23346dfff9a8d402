"""
Query parameter parsing.

Numeric query params never cause a 4xx: anything that does not parse to a
usable value is replaced by the configured default. Parsing takes the longest
numeric prefix, so "1500abc" reads as 1500 and "6.9" as a 6 month period.
Values above the configured maximum are treated as unusable too.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

logger = logging.getLogger(__name__)


_FLOAT_PREFIX = re.compile(
    r"^\s*[+-]?(?:infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def parse_float_prefix(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return None
    return float(match.group(0))


def parse_int_prefix(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(0))


def parse_capital(raw: Optional[str], default: float, maximum: Optional[float] = None) -> float:
    """
    Capital from a query string value.
    Missing, unparsable, zero, negative, infinite or above `maximum` -> default.
    """
    value = parse_float_prefix(raw)
    if (
        value is None
        or not math.isfinite(value)
        or value <= 0
        or (maximum is not None and value > maximum)
    ):
        logger.debug(f"capital={raw!r} not usable, using default {default}")
        return default
    return value


def parse_period(raw: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    """
    Holding period in whole months from a query string value.
    Missing, unparsable, zero, negative or above `maximum` -> default.
    """
    value = parse_int_prefix(raw)
    if value is None or value <= 0 or (maximum is not None and value > maximum):
        logger.debug(f"period={raw!r} not usable, using default {default}")
        return default
    return value
