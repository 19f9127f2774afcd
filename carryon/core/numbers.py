"""Lenient numeric parsing for limit strings found in the reference tables."""

from __future__ import annotations

import math
import re

NOT_APPLICABLE = "N/A"

# Longest leading decimal literal; anything after it is ignored ("40,0" -> 40).
_LEADING_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_float(text: str | None) -> float | None:
    """Parse the numeric prefix of ``text``; ``None`` when there is none."""

    if text is None:
        return None
    match = _LEADING_NUMBER.match(str(text).lstrip())
    if not match:
        return None
    return float(match.group(0))


def parse_optional_limit(text: str | None) -> float | None:
    """``None`` for the ``N/A`` sentinel, NaN for garbage, else the number."""

    if text == NOT_APPLICABLE:
        return None
    value = parse_leading_float(text)
    return math.nan if value is None else value


def parse_required_limit(text: str | None) -> float:
    value = parse_leading_float(text)
    return math.nan if value is None else value
