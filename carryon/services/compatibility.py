"""Carry-on compatibility check for a single baggage rule."""

from __future__ import annotations

from typing import Mapping

from carryon.core.numbers import NOT_APPLICABLE, parse_leading_float
from carryon.schemas.reference import BaggageRule
from carryon.schemas.suitcase import SuitcaseInput


def parse_limit(text: str | None) -> float | None:
    """Parse a limit string's numeric prefix; ``None`` when it has none."""
    return parse_leading_float(text)


def is_compatible(suitcase: SuitcaseInput, rule: BaggageRule | Mapping[str, str]) -> bool:
    if not isinstance(rule, BaggageRule):
        rule = BaggageRule.from_record(rule)

    # Unparseable physical limits can never be satisfied.
    if not rule.has_valid_dimensions:
        return False

    return (
        dimensions_match(suitcase, rule)
        and length_matches(suitcase, rule)
        and weight_matches(suitcase, rule)
    )


def dimensions_match(suitcase: SuitcaseInput, rule: BaggageRule) -> bool:
    return (
        suitcase.width <= rule.width_cm
        and suitcase.height <= rule.height_cm
        and suitcase.depth <= rule.depth_cm
    )


def length_matches(suitcase: SuitcaseInput, rule: BaggageRule) -> bool:
    return rule.length_cm is None or suitcase.total_length <= rule.length_cm


def weight_matches(suitcase: SuitcaseInput, rule: BaggageRule) -> bool:
    if rule.weight_kg is None or suitcase.weight is None:
        return True
    return suitcase.weight <= rule.weight_kg


__all__ = ["NOT_APPLICABLE", "is_compatible", "parse_limit"]
