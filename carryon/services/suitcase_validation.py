"""Validate raw suitcase measurements before evaluation."""

from __future__ import annotations

import math
from typing import Any, List

from carryon.core.config import settings
from carryon.core.numbers import parse_leading_float
from carryon.schemas.suitcase import SuitcaseInput


class SuitcaseValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _to_number(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    return parse_leading_float(str(value))


def validate_suitcase_input(width: Any, height: Any, depth: Any, weight: Any = None) -> List[str]:
    """
    Check the measurements a user typed in.

    Returns:
        Error messages, empty when the input is usable. An unparseable weight
        is treated as "not given", matching the optional weight field.
    """
    errors: List[str] = []
    max_cm = settings.max_dimension_cm
    for label, value in (("Width", width), ("Height", height), ("Depth", depth)):
        number = _to_number(value)
        if number is None or number <= 0 or number > max_cm:
            errors.append(f"{label} must be between 1 and {max_cm:g} cm")

    wt = _to_number(weight)
    if wt is not None and (wt < 0 or wt > settings.max_weight_kg):
        errors.append(f"Weight must be between 0 and {settings.max_weight_kg:g} kg")
    return errors


def build_suitcase(width: Any, height: Any, depth: Any, weight: Any = None) -> SuitcaseInput:
    errors = validate_suitcase_input(width, height, depth, weight)
    if errors:
        raise SuitcaseValidationError(errors)
    return SuitcaseInput(
        width=_to_number(width),
        height=_to_number(height),
        depth=_to_number(depth),
        weight=_to_number(weight),
    )
