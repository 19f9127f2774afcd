from __future__ import annotations

from typing import Dict, Iterable, List

from carryon.core.config import settings
from carryon.schemas.report import (
    CompatibilityReport,
    CompatibilityResults,
    EvaluationResult,
    RestrictionAnalysis,
)
from carryon.schemas.suitcase import SuitcaseInput


def generate_report(suitcase: SuitcaseInput, results: CompatibilityResults) -> CompatibilityReport:
    total = results.total
    rate = 0.0 if total == 0 else len(results.compatible) / total * 100
    return CompatibilityReport(
        suitcase=suitcase,
        compatibility_rate=rate,
        total_airlines=total,
        region_breakdown=categorize_by_region(results.compatible),
        restriction_analysis=analyze_restrictions(suitcase, results.incompatible),
        volume=calculate_volume(suitcase.width, suitcase.height, suitcase.depth),
    )


def categorize_by_region(
    results: Iterable[EvaluationResult],
    fallback_label: str | None = None,
) -> Dict[str, List[EvaluationResult]]:
    fallback = fallback_label or settings.fallback_region_label
    regions: Dict[str, List[EvaluationResult]] = {}
    for result in results:
        regions.setdefault(result.region or fallback, []).append(result)
    return regions


def analyze_restrictions(suitcase: SuitcaseInput, incompatible: Iterable[EvaluationResult]) -> RestrictionAnalysis:
    """Count why rules rejected the suitcase; one rule may count under several headings."""
    analysis = RestrictionAnalysis()
    for result in incompatible:
        limits = result.restrictions
        if suitcase.weight is not None and limits.weight is not None and suitcase.weight > limits.weight:
            analysis.weight_issues += 1
        if (
            suitcase.width > limits.width
            or suitcase.height > limits.height
            or suitcase.depth > limits.depth
        ):
            analysis.dimension_issues += 1
        if limits.length is not None and suitcase.total_length > limits.length:
            analysis.length_issues += 1
    return analysis


def calculate_volume(width: float, height: float, depth: float) -> float:
    return width * height * depth
