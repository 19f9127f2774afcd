"""Pydantic schemas for evaluation results and the compatibility report."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

from carryon.schemas.reference import AircraftSize, RouteType
from carryon.schemas.suitcase import SuitcaseInput


class Restrictions(BaseModel):
    width: float
    height: float
    depth: float
    length: float | None = None
    weight: float | None = None


class EvaluationResult(BaseModel):
    icao: str
    iata: str
    name_local: str
    name_en: str
    country: str
    country_local: str
    region: str | None = None
    area: str | None = None
    route_type: RouteType = "unspecified"
    condition: AircraftSize = "unspecified"
    route_type_tag: str = "-"
    condition_tag: str = "-"
    restrictions: Restrictions
    compatible: bool


class CompatibilityResults(BaseModel):
    compatible: list[EvaluationResult] = Field(default_factory=list)
    incompatible: list[EvaluationResult] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.compatible) + len(self.incompatible)


class RestrictionAnalysis(BaseModel):
    weight_issues: int = 0
    dimension_issues: int = 0
    length_issues: int = 0


class CompatibilityReport(BaseModel):
    suitcase: SuitcaseInput
    compatibility_rate: float
    total_airlines: int
    region_breakdown: Dict[str, list[EvaluationResult]] = Field(default_factory=dict)
    restriction_analysis: RestrictionAnalysis = Field(default_factory=RestrictionAnalysis)
    volume: float


class CheckOutput(CompatibilityReport):
    """Report plus the per-rule results, as printed by the command-line check."""

    compatible: list[EvaluationResult] = Field(default_factory=list)
    incompatible: list[EvaluationResult] | None = None
