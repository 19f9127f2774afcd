"""Join baggage rules with their airline and country, then bucket by verdict."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, overload

from carryon.schemas.reference import AirlineRecord, BaggageRule, CountryRecord
from carryon.schemas.report import CompatibilityResults, EvaluationResult, Restrictions
from carryon.schemas.suitcase import SuitcaseInput
from carryon.services.compatibility import is_compatible
from carryon.services.reference_data import ReferenceData

logger = logging.getLogger(__name__)


@overload
def evaluate_all(suitcase: SuitcaseInput, data: ReferenceData) -> CompatibilityResults: ...


@overload
def evaluate_all(
    suitcase: SuitcaseInput,
    data: Iterable[AirlineRecord | Mapping[str, str]],
    rules: Iterable[BaggageRule | Mapping[str, str]],
    countries: Iterable[CountryRecord | Mapping[str, str]],
) -> CompatibilityResults: ...


def evaluate_all(suitcase, data, rules=None, countries=None):
    """
    Evaluate every baggage rule against ``suitcase``.

    Rules whose ICAO code matches no airline are skipped. Both buckets keep
    the input rule order. ``data`` is normally a ``ReferenceData`` snapshot;
    passing the three tables separately builds one on the fly.
    """
    if not isinstance(data, ReferenceData):
        data = _build_context(data, rules or (), countries or ())

    results = CompatibilityResults()
    skipped = 0
    for rule in data.rules:
        airline = data.find_airline(rule.icao)
        if airline is None:
            skipped += 1
            continue
        country = data.find_country(airline.country)
        result = build_result(rule, airline, country, is_compatible(suitcase, rule))
        if result.compatible:
            results.compatible.append(result)
        else:
            results.incompatible.append(result)

    if skipped:
        logger.debug("Skipped %s baggage rules with no matching airline", skipped)
    return results


def build_result(
    rule: BaggageRule,
    airline: AirlineRecord,
    country: CountryRecord | None,
    compatible: bool,
) -> EvaluationResult:
    return EvaluationResult(
        icao=rule.icao,
        iata=airline.iata,
        name_local=airline.name_local,
        name_en=airline.name_en,
        country=airline.country,
        country_local=country.name_local if country else airline.country,
        region=country.region if country else None,
        area=country.area if country else None,
        route_type=rule.route_type,
        condition=rule.aircraft_size,
        route_type_tag=rule.route_type_tag,
        condition_tag=rule.condition_tag,
        restrictions=Restrictions(
            width=rule.width_cm,
            height=rule.height_cm,
            depth=rule.depth_cm,
            length=rule.length_cm,
            weight=rule.weight_kg,
        ),
        compatible=compatible,
    )


def _build_context(airlines, rules, countries) -> ReferenceData:
    def typed(rows, model):
        return [row if isinstance(row, model) else model.from_record(row) for row in rows]

    return ReferenceData.build(
        typed(airlines, AirlineRecord),
        typed(rules, BaggageRule),
        typed(countries, CountryRecord),
    )
