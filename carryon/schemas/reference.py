"""Typed rows of the three reference tables."""

from __future__ import annotations

import math
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict

from carryon.core.numbers import parse_optional_limit, parse_required_limit

RouteType = Literal["domestic", "international", "unspecified"]
AircraftSize = Literal["over_100_seats", "under_100_seats", "unspecified"]

# Column names are part of the table contract.
AIRLINE_ICAO = "ICAO code"
AIRLINE_IATA = "IATA code"
AIRLINE_NAME_LOCAL = "航空会社名"
AIRLINE_NAME_EN = "Airline name"
AIRLINE_COUNTRY = "Country"

RULE_ICAO = "ICAO code"
RULE_ROUTE_TYPE = "種別"
RULE_CONDITION = "条件"
RULE_WIDTH = "W(cm)"
RULE_HEIGHT = "H(cm)"
RULE_DEPTH = "D(cm)"
RULE_LENGTH = "Length(cm)"
RULE_WEIGHT = "Weight(kg)"

COUNTRY_ID = "Country"
COUNTRY_NAME_LOCAL = "国名"
COUNTRY_AREA = "Area"
COUNTRY_REGION = "地域"

ROUTE_TYPE_TAGS: dict[str, RouteType] = {
    "国内": "domestic",
    "国際": "international",
}
AIRCRAFT_SIZE_TAGS: dict[str, AircraftSize] = {
    "100席以上": "over_100_seats",
    "100席未満": "under_100_seats",
}


class AirlineRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    icao: str
    iata: str
    name_local: str
    name_en: str
    country: str

    @classmethod
    def from_record(cls, row: Mapping[str, str]) -> "AirlineRecord":
        return cls(
            icao=row[AIRLINE_ICAO],
            iata=row.get(AIRLINE_IATA, ""),
            name_local=row.get(AIRLINE_NAME_LOCAL, ""),
            name_en=row.get(AIRLINE_NAME_EN, ""),
            country=row[AIRLINE_COUNTRY],
        )


class CountryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    name_local: str
    area: str | None = None
    region: str | None = None

    @classmethod
    def from_record(cls, row: Mapping[str, str]) -> "CountryRecord":
        return cls(
            country=row[COUNTRY_ID],
            name_local=row.get(COUNTRY_NAME_LOCAL) or row[COUNTRY_ID],
            area=row.get(COUNTRY_AREA) or None,
            region=row.get(COUNTRY_REGION) or None,
        )


class BaggageRule(BaseModel):
    """One carry-on limit set; an airline may own several (route/aircraft variants).

    Limits are parsed once when the row is read. Physical limits that are not
    numeric become NaN, which no comparison can satisfy. Optional limits are
    ``None`` for ``N/A`` and NaN for anything else that is not a number.
    """

    model_config = ConfigDict(frozen=True)

    icao: str
    route_type_tag: str = "-"
    condition_tag: str = "-"
    raw_width: str | None = None
    raw_height: str | None = None
    raw_depth: str | None = None
    raw_length: str | None = None
    raw_weight: str | None = None
    width_cm: float
    height_cm: float
    depth_cm: float
    length_cm: float | None = None
    weight_kg: float | None = None

    @classmethod
    def from_record(cls, row: Mapping[str, str]) -> "BaggageRule":
        raw_width = row.get(RULE_WIDTH)
        raw_height = row.get(RULE_HEIGHT)
        raw_depth = row.get(RULE_DEPTH)
        raw_length = row.get(RULE_LENGTH)
        raw_weight = row.get(RULE_WEIGHT)
        return cls(
            icao=row.get(RULE_ICAO, ""),
            route_type_tag=row.get(RULE_ROUTE_TYPE, "-"),
            condition_tag=row.get(RULE_CONDITION, "-"),
            raw_width=raw_width,
            raw_height=raw_height,
            raw_depth=raw_depth,
            raw_length=raw_length,
            raw_weight=raw_weight,
            width_cm=parse_required_limit(raw_width),
            height_cm=parse_required_limit(raw_height),
            depth_cm=parse_required_limit(raw_depth),
            length_cm=parse_optional_limit(raw_length),
            weight_kg=parse_optional_limit(raw_weight),
        )

    @property
    def has_valid_dimensions(self) -> bool:
        return not any(math.isnan(value) for value in (self.width_cm, self.height_cm, self.depth_cm))

    @property
    def route_type(self) -> RouteType:
        return ROUTE_TYPE_TAGS.get(self.route_type_tag, "unspecified")

    @property
    def aircraft_size(self) -> AircraftSize:
        return AIRCRAFT_SIZE_TAGS.get(self.condition_tag, "unspecified")
