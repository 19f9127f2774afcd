from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence, TypeVar

import requests
from pydantic import ValidationError

from carryon.core.config import settings
from carryon.schemas.reference import AirlineRecord, BaggageRule, CountryRecord
from carryon.services.tsv_parser import parse


logger = logging.getLogger(__name__)

TABLE_NAMES = ("airlines", "baggage", "countries")

RecordT = TypeVar("RecordT")


class ReferenceDataError(RuntimeError):
    """Raised when a reference table cannot be fetched or read."""


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """Immutable, indexed snapshot of the three reference tables."""

    airlines: tuple[AirlineRecord, ...]
    rules: tuple[BaggageRule, ...]
    countries: tuple[CountryRecord, ...]
    airlines_by_icao: Mapping[str, AirlineRecord]
    countries_by_id: Mapping[str, CountryRecord]

    @classmethod
    def build(
        cls,
        airlines: Iterable[AirlineRecord],
        rules: Iterable[BaggageRule],
        countries: Iterable[CountryRecord],
    ) -> "ReferenceData":
        airlines = tuple(airlines)
        countries = tuple(countries)
        return cls(
            airlines=airlines,
            rules=tuple(rules),
            countries=countries,
            airlines_by_icao=_index(airlines, lambda a: a.icao, "airline"),
            countries_by_id=_index(countries, lambda c: c.country, "country"),
        )

    @classmethod
    def from_rows(
        cls,
        airline_rows: Iterable[Mapping[str, str]],
        rule_rows: Iterable[Mapping[str, str]],
        country_rows: Iterable[Mapping[str, str]],
    ) -> "ReferenceData":
        return cls.build(
            _typed_rows(airline_rows, AirlineRecord.from_record, "airlines"),
            _typed_rows(rule_rows, BaggageRule.from_record, "baggage"),
            _typed_rows(country_rows, CountryRecord.from_record, "countries"),
        )

    @classmethod
    def from_tsv(cls, airlines_text: str, baggage_text: str, countries_text: str) -> "ReferenceData":
        return cls.from_rows(parse(airlines_text), parse(baggage_text), parse(countries_text))

    def find_airline(self, icao: str) -> AirlineRecord | None:
        return self.airlines_by_icao.get(icao)

    def find_country(self, country: str) -> CountryRecord | None:
        return self.countries_by_id.get(country)


def _index(records: Sequence[RecordT], key: Callable[[RecordT], str], label: str) -> Mapping[str, RecordT]:
    # First occurrence wins; later duplicates are ignored.
    index: dict[str, RecordT] = {}
    for record in records:
        code = key(record)
        if code in index:
            logger.warning("Duplicate %s key %r ignored (first occurrence kept)", label, code)
            continue
        index[code] = record
    return MappingProxyType(index)


def _typed_rows(
    rows: Iterable[Mapping[str, str]],
    factory: Callable[[Mapping[str, str]], RecordT],
    table: str,
) -> list[RecordT]:
    typed: list[RecordT] = []
    for position, row in enumerate(rows):
        try:
            typed.append(factory(row))
        except (KeyError, ValidationError) as exc:
            logger.warning("Skipping %s row %s: %s", table, position, exc)
    return typed


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class ReferenceDataLoader:
    """Fetch the three TSV tables (path or http(s) URL) and build a snapshot."""

    def __init__(
        self,
        sources: Mapping[str, str] | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.sources = dict(sources or settings.sources)
        missing = [name for name in TABLE_NAMES if not self.sources.get(name)]
        if missing:
            raise ReferenceDataError(f"No source configured for: {', '.join(missing)}")
        self.timeout = timeout or settings.http_timeout_sec
        self.session = session
        self._owns_session = session is None

    def fetch_text(self, source: str) -> str:
        if _is_url(source):
            try:
                response = self._http_session().get(source, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as exc:
                raise ReferenceDataError(f"Failed to fetch {source}: {exc}") from exc
            response.encoding = "utf-8"
            return response.text
        try:
            return Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReferenceDataError(f"Failed to read {source}: {exc}") from exc

    def fetch_all(self) -> dict[str, str]:
        """Fetch every table concurrently; any failure fails the whole load."""
        # Created up front so the worker threads share one session.
        if any(_is_url(self.sources[name]) for name in TABLE_NAMES):
            self._http_session()
        try:
            with ThreadPoolExecutor(max_workers=len(TABLE_NAMES)) as pool:
                futures = {name: pool.submit(self.fetch_text, self.sources[name]) for name in TABLE_NAMES}
                return {name: future.result() for name, future in futures.items()}
        finally:
            self.close()

    def _http_session(self) -> requests.Session:
        if self.session is None:
            self.session = requests.Session()
        return self.session

    def close(self) -> None:
        if self._owns_session and self.session is not None:
            self.session.close()
            self.session = None

    def load(self) -> ReferenceData:
        texts = self.fetch_all()
        data = ReferenceData.from_tsv(texts["airlines"], texts["baggage"], texts["countries"])
        logger.info(
            "Loaded reference data: %s airlines, %s baggage rules, %s countries",
            len(data.airlines),
            len(data.rules),
            len(data.countries),
        )
        return data


class ReferenceDataStore:
    """Holds the current snapshot; a reload swaps it only when every table loaded."""

    def __init__(self, loader: ReferenceDataLoader | None = None) -> None:
        self._loader = loader
        self._data: ReferenceData | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._data is not None

    @property
    def current(self) -> ReferenceData:
        data = self._data
        if data is None:
            raise ReferenceDataError("Reference data has not been loaded")
        return data

    def reload(self) -> ReferenceData:
        loader = self._loader or ReferenceDataLoader()
        try:
            data = loader.load()
        except ReferenceDataError as exc:
            logger.error("Reference data load failed: %s", exc)
            raise
        with self._lock:
            self._data = data
        return data


__all__ = [
    "ReferenceData",
    "ReferenceDataError",
    "ReferenceDataLoader",
    "ReferenceDataStore",
]
