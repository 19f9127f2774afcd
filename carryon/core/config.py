from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore[import-not-found]


class Settings(BaseSettings):
    log_level: str = "INFO"

    # Reference tables: filesystem paths or http(s) URLs
    airlines_source: str = "data/airline.tsv"
    baggage_source: str = "data/carry-on-baggage.tsv"
    countries_source: str = "data/country.tsv"
    http_timeout_sec: float = 10.0

    # Region label used when an airline's country (or its region) is unknown
    fallback_region_label: str = "その他"

    # Input bounds for suitcase validation
    max_dimension_cm: float = 300.0
    max_weight_kg: float = 100.0

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARRYON_", case_sensitive=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"

    @property
    def sources(self) -> dict[str, str]:
        return {
            "airlines": self.airlines_source,
            "baggage": self.baggage_source,
            "countries": self.countries_source,
        }


settings = Settings()
