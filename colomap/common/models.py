"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LocationRecord:
    code: str
    latitude: float
    longitude: float
    country_code: str
    region: str
    city: str


@dataclass
class SiteRecord:
    """One point-of-presence as listed on the status page.

    Geographic fields are filled in together by :meth:`apply_location` and
    are otherwise all ``None``.
    """

    name: str
    continent: str
    code: str
    latitude: float | None = None
    longitude: float | None = None
    country_code: str | None = None
    region: str | None = None
    city: str | None = None

    @property
    def has_location(self) -> bool:
        return self.country_code is not None

    def apply_location(self, location: LocationRecord) -> None:
        self.latitude = location.latitude
        self.longitude = location.longitude
        self.country_code = location.country_code
        self.region = location.region
        self.city = location.city

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "continent": self.continent,
            "iata": self.code,
        }
        if self.has_location:
            out["lat"] = self.latitude
            out["lon"] = self.longitude
            out["cca2"] = self.country_code
            out["region"] = self.region
            out["city"] = self.city
        return out


@dataclass(frozen=True)
class ParseWarning:
    code: str
    message: str
    raw: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "raw": self.raw}
