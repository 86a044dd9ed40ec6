"""
Domain entities and failure conditions for a brewery search.

Everything here is request-scoped: built from the inbound query and the
collaborators' replies, held for one search, never persisted.

Failure taxonomy
----------------
- ``GeocodeMiss``: the geocoder had no match or could not be reached.
  Absorbed by the search, which falls back to city / region matching.
- ``DirectoryUnavailable``: the brewery directory answered with a
  non-success status.  The only failure surfaced to API callers.
- Malformed records (unusable coordinates) are not raised at all; they are
  left out of radius-filtered results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class GeocodeMiss(Exception):
    """Raised by a geocoder when a place name could not be resolved."""


class DirectoryUnavailable(Exception):
    """Raised when the brewery directory does not return a usable reply."""

    def __init__(self, status_code: int, message: str = "Failed to fetch breweries"):
        super().__init__(f"{message} (status {status_code})")
        self.status_code = status_code


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RadiusQuery:
    origin: GeoPoint
    radius_miles: float

    @property
    def enabled(self) -> bool:
        return self.radius_miles > 0


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class BreweryRecord:
    id: str
    name: str
    category: str = ""
    address_line: Optional[str] = None
    city: str = ""
    region: str = ""
    location: Optional[GeoPoint] = None
    website_url: Optional[str] = None
    distance_miles: Optional[float] = None

    @property
    def has_location(self) -> bool:
        return self.location is not None


@dataclass
class SearchResult:
    origin: Optional[GeoPoint] = None
    radius_miles: Optional[float] = None
    breweries: list[BreweryRecord] = field(default_factory=list)

    @property
    def is_radius_filtered(self) -> bool:
        return self.origin is not None and self.radius_miles is not None
