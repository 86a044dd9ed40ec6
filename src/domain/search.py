"""
Brewery Search Orchestration
============================

1. **Origin resolution** -- explicit coordinates win; otherwise, when a
   radius is requested, the geocoder resolves ``(city, region)``.  A
   ``GeocodeMiss`` is absorbed and the search continues without an origin.
2. **Candidate fetch**    -- with an origin the directory returns results
   sorted by distance from it; without one it matches on city / region.
3. **Radius filter**      -- with an origin and a positive radius, only
   candidates with a usable location inside the radius are kept.  Directory
   order is preserved.

Every record returned alongside a resolved origin is annotated with its
distance from that origin.

Complexity: O(n) in the number of candidates returned by the directory.

**Note:** a geocoding miss with a requested radius silently degrades to
unfiltered city / region matching rather than failing the search.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .distance import distance_miles, within_radius
from .entities import (
    BreweryRecord,
    GeocodeMiss,
    GeoPoint,
    RadiusQuery,
    SearchResult,
)

logger = logging.getLogger(__name__)


# ── Collaborators ─────────────────────────────────────────────────────


class Geocoder(ABC):
    @abstractmethod
    async def locate(self, city: str, region: str) -> Optional[GeoPoint]:
        """Return the best match for a place, ``None`` if nothing matched.

        Raises ``GeocodeMiss`` when the lookup itself failed.
        """


class BreweryDirectory(ABC):
    @abstractmethod
    async def nearest(self, origin: GeoPoint, page_size: int) -> list[BreweryRecord]:
        """Breweries sorted by distance from *origin*."""

    @abstractmethod
    async def by_place(
        self, city: str, region: str, page_size: int
    ) -> list[BreweryRecord]:
        """Breweries whose city and region match."""


# ── Configuration ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class SearchDefaults:
    city: str = "Denver"
    region: str = "Colorado"
    radius_miles: float = 30.0
    page_size: int = 200
    max_page_size: int = 200  # directory limit

    def clamp_page_size(self, page_size: Optional[int]) -> int:
        size = self.page_size if page_size is None else page_size
        return max(1, min(size, self.max_page_size))


# ── Filtering ─────────────────────────────────────────────────────────


def filter_within_radius(
    candidates: list[BreweryRecord], query: RadiusQuery
) -> list[BreweryRecord]:
    """Keep located candidates inside ``query``'s radius, in input order."""
    kept: list[BreweryRecord] = []
    for record in candidates:
        if record.location is None:
            logger.debug("Dropping brewery %s: no usable coordinates", record.id)
            continue
        if within_radius(query.origin, record.location, query.radius_miles):
            kept.append(record)
    return kept


def annotate_distances(records: list[BreweryRecord], origin: GeoPoint) -> None:
    for record in records:
        if record.location is not None:
            record.distance_miles = distance_miles(origin, record.location)


# ── Service ───────────────────────────────────────────────────────────


class BrewerySearchService:
    """Turns a location request into a (possibly radius-filtered) result."""

    def __init__(
        self,
        geocoder: Geocoder,
        directory: BreweryDirectory,
        defaults: Optional[SearchDefaults] = None,
    ):
        self.geocoder = geocoder
        self.directory = directory
        self.defaults = defaults or SearchDefaults()

    async def resolve_origin(
        self,
        city: str,
        region: str,
        latitude: Optional[float],
        longitude: Optional[float],
        radius_miles: float,
    ) -> Optional[GeoPoint]:
        if latitude is not None and longitude is not None:
            return GeoPoint(latitude, longitude)
        if radius_miles <= 0:
            return None
        try:
            origin = await self.geocoder.locate(city, region)
        except GeocodeMiss as exc:
            logger.warning("Geocoding %r, %r failed: %s", city, region, exc)
            return None
        if origin is None:
            logger.warning("No geocoding match for %r, %r", city, region)
        return origin

    async def search(
        self,
        city: Optional[str] = None,
        region: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        radius_miles: Optional[float] = None,
        page_size: Optional[int] = None,
    ) -> SearchResult:
        city = city or self.defaults.city
        region = region or self.defaults.region
        radius = self.defaults.radius_miles if radius_miles is None else radius_miles
        size = self.defaults.clamp_page_size(page_size)

        origin = await self.resolve_origin(city, region, latitude, longitude, radius)

        # DirectoryUnavailable propagates to the caller
        if origin is not None:
            candidates = await self.directory.nearest(origin, size)
            annotate_distances(candidates, origin)
        else:
            candidates = await self.directory.by_place(city, region, size)

        query = RadiusQuery(origin=origin, radius_miles=radius) if origin is not None else None
        if query is not None and query.enabled:
            breweries = filter_within_radius(candidates, query)
            logger.info(
                "Search near (%.4f, %.4f): %d of %d breweries within %.1f mi",
                origin.latitude, origin.longitude,
                len(breweries), len(candidates), radius,
            )
            return SearchResult(origin=origin, radius_miles=radius, breweries=breweries)

        logger.info(
            "Search %s: %d breweries (no radius filter)",
            f"{city}, {region}" if origin is None else "by coordinates",
            len(candidates),
        )
        return SearchResult(breweries=candidates)
