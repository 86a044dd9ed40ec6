"""Nominatim (OpenStreetMap) geocoding client."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from src.domain.coordinates import parse_geopoint
from src.domain.entities import GeocodeMiss, GeoPoint
from src.domain.search import Geocoder

logger = logging.getLogger(__name__)


class NominatimGeocoder(Geocoder):
    """Resolves ``city, region, country`` to a single point.

    Nominatim's usage policy requires every request to identify the
    application through its ``User-Agent`` header.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        user_agent: str,
        country: str = "USA",
    ):
        self._client = client
        self.base_url = base_url
        self.user_agent = user_agent
        self.country = country

    def place_query(self, city: str, region: str) -> str:
        return ", ".join(part for part in (city, region, self.country) if part)

    async def locate(self, city: str, region: str) -> Optional[GeoPoint]:
        params = {"q": self.place_query(city, region), "format": "json", "limit": "1"}
        try:
            resp = await self._client.get(
                self.base_url,
                params=params,
                headers={"User-Agent": self.user_agent},
            )
        except httpx.RequestError as exc:
            raise GeocodeMiss(f"geocoder unreachable: {exc}") from exc

        if not resp.is_success:
            raise GeocodeMiss(f"geocoder returned status {resp.status_code}")

        try:
            matches = resp.json()
        except ValueError as exc:
            raise GeocodeMiss("geocoder returned invalid JSON") from exc

        if not isinstance(matches, list) or not matches:
            return None
        first = matches[0]
        if not isinstance(first, dict):
            raise GeocodeMiss("geocoder returned an unexpected payload")

        point = parse_geopoint(first.get("lat"), first.get("lon"))
        if point is None:
            raise GeocodeMiss("geocoder match has no usable coordinates")
        logger.debug("Geocoded %r to (%.5f, %.5f)", params["q"], point.latitude, point.longitude)
        return point
