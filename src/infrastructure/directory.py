"""Open Brewery DB directory client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.domain.coordinates import parse_geopoint
from src.domain.entities import BreweryRecord, DirectoryUnavailable, GeoPoint
from src.domain.search import BreweryDirectory

logger = logging.getLogger(__name__)

# Status reported when the directory could not be reached or sent garbage.
BAD_GATEWAY = 502


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def brewery_from_payload(item: dict[str, Any]) -> BreweryRecord:
    """Map one directory JSON object onto a ``BreweryRecord``.

    ``latitude`` / ``longitude`` may be numbers or strings; anything that
    does not parse leaves ``location`` unset.
    """
    return BreweryRecord(
        id=str(item.get("id", "")),
        name=str(item.get("name") or ""),
        category=str(item.get("brewery_type") or ""),
        address_line=_optional_str(item.get("address_1")),
        city=str(item.get("city") or ""),
        region=str(item.get("state_province") or item.get("state") or ""),
        location=parse_geopoint(item.get("latitude"), item.get("longitude")),
        website_url=_optional_str(item.get("website_url")),
    )


class OpenBreweryDirectory(BreweryDirectory):
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self.base_url = base_url

    async def nearest(self, origin: GeoPoint, page_size: int) -> list[BreweryRecord]:
        return await self._fetch(
            {
                "per_page": str(page_size),
                "by_dist": f"{origin.latitude},{origin.longitude}",
            }
        )

    async def by_place(
        self, city: str, region: str, page_size: int
    ) -> list[BreweryRecord]:
        return await self._fetch(
            {"per_page": str(page_size), "by_city": city, "by_state": region}
        )

    async def _fetch(self, params: dict[str, str]) -> list[BreweryRecord]:
        """Single request, no retry: any failure fails the search."""
        try:
            resp = await self._client.get(
                self.base_url,
                params=params,
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as exc:
            logger.error("Brewery directory unreachable: %s", exc)
            raise DirectoryUnavailable(BAD_GATEWAY) from exc

        if not resp.is_success:
            logger.error("Brewery directory returned status %d", resp.status_code)
            raise DirectoryUnavailable(resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.error("Brewery directory returned invalid JSON")
            raise DirectoryUnavailable(BAD_GATEWAY) from exc
        if not isinstance(payload, list):
            logger.error("Brewery directory returned %s, expected a list", type(payload).__name__)
            raise DirectoryUnavailable(BAD_GATEWAY)

        return [brewery_from_payload(item) for item in payload if isinstance(item, dict)]
