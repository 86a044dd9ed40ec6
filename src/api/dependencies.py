"""FastAPI dependency injection helpers."""

import httpx
from fastapi import Depends, Request

from src.config import settings
from src.domain.search import BrewerySearchService
from src.infrastructure.directory import OpenBreweryDirectory
from src.infrastructure.geocoding import NominatimGeocoder


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the outbound HTTP client opened by the app lifespan."""
    return request.app.state.http_client


async def get_search_service(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> BrewerySearchService:
    """Build a request-scoped search service over the shared HTTP client."""
    return BrewerySearchService(
        geocoder=NominatimGeocoder(
            client,
            base_url=settings.geocoder_url,
            user_agent=settings.user_agent,
            country=settings.geocoder_country,
        ),
        directory=OpenBreweryDirectory(client, base_url=settings.directory_url),
        defaults=settings.search_defaults(),
    )
