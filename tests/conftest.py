"""
Shared test fixtures.

Outbound calls to Nominatim and Open Brewery DB are served by an
``httpx.MockTransport`` so tests run without network access.  The app's
HTTP client dependency is overridden to use it.
"""

from __future__ import annotations

from typing import Any, AsyncGenerator, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.middleware import limiter

GEOCODER_HOST = "nominatim.openstreetmap.org"
DIRECTORY_HOST = "api.openbrewerydb.org"

DENVER = (39.7392, -104.9903)


def brewery(
    brewery_id: str,
    name: str,
    latitude: Any,
    longitude: Any,
    city: str = "Denver",
    state: str = "Colorado",
    brewery_type: str = "micro",
) -> dict[str, Any]:
    """A directory record as Open Brewery DB serialises it."""
    return {
        "id": brewery_id,
        "name": name,
        "brewery_type": brewery_type,
        "address_1": "1 Main St",
        "city": city,
        "state_province": state,
        "latitude": latitude,
        "longitude": longitude,
        "website_url": f"https://{brewery_id}.example.com",
    }


# Three within 30 miles of downtown Denver, two beyond.
FRONT_RANGE = [
    brewery("downtown", "Downtown Brewing", "39.7392", "-104.9903"),
    brewery("fort-collins", "Poudre Ales", 40.5853, -105.0844, city="Fort Collins"),
    brewery("golden", "Clear Creek Brewing", 39.7555, -105.2211, city="Golden"),
    brewery("springs", "Pikes Peak Lagers", 38.8339, -104.8214, city="Colorado Springs"),
    brewery("boulder", "Flatirons Brewing", "40.0150", "-105.2705", city="Boulder"),
]


class FakeUpstream:
    """Scripted replies for the geocoder and the brewery directory."""

    def __init__(self) -> None:
        self.geocode_matches: list[dict[str, Any]] = [{"lat": "39.74", "lon": "-104.99"}]
        self.geocode_status = 200
        self.geocode_down = False
        self.breweries: list[dict[str, Any]] = list(FRONT_RANGE)
        self.directory_status = 200
        self.directory_down = False
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODER_HOST:
            if self.geocode_down:
                raise httpx.ConnectError("geocoder down", request=request)
            return httpx.Response(self.geocode_status, json=self.geocode_matches)
        if request.url.host == DIRECTORY_HOST:
            if self.directory_down:
                raise httpx.ConnectError("directory down", request=request)
            if self.directory_status != 200:
                return httpx.Response(self.directory_status, json={"message": "unavailable"})
            return httpx.Response(200, json=self.breweries)
        return httpx.Response(404)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def last_directory_params(self) -> Optional[httpx.QueryParams]:
        calls = self.calls_to(DIRECTORY_HOST)
        return calls[-1].url.params if calls else None


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def upstream_client(upstream: FakeUpstream) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handle)) as client:
        yield client


@pytest_asyncio.fixture
async def client(upstream_client: httpx.AsyncClient) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against the app, with upstream calls mocked."""
    from src.api.app import create_app
    from src.api.dependencies import get_http_client

    async def _test_http_client():
        return upstream_client

    app = create_app()
    app.dependency_overrides[get_http_client] = _test_http_client
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
