"""
FastAPI application factory.

* Registers routes for brewery search and admin.
* Opens / closes the shared outbound HTTP client via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, breweries
from src.config import settings

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the upstream HTTP client on startup; close it on shutdown."""
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    logger.info("HTTP client ready (timeout %.1fs)", settings.http_timeout_seconds)
    yield
    await app.state.http_client.aclose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Brewery Map API",
        description=(
            "Finds breweries near a city or a geolocation.  Proxies the Open "
            "Brewery DB directory and the Nominatim geocoder, and filters "
            "results to a great-circle radius for display on a map."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(breweries.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
