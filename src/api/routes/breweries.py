"""
Brewery endpoints
=================

GET /api/v1/breweries -- search breweries near a city / region or a point
GET /api/v1/distance  -- great-circle distance between two points, in miles
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_search_service
from src.api.middleware import limiter
from src.api.schemas import DistanceResponse, ErrorResponse, SearchResponse
from src.config import settings
from src.domain.distance import haversine_miles
from src.domain.entities import DirectoryUnavailable
from src.domain.search import BrewerySearchService

router = APIRouter(tags=["breweries"])


@router.get(
    "/breweries",
    response_model=SearchResponse,
    summary="Search breweries near a place",
    description=(
        "With ``lat``/``lon`` the search is centred on that point; otherwise "
        "``city``/``state`` are geocoded.  When an origin is known and "
        "``radius`` is positive only breweries within the radius are "
        "returned.  If geocoding fails the search falls back to matching "
        "on city and state."
    ),
    responses={
        502: {"model": ErrorResponse, "description": "Directory unreachable."},
        503: {"model": ErrorResponse, "description": "Directory unavailable."},
    },
)
@limiter.limit(settings.rate_limit)
async def search_breweries(
    request: Request,
    city: Optional[str] = Query(None, description="City name, e.g. Denver"),
    state: Optional[str] = Query(None, description="State or province, e.g. Colorado"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
    radius: Optional[float] = Query(None, ge=0, description="Radius in miles; 0 disables filtering"),
    per_page: Optional[int] = Query(None, ge=1, description="Capped at the directory maximum"),
    service: BrewerySearchService = Depends(get_search_service),
):
    try:
        result = await service.search(
            city=city.strip() if city else None,
            region=state.strip() if state else None,
            latitude=lat,
            longitude=lon,
            radius_miles=radius,
            page_size=per_page,
        )
    except DirectoryUnavailable as exc:
        raise HTTPException(
            status_code=exc.status_code, detail="Failed to fetch breweries"
        ) from exc
    return SearchResponse.from_result(result)


@router.get(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance in miles",
)
@limiter.limit(settings.rate_limit)
async def distance(
    request: Request,
    from_lat: float = Query(..., ge=-90, le=90),
    from_lon: float = Query(..., ge=-180, le=180),
    to_lat: float = Query(..., ge=-90, le=90),
    to_lon: float = Query(..., ge=-180, le=180),
):
    return DistanceResponse(
        distance_miles=haversine_miles(from_lat, from_lon, to_lat, to_lon)
    )
