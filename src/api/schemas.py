"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import BreweryRecord, SearchResult


# ── Responses ─────────────────────────────────────────────────────────


class BreweryResponse(BaseModel):
    id: str
    name: str
    brewery_type: str
    address_1: Optional[str] = None
    city: str
    state_province: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    website_url: Optional[str] = None
    distance_miles: Optional[float] = None

    @classmethod
    def from_record(cls, record: BreweryRecord) -> "BreweryResponse":
        location = record.location
        return cls(
            id=record.id,
            name=record.name,
            brewery_type=record.category,
            address_1=record.address_line,
            city=record.city,
            state_province=record.region,
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
            website_url=record.website_url,
            distance_miles=record.distance_miles,
        )


class OriginResponse(BaseModel):
    latitude: float
    longitude: float
    radius_miles: float


class SearchResponse(BaseModel):
    origin: Optional[OriginResponse] = None
    breweries: list[BreweryResponse] = []

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        origin = None
        if result.is_radius_filtered:
            origin = OriginResponse(
                latitude=result.origin.latitude,
                longitude=result.origin.longitude,
                radius_miles=result.radius_miles,
            )
        return cls(
            origin=origin,
            breweries=[BreweryResponse.from_record(b) for b in result.breweries],
        )


class DistanceResponse(BaseModel):
    distance_miles: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
