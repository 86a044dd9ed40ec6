"""
Distance calculation using the Haversine formula.

Great-circle distance on a sphere of mean Earth radius, in **miles**.  Used
to filter directory results to a search radius and to annotate each result
with its distance from the search origin.

Numerical guard
---------------
Floating-point error can push the haversine term ``h`` slightly outside
``[0, 1]`` for identical or antipodal points, which makes ``sqrt`` / ``asin``
raise or return NaN.  ``h`` is clamped into range first.  A NaN input still
yields NaN.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .entities import GeoPoint

EARTH_RADIUS_MILES = 3_958.7613


def haversine_miles(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **miles** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    if not math.isnan(h):
        h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(h))


def distance_miles(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_miles(a.latitude, a.longitude, b.latitude, b.longitude)


def within_radius(origin: GeoPoint, candidate: GeoPoint, radius_miles: float) -> bool:
    """True when *candidate* lies within *radius_miles* of *origin* (inclusive)."""
    return distance_miles(origin, candidate) <= radius_miles
