"""
Coordinate parsing boundary.

The brewery directory and the geocoder send latitude / longitude either as
JSON numbers or as strings.  All coercion goes through ``parse_coordinate``
so a record with unusable coordinates is rejected in exactly one place.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from .entities import GeoPoint

CoordinateValue = Union[str, int, float, None]


def parse_coordinate(value: CoordinateValue) -> Optional[float]:
    """Return *value* as a finite float, or ``None`` if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_geopoint(
    latitude: CoordinateValue, longitude: CoordinateValue
) -> Optional[GeoPoint]:
    """Build a ``GeoPoint`` when both values parse and lie in valid ranges."""
    lat = parse_coordinate(latitude)
    lon = parse_coordinate(longitude)
    if lat is None or lon is None:
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        return None
    return GeoPoint(lat, lon)
