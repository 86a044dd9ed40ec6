"""Unit tests for coordinate parsing and directory record mapping."""

import pytest

from src.domain.coordinates import parse_coordinate, parse_geopoint
from src.domain.entities import GeoPoint
from src.infrastructure.directory import brewery_from_payload


class TestParseCoordinate:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (39.7392, 39.7392),
            (-105, -105.0),
            ("39.7392", 39.7392),
            ("  -104.99 ", -104.99),
            ("0", 0.0),
        ],
    )
    def test_numeric_and_textual_values(self, value, expected):
        assert parse_coordinate(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "north", "39.7N", "nan", "inf", float("nan"), True, [39.7]],
    )
    def test_unusable_values_are_none(self, value):
        assert parse_coordinate(value) is None


class TestParseGeoPoint:
    def test_valid_pair(self):
        assert parse_geopoint("39.7392", -104.9903) == GeoPoint(39.7392, -104.9903)

    def test_missing_half_is_none(self):
        assert parse_geopoint("39.7392", None) is None
        assert parse_geopoint(None, "-104.9903") is None

    def test_out_of_range_is_none(self):
        assert parse_geopoint(91, 0) is None
        assert parse_geopoint(0, -180.5) is None


class TestBreweryFromPayload:
    def test_maps_directory_fields(self):
        record = brewery_from_payload(
            {
                "id": "abc",
                "name": "Downtown Brewing",
                "brewery_type": "brewpub",
                "address_1": "1 Main St",
                "city": "Denver",
                "state_province": "Colorado",
                "latitude": "39.7392",
                "longitude": "-104.9903",
                "website_url": "https://example.com",
            }
        )
        assert record.id == "abc"
        assert record.category == "brewpub"
        assert record.address_line == "1 Main St"
        assert record.region == "Colorado"
        assert record.location == GeoPoint(39.7392, -104.9903)
        assert record.website_url == "https://example.com"
        assert record.distance_miles is None

    def test_missing_optional_fields(self):
        record = brewery_from_payload(
            {"id": "x", "name": "Planned", "brewery_type": "planning",
             "address_1": None, "city": "Denver", "state_province": "Colorado",
             "latitude": None, "longitude": None, "website_url": None}
        )
        assert record.address_line is None
        assert record.website_url is None
        assert not record.has_location

    def test_malformed_coordinates_leave_location_unset(self):
        record = brewery_from_payload(
            {"id": "x", "name": "Bad", "latitude": "unknown", "longitude": "-104.9"}
        )
        assert record.location is None
