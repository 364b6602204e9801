"""Tests for the small domain value objects."""

import math

import pytest

from otp_itinerary.domain import (
    ItineraryError,
    ItineraryErrorKind,
    ItineraryFetchError,
    ItineraryFetchResult,
    LngLat,
    LngLatBounds,
)


class TestLngLat:
    def test_valid_coordinates(self):
        point = LngLat(lng=-122.68, lat=45.52)
        assert point.to_tuple() == (-122.68, 45.52)

    @pytest.mark.parametrize("lng, lat", [(0, 91), (0, -90.5), (181, 0), (-180.1, 0)])
    def test_out_of_range(self, lng, lat):
        with pytest.raises(ValueError):
            LngLat(lng=lng, lat=lat)


class TestLngLatBounds:
    def test_empty_bounds(self):
        bounds = LngLatBounds.empty()

        assert bounds.is_empty
        assert bounds.center is None
        assert not bounds.contains((0.0, 0.0))

    def test_single_point(self):
        bounds = LngLatBounds.empty().extend((2.35, 48.85))

        assert not bounds.is_empty
        assert bounds.contains(LngLat(2.35, 48.85))
        assert bounds.center == LngLat(2.35, 48.85)

    def test_extend_returns_new_bounds(self):
        empty = LngLatBounds.empty()
        extended = empty.extend((1.0, 1.0))

        assert empty.is_empty
        assert extended is not empty

    def test_extend_is_order_independent(self):
        coords = [(1.0, 5.0), (-3.0, 2.0), (4.0, -1.0), (0.5, 0.5)]

        forward = LngLatBounds.from_coordinates(coords)
        backward = LngLatBounds.from_coordinates(reversed(coords))

        assert forward == backward == LngLatBounds(west=-3.0, south=-1.0, east=4.0, north=5.0)

    def test_extend_with_bounds(self):
        a = LngLatBounds.from_coordinates([(0.0, 0.0), (1.0, 1.0)])
        b = LngLatBounds.from_coordinates([(5.0, -2.0)])

        assert a.extend(b) == b.extend(a) == LngLatBounds(0.0, -2.0, 5.0, 1.0)
        assert a.extend(LngLatBounds.empty()) == a

    def test_to_list(self):
        bounds = LngLatBounds.from_coordinates([(LngLat(1.0, 2.0)), (3.0, 4.0)])
        assert bounds.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_empty_defaults_are_infinite(self):
        bounds = LngLatBounds.empty()
        assert math.isinf(bounds.west) and math.isinf(bounds.north)


class TestItineraryFetchResult:
    def test_ok(self):
        result = ItineraryFetchResult.ok([])

        assert result.is_success
        assert result.unwrap() == ()

    def test_err(self):
        error = ItineraryError(ItineraryErrorKind.TRANSIT_SERVICE_DISABLED)
        result = ItineraryFetchResult.err(error)

        assert not result.is_success
        with pytest.raises(ItineraryFetchError) as exc_info:
            result.unwrap()
        assert exc_info.value.error == error
        assert "TRANSIT_SERVICE_DISABLED" in str(exc_info.value)
