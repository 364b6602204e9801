"""Tests for the polyline-backed geometry decoder."""

import pytest

from otp_itinerary.adapters.geometry import PolylineGeometryDecoder
from otp_itinerary.domain import GeometryDecodeError

# Reference example from the encoded polyline algorithm documentation.
ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
EXPECTED_LNG_LAT = [(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)]


def test_decode_returns_lng_lat_pairs():
    coords = PolylineGeometryDecoder().decode(ENCODED)

    assert len(coords) == 3
    for (lng, lat), (expected_lng, expected_lat) in zip(coords, EXPECTED_LNG_LAT):
        assert lng == pytest.approx(expected_lng)
        assert lat == pytest.approx(expected_lat)


def test_decode_is_deterministic():
    decoder = PolylineGeometryDecoder()
    assert decoder.decode(ENCODED) == decoder.decode(ENCODED)


def test_empty_path_decodes_to_nothing():
    assert PolylineGeometryDecoder().decode("") == ()


def test_truncated_path_raises():
    with pytest.raises(GeometryDecodeError) as exc_info:
        PolylineGeometryDecoder().decode("_p~iF~ps|U_")
    assert exc_info.value.encoded == "_p~iF~ps|U_"


def test_precision_six():
    # Same path encoded at precision 6 decodes to coordinates ten times smaller at precision 5.
    coords_p5 = PolylineGeometryDecoder(precision=5).decode(ENCODED)
    coords_p6 = PolylineGeometryDecoder(precision=6).decode(ENCODED)

    assert coords_p6[0][1] == pytest.approx(coords_p5[0][1] / 10)
