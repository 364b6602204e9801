"""Shared fixtures: raw OTP payload builders and in-memory collaborators."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from otp_itinerary.adapters.localization import CatalogLocalizer
from otp_itinerary.domain import DistanceUnits, Itinerary

# Decoded (lng, lat) geometry for the fake encoded paths used below.
PATHS: Dict[str, Tuple[Tuple[float, float], ...]] = {
    "walk-to-stop": ((-122.680, 45.520), (-122.678, 45.521)),
    "bus-42": ((-122.678, 45.521), (-122.650, 45.530), (-122.640, 45.535)),
    "walk-from-stop": ((-122.640, 45.535), (-122.641, 45.537)),
    "bike-to-stop": ((-122.700, 45.500), (-122.690, 45.510)),
    "far-west": ((-123.100, 45.400), (-123.000, 45.410)),
}


class FakeDecoder:
    """GeometryDecoderPort returning canned coordinates and counting calls."""

    def __init__(self, paths: Dict[str, Tuple[Tuple[float, float], ...]]):
        self.paths = paths
        self.calls: List[str] = []

    def decode(self, encoded: str) -> Sequence[Tuple[float, float]]:
        self.calls.append(encoded)
        return self.paths.get(encoded, ())


class FakeTransport:
    """OTPTransportPort returning a preset response and recording requests."""

    def __init__(self, response):
        self.response = response
        self.requests: List[Dict[str, Any]] = []

    def plan(
        self,
        origin,
        destination,
        num_itineraries,
        modes,
        departure_time=None,
        departure_date=None,
        arrive_by=None,
    ):
        self.requests.append(
            {
                "origin": origin,
                "destination": destination,
                "num_itineraries": num_itineraries,
                "modes": list(modes),
                "departure_time": departure_time,
                "departure_date": departure_date,
                "arrive_by": arrive_by,
            }
        )
        return self.response


def make_raw_leg(
    mode: str = "WALK",
    start: int = 0,
    end: int = 300_000,
    points: str = "walk-to-stop",
    transit: bool = False,
    route: str = "",
    short_name: Optional[str] = None,
    color: Optional[str] = None,
    alerts: Optional[List[Dict[str, str]]] = None,
    real_time: bool = False,
) -> Dict[str, Any]:
    coords = PATHS.get(points, ((-122.6, 45.5), (-122.6, 45.5)))
    leg: Dict[str, Any] = {
        "mode": mode,
        "route": route,
        "from": {"name": f"{points} start", "lon": coords[0][0], "lat": coords[0][1]},
        "to": {"name": f"{points} end", "lon": coords[-1][0], "lat": coords[-1][1]},
        "startTime": start,
        "endTime": end,
        "transitLeg": transit,
        "realTime": real_time,
        "legGeometry": {"points": points},
    }
    if short_name is not None:
        leg["routeShortName"] = short_name
    if color is not None:
        leg["routeColor"] = color
    if alerts is not None:
        leg["alerts"] = alerts
    return leg


def make_raw_itinerary(
    legs: List[Dict[str, Any]], walk_distance: float = 450.0
) -> Dict[str, Any]:
    start = legs[0]["startTime"]
    end = legs[-1]["endTime"]
    return {
        "legs": legs,
        "duration": (end - start) / 1000,
        "startTime": start,
        "endTime": end,
        "walkDistance": walk_distance,
    }


def bus_trip_legs(alerts: Optional[List[Dict[str, str]]] = None) -> List[Dict[str, Any]]:
    """walk(0-300s), bus 42 (300-900s), walk(900-1000s)."""
    return [
        make_raw_leg("WALK", 0, 300_000, "walk-to-stop"),
        make_raw_leg(
            "BUS",
            300_000,
            900_000,
            "bus-42",
            transit=True,
            route="Hawthorne",
            short_name="42",
            color="FF8800",
            alerts=alerts,
        ),
        make_raw_leg("WALK", 900_000, 1_000_000, "walk-from-stop"),
    ]


@pytest.fixture
def localizer() -> CatalogLocalizer:
    return CatalogLocalizer()


@pytest.fixture
def decoder() -> FakeDecoder:
    return FakeDecoder(PATHS)


@pytest.fixture
def build_itinerary(decoder, localizer):
    """Factory wrapping raw legs into an Itinerary."""

    def build(
        legs: List[Dict[str, Any]],
        walk_distance: float = 450.0,
        distance_units: DistanceUnits = DistanceUnits.KILOMETERS,
        with_bicycle: bool = False,
    ) -> Itinerary:
        return Itinerary.from_otp(
            make_raw_itinerary(legs, walk_distance),
            distance_units,
            with_bicycle,
            decoder=decoder,
            localizer=localizer,
        )

    return build
