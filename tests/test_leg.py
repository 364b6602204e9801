"""Tests for the Leg view over a raw OTP leg."""

import logging

import pytest
from conftest import PATHS, make_raw_leg

from otp_itinerary.domain import (
    Alert,
    Leg,
    LineString,
    LineStyles,
    LngLat,
    OTPMode,
    UpstreamContractError,
)
from otp_itinerary.domain.itinerary import MODE_EMOJI


def test_from_otp_reads_every_field(decoder):
    raw = make_raw_leg(
        "BUS",
        300_000,
        900_000,
        "bus-42",
        transit=True,
        route="Hawthorne",
        short_name="42",
        color="FF8800",
        alerts=[{"alertHeaderText": "Detour", "alertDescriptionText": "Stop closed"}],
        real_time=True,
    )

    leg = Leg.from_otp(raw, decoder)

    assert leg.mode is OTPMode.BUS
    assert leg.route == "Hawthorne"
    assert leg.route_short_name == "42"
    assert leg.route_color == "FF8800"
    assert leg.source_name == "bus-42 start"
    assert leg.destination_name == "bus-42 end"
    assert leg.source_lnglat == LngLat(-122.678, 45.521)
    assert leg.destination_lnglat == LngLat(-122.640, 45.535)
    assert leg.transit_leg is True
    assert leg.real_time is True
    assert leg.alerts == (Alert("Detour", "Stop closed"),)


def test_alerts_default_to_empty(decoder):
    leg = Leg.from_otp(make_raw_leg(), decoder)
    assert leg.alerts == ()


def test_duration_is_in_seconds(decoder):
    leg = Leg.from_otp(make_raw_leg(start=1_000, end=61_000), decoder)
    assert leg.duration == 60


def test_leg_ending_before_start_is_rejected(decoder):
    with pytest.raises(UpstreamContractError):
        Leg.from_otp(make_raw_leg(start=10_000, end=5_000), decoder)


def test_missing_geometry_is_rejected(decoder):
    raw = make_raw_leg()
    del raw["legGeometry"]

    with pytest.raises(UpstreamContractError):
        Leg.from_otp(raw, decoder)


def test_invalid_coordinates_are_rejected(decoder):
    raw = make_raw_leg()
    raw["from"]["lat"] = 123.0

    with pytest.raises(UpstreamContractError):
        Leg.from_otp(raw, decoder)


@pytest.mark.parametrize("key", ["startTime", "endTime"])
@pytest.mark.parametrize("value", [None, "abc", True, {"ms": 0}])
def test_non_numeric_timestamps_are_rejected(decoder, key, value):
    raw = make_raw_leg()
    raw[key] = value

    with pytest.raises(UpstreamContractError):
        Leg.from_otp(raw, decoder)


def test_null_coordinates_are_rejected(decoder):
    raw = make_raw_leg()
    raw["to"]["lon"] = None

    with pytest.raises(UpstreamContractError):
        Leg.from_otp(raw, decoder)


class TestDisplayLabel:
    def test_every_mode_has_a_mapping(self):
        assert set(MODE_EMOJI) == set(OTPMode)

    @pytest.mark.parametrize(
        "mode, emoji",
        [
            ("WALK", "🚶‍♀️"),
            ("BUS", "🚍"),
            ("TRANSIT", "🚍"),
            ("RAIL", "🚆"),
            ("SUBWAY", "🚇"),
            ("TRAM", "🚊"),
            ("GONDOLA", "🚠"),
            ("FERRY", "⛴️"),
        ],
    )
    def test_emoji_by_mode(self, decoder, mode, emoji):
        assert Leg.from_otp(make_raw_leg(mode), decoder).emoji == emoji

    def test_short_name_prefers_route_short_name(self, decoder):
        leg = Leg.from_otp(make_raw_leg("BUS", route="Hawthorne", short_name="14"), decoder)
        assert leg.short_name == "🚍 14"

    def test_short_name_falls_back_to_route(self, decoder):
        leg = Leg.from_otp(make_raw_leg("RAIL", route="MAX Blue Line"), decoder)
        assert leg.short_name == "🚆 MAX Blue Line"

    def test_walk_leg_label_is_just_the_glyph(self, decoder):
        leg = Leg.from_otp(make_raw_leg("WALK"), decoder)
        assert leg.short_name == "🚶‍♀️"

    def test_unknown_mode_degrades_to_route_name(self, decoder, caplog):
        leg = Leg.from_otp(make_raw_leg("HOVERCRAFT", route="Solent"), decoder)

        with caplog.at_level(logging.ERROR, logger="otp_itinerary.domain.itinerary"):
            label = leg.short_name

        assert leg.mode is OTPMode.UNKNOWN
        assert label == "Solent"
        assert "No emoji for mode" in caplog.text


class TestGeometry:
    def test_geometry_returns_decoded_line(self, decoder):
        leg = Leg.from_otp(make_raw_leg("BUS", points="bus-42"), decoder)

        geometry = leg.geometry()

        assert isinstance(geometry, LineString)
        assert geometry.coordinates == PATHS["bus-42"]
        assert geometry.to_geojson()["type"] == "LineString"

    def test_geometry_is_decoded_on_every_call(self, decoder):
        leg = Leg.from_otp(make_raw_leg(points="walk-to-stop"), decoder)

        first = leg.geometry()
        second = leg.geometry()

        assert first == second
        assert decoder.calls == ["walk-to-stop", "walk-to-stop"]


class TestPaintStyle:
    @pytest.mark.parametrize("mode", ["WALK", "BICYCLE"])
    def test_foot_modes(self, decoder, mode):
        leg = Leg.from_otp(make_raw_leg(mode, color="00FF00"), decoder)

        assert leg.paint_style(active=True) == LineStyles.WALKING_ACTIVE
        assert leg.paint_style(active=False) == LineStyles.WALKING_INACTIVE

    def test_active_transit_with_route_color(self, decoder):
        leg = Leg.from_otp(make_raw_leg("BUS", color="FF8800"), decoder)

        style = leg.paint_style(active=True)

        assert style == LineStyles.active_colored("#FF8800")
        assert style.to_paint()["line-color"] == "#FF8800"

    def test_active_transit_without_route_color(self, decoder):
        leg = Leg.from_otp(make_raw_leg("SUBWAY"), decoder)
        assert leg.paint_style(active=True) == LineStyles.ACTIVE

    def test_inactive_transit_ignores_route_color(self, decoder):
        leg = Leg.from_otp(make_raw_leg("BUS", color="FF8800"), decoder)
        assert leg.paint_style(active=False) == LineStyles.INACTIVE

    def test_walking_styles_are_dashed(self):
        assert "line-dasharray" in LineStyles.WALKING_ACTIVE.to_paint()
        assert "line-dasharray" not in LineStyles.ACTIVE.to_paint()
