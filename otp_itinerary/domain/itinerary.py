"""Itinerary, leg and alert views over raw OTP itineraries.

Every object here is built once from the raw payload and never mutated.
Derived values (geometry, bounds, labels, formatted strings) are
recomputed on each access.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple

from .. import formatting
from .errors import UpstreamContractError
from .models import DistanceUnits, LineString, LngLat, LngLatBounds, Place, TripMode
from .otp import OTPMode
from .styles import LineStyle, LineStyles

if TYPE_CHECKING:
    from ..ports.geometry import GeometryDecoderPort
    from ..ports.localization import LocalizerPort

logger = logging.getLogger(__name__)

ALERT_MARKER = "⚠️"
ROUTE_SEPARATOR = " → "

# UNKNOWN maps to no glyph so labels degrade to the bare route name.
MODE_EMOJI: Mapping[OTPMode, str] = {
    OTPMode.WALK: "🚶‍♀️",
    OTPMode.BUS: "🚍",
    OTPMode.TRANSIT: "🚍",
    OTPMode.TRAIN: "🚆",
    OTPMode.RAIL: "🚆",
    OTPMode.SUBWAY: "🚇",
    OTPMode.BICYCLE: "🚲",
    OTPMode.CABLE_CAR: "🚊",
    OTPMode.TRAM: "🚊",
    OTPMode.FUNICULAR: "🚡",
    OTPMode.GONDOLA: "🚠",
    OTPMode.CAR: "🚙",
    OTPMode.FERRY: "⛴️",
    OTPMode.UNKNOWN: "",
}


def _require(raw: Mapping[str, Any], key: str, context: str) -> Any:
    try:
        return raw[key]
    except (KeyError, TypeError) as e:
        raise UpstreamContractError(
            f"{context} is missing {key!r}", payload=raw, cause=e
        )


def _timestamp(raw: Mapping[str, Any], key: str, context: str) -> int:
    value = _require(raw, key, context)
    if isinstance(value, bool):
        raise UpstreamContractError(f"{context} has a non-numeric {key!r}", payload=raw)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise UpstreamContractError(
            f"{context} has a non-numeric {key!r}", payload=raw, cause=e
        )


def _place(raw: Mapping[str, Any], context: str) -> Place:
    try:
        location = LngLat(
            lng=float(_require(raw, "lon", context)),
            lat=float(_require(raw, "lat", context)),
        )
    except (TypeError, ValueError) as e:
        raise UpstreamContractError(f"{context} has invalid coordinates", payload=raw, cause=e)
    return Place(name=str(raw.get("name") or ""), location=location)


@dataclass(frozen=True, slots=True)
class Alert:
    """A service disruption notice attached to a leg."""

    header_text: str
    description_text: str

    @classmethod
    def from_otp(cls, raw: Mapping[str, Any]) -> Alert:
        return cls(
            header_text=str(raw.get("alertHeaderText") or ""),
            description_text=str(raw.get("alertDescriptionText") or ""),
        )


@dataclass(frozen=True, slots=True)
class Leg:
    """One contiguous segment of travel in a single mode.

    Attributes:
        mode: OTP travel mode, UNKNOWN when OTP sent something unmapped
        route: Full route name (empty for walking legs)
        route_short_name: Short route name such as "42", if any
        route_color: Route color as hex without the leading '#', if any
        source: Where the leg starts
        destination: Where the leg ends
        start_time: Departure, epoch milliseconds
        end_time: Arrival, epoch milliseconds
        transit_leg: Whether this leg rides a transit vehicle
        real_time: Whether times come from real-time data
        encoded_points: Encoded path of the traveled line
        alerts: Service alerts affecting this leg
        decoder: Decoder applied to ``encoded_points`` on demand
    """

    mode: OTPMode
    route: str
    route_short_name: Optional[str]
    route_color: Optional[str]
    source: Place
    destination: Place
    start_time: int
    end_time: int
    transit_leg: bool
    real_time: bool
    encoded_points: str
    alerts: Tuple[Alert, ...]
    decoder: GeometryDecoderPort = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.end_time < self.start_time:
            raise UpstreamContractError(
                f"Leg ends before it starts ({self.start_time} > {self.end_time})"
            )

    @classmethod
    def from_otp(cls, raw: Mapping[str, Any], decoder: GeometryDecoderPort) -> Leg:
        """Build a leg from one entry of an OTP itinerary's ``legs``.

        Raises:
            UpstreamContractError: If required fields are missing or invalid.
        """
        geometry = _require(raw, "legGeometry", "leg")
        return cls(
            mode=OTPMode.parse(raw.get("mode")),
            route=str(raw.get("route") or ""),
            route_short_name=raw.get("routeShortName") or None,
            route_color=raw.get("routeColor") or None,
            source=_place(_require(raw, "from", "leg"), "leg.from"),
            destination=_place(_require(raw, "to", "leg"), "leg.to"),
            start_time=_timestamp(raw, "startTime", "leg"),
            end_time=_timestamp(raw, "endTime", "leg"),
            transit_leg=bool(raw.get("transitLeg", False)),
            real_time=bool(raw.get("realTime", False)),
            encoded_points=str(_require(geometry, "points", "legGeometry")),
            alerts=tuple(Alert.from_otp(a) for a in raw.get("alerts") or ()),
            decoder=decoder,
        )

    @property
    def emoji(self) -> str:
        if self.mode is OTPMode.UNKNOWN:
            logger.error("No emoji for mode", extra={"mode": self.mode.value})
        return MODE_EMOJI[self.mode]

    @property
    def short_name(self) -> str:
        """Glyph plus route name, e.g. ``"🚍 42"``."""
        name = self.route_short_name or self.route
        return f"{self.emoji} {name}".strip()

    @property
    def source_name(self) -> str:
        return self.source.name

    @property
    def destination_name(self) -> str:
        return self.destination.name

    @property
    def source_lnglat(self) -> LngLat:
        return self.source.location

    @property
    def destination_lnglat(self) -> LngLat:
        return self.destination.location

    @property
    def duration(self) -> float:
        """Seconds spent on this leg."""
        return (self.end_time - self.start_time) / 1000

    def geometry(self) -> LineString:
        """Decode the traveled line. Not cached; decodes on every call."""
        coordinates = tuple(
            (float(lng), float(lat)) for lng, lat in self.decoder.decode(self.encoded_points)
        )
        return LineString(coordinates=coordinates)

    def paint_style(self, active: bool) -> LineStyle:
        if self.mode.is_active_travel:
            return LineStyles.WALKING_ACTIVE if active else LineStyles.WALKING_INACTIVE
        if not active:
            return LineStyles.INACTIVE
        if self.route_color:
            return LineStyles.active_colored(f"#{self.route_color}")
        return LineStyles.ACTIVE


@dataclass(frozen=True, slots=True)
class Itinerary:
    """One complete candidate trip, as ranked by OTP.

    Attributes:
        legs: Legs in travel order
        start_time: Departure, epoch milliseconds
        end_time: Arrival, epoch milliseconds
        duration: Total travel time in seconds
        foot_distance_meters: Non-transit distance; biked when ``with_bicycle``
        distance_units: Unit used for displayed distances
        with_bicycle: Whether cycling was allowed for access and egress
        localizer: Source of display strings
    """

    legs: Tuple[Leg, ...]
    start_time: int
    end_time: int
    duration: float
    foot_distance_meters: float
    distance_units: DistanceUnits
    with_bicycle: bool
    localizer: LocalizerPort = field(compare=False, repr=False)
    mode: TripMode = field(default=TripMode.TRANSIT, init=False)

    def __post_init__(self) -> None:
        if not self.legs:
            raise UpstreamContractError("Itinerary has no legs")
        for previous, leg in zip(self.legs, self.legs[1:]):
            if leg.start_time < previous.end_time:
                raise UpstreamContractError(
                    "Itinerary legs overlap",
                    payload=(previous.end_time, leg.start_time),
                )

    @classmethod
    def from_otp(
        cls,
        raw: Mapping[str, Any],
        distance_units: DistanceUnits,
        with_bicycle: bool,
        decoder: GeometryDecoderPort,
        localizer: LocalizerPort,
    ) -> Itinerary:
        """Wrap one raw OTP itinerary.

        Raises:
            UpstreamContractError: If the itinerary is structurally invalid.
        """
        legs = tuple(
            Leg.from_otp(raw_leg, decoder) for raw_leg in _require(raw, "legs", "itinerary")
        )
        start_time = _timestamp(raw, "startTime", "itinerary")
        end_time = _timestamp(raw, "endTime", "itinerary")
        duration = raw.get("duration")
        return cls(
            legs=legs,
            start_time=start_time,
            end_time=end_time,
            duration=float(duration) if duration is not None else (end_time - start_time) / 1000,
            foot_distance_meters=float(raw.get("walkDistance") or 0.0),
            distance_units=distance_units,
            with_bicycle=with_bicycle,
            localizer=localizer,
        )

    # Transit itineraries leave this blank; length does not help pick one.
    @property
    def length_formatted(self) -> Optional[str]:
        return None

    @property
    def duration_formatted(self) -> str:
        return formatting.format_duration(self.duration, self.localizer, shortform=True)

    def start_stop_times_formatted(self, tz: Optional[tzinfo] = None) -> str:
        return self.localizer.translate(
            "time_range$startTime$endTime",
            startTime=formatting.format_time(self.start_time, tz),
            endTime=formatting.format_time(self.end_time, tz),
        )

    def formatted_foot_distance(self) -> str:
        """Walking (or biking) distance in the preferred unit, labelled."""
        km = self.foot_distance_meters / 1000
        if self.distance_units is DistanceUnits.KILOMETERS:
            distance = formatting.format_distance(km, DistanceUnits.KILOMETERS, self.localizer)
        else:
            distance = formatting.format_distance(
                formatting.kilometers_to_miles(km), DistanceUnits.MILES, self.localizer
            )

        key = "bike_distance" if self.with_bicycle else "walk_distance"
        return self.localizer.translate(key, preformattedDistance=distance)

    @property
    def via_route_formatted(self) -> str:
        return ROUTE_SEPARATOR.join(
            leg.short_name + ALERT_MARKER if leg.alerts else leg.short_name
            for leg in self.legs
        )

    @property
    def alerts(self) -> Tuple[Alert, ...]:
        return tuple(alert for leg in self.legs for alert in leg.alerts)

    @property
    def has_alerts(self) -> bool:
        return any(leg.alerts for leg in self.legs)

    @property
    def first_transit_leg(self) -> Optional[Leg]:
        # At most one access leg precedes the first transit leg.
        return next((leg for leg in self.legs[:2] if leg.transit_leg), None)

    @property
    def bounds(self) -> LngLatBounds:
        bounds = LngLatBounds.empty()
        for leg in self.legs:
            for coord in leg.geometry().coordinates:
                bounds = bounds.extend(coord)
        return bounds
