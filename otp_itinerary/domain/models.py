"""Immutable domain models for the itinerary core.

All value objects are frozen dataclasses with slots. The itinerary,
leg and alert wrappers live in ``itinerary.py``; this module holds the
small values they are built from and the classified error type.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence, Tuple, Union

from .errors import ItineraryFetchError, UpstreamContractError
from .otp import FROM_PLACE, TO_PLACE, OTPError, OTPErrorId, PlanError, ResponseError

if TYPE_CHECKING:
    from ..ports.localization import LocalizerPort
    from .itinerary import Itinerary

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


class DistanceUnits(Enum):
    """Unit preference for displayed distances."""

    KILOMETERS = "kilometers"
    MILES = "miles"


class TripMode(Enum):
    """Kind of trip candidate shown to the user."""

    TRANSIT = "transit"
    DRIVE = "drive"
    BIKE = "bike"
    WALK = "walk"


@dataclass(frozen=True, slots=True)
class LngLat:
    """Longitude/latitude pair, in that order."""

    lng: float
    lat: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.lng}")

    def to_tuple(self) -> Coordinate:
        return (self.lng, self.lat)


@dataclass(frozen=True, slots=True)
class LngLatBounds:
    """Axis-aligned bounding rectangle in lng/lat space.

    Start from ``LngLatBounds.empty()`` and ``extend`` it; every call
    returns a new bound. Extension is commutative and associative, so
    the result does not depend on the order coordinates arrive in.
    """

    west: float = math.inf
    south: float = math.inf
    east: float = -math.inf
    north: float = -math.inf

    @classmethod
    def empty(cls) -> LngLatBounds:
        return cls()

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Union[LngLat, Coordinate]]) -> LngLatBounds:
        bounds = cls.empty()
        for coord in coordinates:
            bounds = bounds.extend(coord)
        return bounds

    @property
    def is_empty(self) -> bool:
        return self.west > self.east or self.south > self.north

    def extend(self, coord: Union[LngLat, Coordinate, LngLatBounds]) -> LngLatBounds:
        """Return the smallest bound covering both self and ``coord``."""
        if isinstance(coord, LngLatBounds):
            if coord.is_empty:
                return self
            return LngLatBounds(
                west=min(self.west, coord.west),
                south=min(self.south, coord.south),
                east=max(self.east, coord.east),
                north=max(self.north, coord.north),
            )
        lng, lat = coord.to_tuple() if isinstance(coord, LngLat) else coord
        return LngLatBounds(
            west=min(self.west, lng),
            south=min(self.south, lat),
            east=max(self.east, lng),
            north=max(self.north, lat),
        )

    def contains(self, coord: Union[LngLat, Coordinate]) -> bool:
        lng, lat = coord.to_tuple() if isinstance(coord, LngLat) else coord
        return self.west <= lng <= self.east and self.south <= lat <= self.north

    @property
    def center(self) -> Optional[LngLat]:
        if self.is_empty:
            return None
        return LngLat((self.west + self.east) / 2, (self.south + self.north) / 2)

    def to_list(self) -> list[list[float]]:
        """``[[west, south], [east, north]]``, the order map libraries expect."""
        return [[self.west, self.south], [self.east, self.north]]


@dataclass(frozen=True, slots=True)
class Place:
    """A named point a leg starts or ends at."""

    name: str
    location: LngLat


@dataclass(frozen=True, slots=True)
class LineString:
    """Decoded leg geometry as ordered ``(lng, lat)`` pairs."""

    coordinates: Tuple[Coordinate, ...] = field(default_factory=tuple)

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "LineString",
            "coordinates": [list(c) for c in self.coordinates],
        }


class ItineraryErrorKind(Enum):
    """Closed set of fetch failure kinds."""

    OTHER = auto()
    SOURCE_OUTSIDE_BOUNDS = auto()
    DESTINATION_OUTSIDE_BOUNDS = auto()
    TRANSIT_SERVICE_DISABLED = auto()


_ERROR_MESSAGE_KEYS = {
    ItineraryErrorKind.OTHER: "transit_trip_error_unknown",
    ItineraryErrorKind.SOURCE_OUTSIDE_BOUNDS: "transit_area_not_supported_for_source",
    ItineraryErrorKind.DESTINATION_OUTSIDE_BOUNDS: "transit_area_not_supported_for_destination",
    ItineraryErrorKind.TRANSIT_SERVICE_DISABLED: "transit_routing_not_enabled",
}


@dataclass(frozen=True, slots=True)
class ItineraryError:
    """A classified trip-planning failure.

    Attributes:
        kind: Which failure occurred
        message: Diagnostic text carried over from OTP, if any
    """

    kind: ItineraryErrorKind
    message: Optional[str] = None

    @classmethod
    def from_otp(cls, error: OTPError) -> ItineraryError:
        """Classify an OTP error variant.

        Raises:
            UpstreamContractError: If an outside-bounds error names neither
                endpoint as missing, or ``error`` is not a known variant.
        """
        if isinstance(error, PlanError):
            classified = cls._from_plan_error(error)
        elif isinstance(error, ResponseError):
            if error.status == 404:
                classified = cls(ItineraryErrorKind.TRANSIT_SERVICE_DISABLED)
            else:
                classified = cls(ItineraryErrorKind.OTHER)
        else:
            raise UpstreamContractError(
                f"Unsupported OTP error variant {type(error).__name__}",
                payload=error,
            )

        logger.debug(
            "Classified OTP error",
            extra={"otp_error": repr(error), "kind": classified.kind.name},
        )
        return classified

    @classmethod
    def _from_plan_error(cls, error: PlanError) -> ItineraryError:
        if error.id != OTPErrorId.OUTSIDE_BOUNDS:
            return cls(ItineraryErrorKind.OTHER, error.message)

        if TO_PLACE in error.missing:
            return cls(ItineraryErrorKind.DESTINATION_OUTSIDE_BOUNDS, error.msg)
        if FROM_PLACE not in error.missing:
            raise UpstreamContractError(
                "Outside-bounds plan error names no missing endpoint",
                payload=error,
            )
        return cls(ItineraryErrorKind.SOURCE_OUTSIDE_BOUNDS, error.msg)

    def localized_message(self, localizer: LocalizerPort) -> str:
        """User-facing sentence for this kind of failure."""
        return localizer.translate(_ERROR_MESSAGE_KEYS[self.kind])


@dataclass(frozen=True, slots=True)
class ItineraryFetchResult:
    """Outcome of a fetch: candidate itineraries in OTP's order, or one error."""

    itineraries: Tuple[Itinerary, ...] = field(default_factory=tuple)
    error: Optional[ItineraryError] = None

    @classmethod
    def ok(cls, itineraries: Sequence[Itinerary]) -> ItineraryFetchResult:
        return cls(itineraries=tuple(itineraries))

    @classmethod
    def err(cls, error: ItineraryError) -> ItineraryFetchResult:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> Tuple[Itinerary, ...]:
        """Return the itineraries, or raise if the fetch failed.

        Raises:
            ItineraryFetchError: Carrying the classified error.
        """
        if self.error is not None:
            raise ItineraryFetchError(
                f"Itinerary fetch failed ({self.error.kind.name})",
                error=self.error,
            )
        return self.itineraries
