"""Domain layer - Itinerary models, raw OTP payload types and errors.

Models are immutable. The only collaborators they touch (geometry
decoder, localizer) are injected through ports.
"""

from .errors import (
    ConfigurationError,
    GeometryDecodeError,
    ItineraryCoreError,
    ItineraryFetchError,
    RenderingError,
    UpstreamContractError,
)
from .itinerary import Alert, Itinerary, Leg
from .models import (
    DistanceUnits,
    ItineraryError,
    ItineraryErrorKind,
    ItineraryFetchResult,
    LineString,
    LngLat,
    LngLatBounds,
    Place,
    TripMode,
)
from .otp import OTPErrorId, OTPMode, OTPPlanResponse, PlanError, ResponseError, parse_otp_error
from .styles import LineStyle, LineStyles
from .trip import Trip

__all__ = [
    # Models
    "Itinerary",
    "Leg",
    "Alert",
    "Trip",
    "TripMode",
    "DistanceUnits",
    "LngLat",
    "LngLatBounds",
    "LineString",
    "Place",
    "LineStyle",
    "LineStyles",
    "ItineraryError",
    "ItineraryErrorKind",
    "ItineraryFetchResult",
    # Raw OTP payloads
    "OTPMode",
    "OTPErrorId",
    "OTPPlanResponse",
    "PlanError",
    "ResponseError",
    "parse_otp_error",
    # Errors
    "ItineraryCoreError",
    "UpstreamContractError",
    "ItineraryFetchError",
    "GeometryDecodeError",
    "ConfigurationError",
    "RenderingError",
]
