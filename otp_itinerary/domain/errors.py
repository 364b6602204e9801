"""Typed exceptions for the itinerary core.

Expected trip-planning failures are never raised: they are classified
into an ``ItineraryError`` value and returned to the caller. The
exceptions below cover the conditions that must abort loudly, such as
an upstream payload that matches none of the known shapes.

All errors inherit from ItineraryCoreError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models import ItineraryError


@dataclass
class ItineraryCoreError(Exception):
    """Base error for the itinerary core.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UpstreamContractError(ItineraryCoreError):
    """The trip planner returned something outside its documented contract.

    Raised for error payloads matching neither the plan-error nor the
    response-error shape, and for itineraries violating structural
    invariants (no legs, legs out of order, a leg ending before it starts).

    Attributes:
        payload: The offending raw fragment, when available
    """

    payload: Any = field(default=None, repr=False)


@dataclass
class ItineraryFetchError(ItineraryCoreError):
    """A fetch result was unwrapped while holding a classified error.

    Attributes:
        error: The classified itinerary error
    """

    error: Optional[ItineraryError] = None


@dataclass
class GeometryDecodeError(ItineraryCoreError):
    """An encoded leg path could not be decoded.

    Attributes:
        encoded: The encoded path string that failed
    """

    encoded: str = ""


@dataclass
class ConfigurationError(ItineraryCoreError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(ItineraryCoreError):
    """Map rendering of an itinerary failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
