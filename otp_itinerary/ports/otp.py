"""OTP transport port - Abstraction over the HTTP call to the trip planner.

Implementation: adapters/otp/requests_adapter.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import LngLat
    from ..domain.otp import OTPMode, OTPPlanResponse


class OTPTransportPort(Protocol):
    """Port for requesting itineraries from an OTP deployment.

    Implementations own timeouts, retries and cancellation. Every failure
    must come back as an ``OTPPlanResponse`` carrying a PlanError or a
    ResponseError; nothing is raised for expected failures.
    """

    def plan(
        self,
        origin: LngLat,
        destination: LngLat,
        num_itineraries: int,
        modes: Sequence[OTPMode],
        departure_time: Optional[str] = None,
        departure_date: Optional[str] = None,
        arrive_by: Optional[bool] = None,
    ) -> OTPPlanResponse:
        """Request up to ``num_itineraries`` candidate trips.

        Args:
            origin: Where the trip starts.
            destination: Where the trip ends.
            num_itineraries: Upper bound on returned candidates.
            modes: OTP modes to allow (always includes TRANSIT).
            departure_time: Optional time string understood by OTP.
            departure_date: Optional date string understood by OTP.
            arrive_by: Whether the time is an arrival deadline.

        Returns:
            Raw itineraries in OTP's ranking order, or one raw error.
        """
        ...
