"""Itinerary fetch orchestration.

Turns a transport-level OTP response into a domain-level result: every
candidate wrapped as an Itinerary, or a single classified ItineraryError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.itinerary import Itinerary
from ..domain.models import DistanceUnits, ItineraryError, ItineraryFetchResult, LngLat
from ..domain.otp import OTPMode
from ..ports.geometry import GeometryDecoderPort
from ..ports.localization import LocalizerPort
from ..ports.otp import OTPTransportPort

DEFAULT_NUM_ITINERARIES = 5


@dataclass
class ItineraryService:
    """Fetches the best transit itineraries between two points.

    Attributes:
        transport: Performs the HTTP call to OTP
        decoder: Geometry decoder handed to every leg
        localizer: Display strings for every itinerary
    """

    transport: OTPTransportPort
    decoder: GeometryDecoderPort
    localizer: LocalizerPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def fetch_best(
        self,
        origin: LngLat,
        destination: LngLat,
        distance_units: DistanceUnits,
        departure_time: Optional[str] = None,
        departure_date: Optional[str] = None,
        arrive_by: Optional[bool] = None,
        with_bicycle: bool = False,
    ) -> ItineraryFetchResult:
        """Fetch up to five candidate itineraries, best first.

        Transit is always requested; bicycle is added when ``with_bicycle``
        is set. The call is all-or-nothing: either every candidate is
        returned in OTP's ranking order, or one classified error is.
        The call blocks until the transport returns; cancellation and
        timeouts are the transport's concern.

        Args:
            origin: Where the trip starts.
            destination: Where the trip ends.
            distance_units: Unit for displayed distances.
            departure_time: Optional time string passed through to OTP.
            departure_date: Optional date string passed through to OTP.
            arrive_by: Whether the time is an arrival deadline.
            with_bicycle: Allow cycling for access and egress.

        Returns:
            ItineraryFetchResult holding itineraries or an ItineraryError.

        Raises:
            UpstreamContractError: If OTP's payload breaks its contract.
        """
        modes = [OTPMode.TRANSIT]
        if with_bicycle:
            modes.append(OTPMode.BICYCLE)

        self._logger.info(
            "Fetching itineraries",
            extra={
                "origin": origin.to_tuple(),
                "destination": destination.to_tuple(),
                "modes": [m.value for m in modes],
                "arrive_by": arrive_by,
            },
        )

        response = self.transport.plan(
            origin,
            destination,
            DEFAULT_NUM_ITINERARIES,
            modes,
            departure_time=departure_time,
            departure_date=departure_date,
            arrive_by=arrive_by,
        )

        if response.error is not None:
            error = ItineraryError.from_otp(response.error)
            self._logger.info(
                "Itinerary fetch failed",
                extra={"kind": error.kind.name, "otp_message": error.message},
            )
            return ItineraryFetchResult.err(error)

        itineraries = [
            Itinerary.from_otp(
                raw,
                distance_units,
                with_bicycle,
                decoder=self.decoder,
                localizer=self.localizer,
            )
            for raw in response.itineraries
        ]
        self._logger.info("Itineraries fetched", extra={"count": len(itineraries)})
        return ItineraryFetchResult.ok(itineraries)
