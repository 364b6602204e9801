"""OTP REST client.

Calls ``GET /otp/routers/{router}/plan`` and folds every outcome into an
OTPPlanResponse:
- HTTP error status -> ResponseError(status)
- no response at all (timeout, refused connection) -> ResponseError(0)
- body with OTP's ``error`` object -> PlanError
- otherwise the raw ``plan.itineraries`` list
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

import requests

from ...config import OTPConfig, get_config
from ...domain.errors import UpstreamContractError
from ...domain.models import LngLat
from ...domain.otp import OTPMode, OTPPlanResponse, ResponseError, parse_otp_error

NO_RESPONSE_STATUS = 0


def _place_param(location: LngLat) -> str:
    # OTP expects "lat,lon".
    return f"{location.lat},{location.lng}"


@dataclass
class RequestsOTPClient:
    """OTPTransportPort implementation over ``requests``.

    Attributes:
        config: OTP connection configuration
        session: HTTP session reused across calls
    """

    config: OTPConfig = field(default_factory=lambda: get_config().otp)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _build_params(
        self,
        origin: LngLat,
        destination: LngLat,
        num_itineraries: int,
        modes: Sequence[OTPMode],
        departure_time: Optional[str],
        departure_date: Optional[str],
        arrive_by: Optional[bool],
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "fromPlace": _place_param(origin),
            "toPlace": _place_param(destination),
            "numItineraries": num_itineraries,
            "mode": ",".join(mode.value for mode in modes),
        }
        if departure_time:
            params["time"] = departure_time
        if departure_date:
            params["date"] = departure_date
        if arrive_by is not None:
            params["arriveBy"] = "true" if arrive_by else "false"
        return params

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
        """Request itineraries from OTP.

        Returns:
            Raw itineraries or one raw error.

        Raises:
            UpstreamContractError: If a successful response is not a plan.
        """
        url = self.config.plan_url
        params = self._build_params(
            origin,
            destination,
            num_itineraries,
            modes,
            departure_time,
            departure_date,
            arrive_by,
        )
        self._logger.debug("Requesting OTP plan", extra={"url": url, "params": params})

        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            self._logger.warning(
                "OTP request failed without a response",
                extra={"url": url, "error": str(e)},
            )
            return OTPPlanResponse(error=ResponseError(status=NO_RESPONSE_STATUS))

        if not response.ok:
            self._logger.warning(
                "OTP returned an error status",
                extra={"url": url, "status": response.status_code},
            )
            return OTPPlanResponse(error=ResponseError(status=response.status_code))

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamContractError("OTP response is not JSON", cause=e)

        return self._parse_body(body)

    def _parse_body(self, body: Any) -> OTPPlanResponse:
        if not isinstance(body, Mapping):
            raise UpstreamContractError("OTP response is not an object", payload=body)

        if body.get("error"):
            error = parse_otp_error({"planError": body["error"]})
            self._logger.info("OTP reported a plan error", extra={"otp_error": repr(error)})
            return OTPPlanResponse(error=error)

        plan = body.get("plan")
        itineraries = plan.get("itineraries") if isinstance(plan, Mapping) else None
        if not isinstance(itineraries, list):
            raise UpstreamContractError("OTP response has no plan.itineraries", payload=body)

        self._logger.debug("OTP plan received", extra={"itineraries": len(itineraries)})
        return OTPPlanResponse(itineraries=tuple(itineraries))
