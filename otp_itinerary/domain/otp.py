"""Raw OpenTripPlanner payload types.

OTP reports failures in one of two mutually exclusive shapes:

    {"planError": {"id": 400, "missing": ["TO_PLACE"], "msg": "...", "message": "..."}}
    {"responseError": {"status": 404}}

They are parsed into the tagged variant ``OTPError = PlanError | ResponseError``
so that classification can match on the variant instead of probing for keys.
Successful itineraries stay as raw mappings and are wrapped lazily by the
itinerary model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping, Optional, Union

from .errors import UpstreamContractError

logger = logging.getLogger(__name__)

FROM_PLACE = "FROM_PLACE"
TO_PLACE = "TO_PLACE"


class OTPMode(Enum):
    """Travel modes as spelled by OTP in requests and leg payloads.

    UNKNOWN is never sent upstream; it stands for any leg mode this
    package has no display mapping for.
    """

    TRANSIT = "TRANSIT"
    WALK = "WALK"
    BICYCLE = "BICYCLE"
    CAR = "CAR"
    BUS = "BUS"
    RAIL = "RAIL"
    TRAIN = "TRAIN"
    SUBWAY = "SUBWAY"
    TRAM = "TRAM"
    CABLE_CAR = "CABLE_CAR"
    FUNICULAR = "FUNICULAR"
    GONDOLA = "GONDOLA"
    FERRY = "FERRY"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: Optional[str]) -> OTPMode:
        """Parse an OTP mode string, falling back to UNKNOWN."""
        if not raw:
            return cls.UNKNOWN
        try:
            return cls(raw.upper())
        except ValueError:
            logger.warning("Unrecognized OTP mode", extra={"mode": raw})
            return cls.UNKNOWN

    @property
    def is_active_travel(self) -> bool:
        """Walking and cycling legs are drawn with the foot styles."""
        return self in (OTPMode.WALK, OTPMode.BICYCLE)


class OTPErrorId(IntEnum):
    """Plan error identifiers reported by OTP (``planError.id``)."""

    SYSTEM_ERROR = 500
    OUTSIDE_BOUNDS = 400
    PATH_NOT_FOUND = 404
    NO_TRANSIT_TIMES = 406
    REQUEST_TIMEOUT = 408
    TOO_CLOSE = 409
    BOGUS_PARAMETER = 413
    GEOCODE_FROM_NOT_FOUND = 440
    GEOCODE_TO_NOT_FOUND = 450
    GEOCODE_FROM_TO_NOT_FOUND = 460
    LOCATION_NOT_ACCESSIBLE = 470


@dataclass(frozen=True, slots=True)
class PlanError:
    """OTP could plan nothing for the request.

    Attributes:
        id: OTP error identifier, usually one of OTPErrorId; unfamiliar
            symbolic ids are kept as strings
        missing: Endpoints OTP could not resolve (FROM_PLACE / TO_PLACE)
        msg: Human-readable explanation
        message: OTP's symbolic error name
    """

    id: Union[int, str]
    missing: tuple[str, ...] = field(default_factory=tuple)
    msg: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ResponseError:
    """The request never produced a plan; ``status`` is HTTP-like.

    A status of 0 means no response was received at all.
    """

    status: int


OTPError = Union[PlanError, ResponseError]


@dataclass(frozen=True, slots=True)
class OTPPlanResponse:
    """What the transport hands back: raw itineraries or one raw error."""

    itineraries: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
    error: Optional[OTPError] = None

    @property
    def is_success(self) -> bool:
        return self.error is None


_ERROR_ID_ALIASES = {
    "OUTSIDE_COVERAGE_BOUNDS": OTPErrorId.OUTSIDE_BOUNDS,
}


def _parse_error_id(raw: Any) -> Union[int, str]:
    # Unfamiliar symbolic ids pass through as strings and classify as OTHER.
    if isinstance(raw, bool):
        raise UpstreamContractError("planError.id must be an integer or string", payload=raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip():
        text = raw.strip()
        if text.isdigit():
            return int(text)
        name = text.upper().replace("-", "_")
        if name in _ERROR_ID_ALIASES:
            return _ERROR_ID_ALIASES[name].value
        if name in OTPErrorId.__members__:
            return OTPErrorId[name].value
        return text
    raise UpstreamContractError(f"Unusable planError.id {raw!r}", payload=raw)


def parse_otp_error(payload: Mapping[str, Any]) -> OTPError:
    """Parse a raw OTP error payload into its tagged variant.

    Args:
        payload: Either ``{"planError": {...}}`` or ``{"responseError": {...}}``.

    Returns:
        PlanError or ResponseError.

    Raises:
        UpstreamContractError: If the payload matches neither shape.
    """
    if not isinstance(payload, Mapping):
        raise UpstreamContractError("OTP error payload is not a mapping", payload=payload)

    plan_error = payload.get("planError")
    response_error = payload.get("responseError")

    if isinstance(plan_error, Mapping) and response_error is None:
        missing = plan_error.get("missing") or ()
        return PlanError(
            id=_parse_error_id(plan_error.get("id")),
            missing=tuple(str(m) for m in missing),
            msg=plan_error.get("msg"),
            message=plan_error.get("message"),
        )

    if isinstance(response_error, Mapping) and plan_error is None:
        status = response_error.get("status")
        if isinstance(status, bool) or not isinstance(status, int):
            raise UpstreamContractError(
                "responseError.status must be an integer", payload=payload
            )
        return ResponseError(status=status)

    raise UpstreamContractError(
        "OTP error payload matches neither planError nor responseError",
        payload=payload,
    )
