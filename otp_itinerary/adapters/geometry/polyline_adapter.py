"""Encoded polyline decoder.

OTP encodes leg geometry as a Google encoded polyline with coordinates
in (latitude, longitude) order. The itinerary core works in
(longitude, latitude), so pairs are swapped on the way out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Tuple

import polyline

from ...domain.errors import GeometryDecodeError


@dataclass
class PolylineGeometryDecoder:
    """GeometryDecoderPort backed by the ``polyline`` package.

    Attributes:
        precision: Number of decimal places encoded (OTP uses 5)
    """

    precision: int = 5

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def decode(self, encoded: str) -> Sequence[Tuple[float, float]]:
        """Decode to ``(lng, lat)`` pairs.

        Raises:
            GeometryDecodeError: If the string is not a valid polyline.
        """
        if not encoded:
            return ()

        try:
            points = polyline.decode(encoded, self.precision)
        except (IndexError, ValueError, TypeError) as e:
            self._logger.warning(
                "Polyline decode failed",
                extra={"length": len(encoded), "error": str(e)},
            )
            raise GeometryDecodeError(
                "Malformed encoded path", encoded=encoded, cause=e
            )

        if len(points) < 2:
            self._logger.debug("Degenerate path", extra={"points": len(points)})

        return tuple((lng, lat) for lat, lng in points)
