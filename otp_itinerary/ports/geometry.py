"""Geometry decoder port - Encoded path string to coordinates.

Implementations:
- adapters/geometry/polyline_adapter.py (PolylineGeometryDecoder)
- adapters/geometry/cached_decoder.py (CachingGeometryDecoder)
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple


class GeometryDecoderPort(Protocol):
    """Port for decoding compact leg geometry.

    Decoding must be pure: the same input always yields the same
    coordinates and nothing is mutated.
    """

    def decode(self, encoded: str) -> Sequence[Tuple[float, float]]:
        """Decode an encoded path.

        Args:
            encoded: The encoded path string from ``legGeometry.points``.

        Returns:
            Ordered ``(longitude, latitude)`` pairs.
        """
        ...
