"""Geometry adapters - Implementations of GeometryDecoderPort.

Available implementations:
- PolylineGeometryDecoder: Google encoded polyline via the polyline package
- CachingGeometryDecoder: Wraps another decoder with a CachePort
"""

from .cached_decoder import CachingGeometryDecoder
from .polyline_adapter import PolylineGeometryDecoder

__all__ = ["PolylineGeometryDecoder", "CachingGeometryDecoder"]
