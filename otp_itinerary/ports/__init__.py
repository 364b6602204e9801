"""Ports layer - Abstract interfaces (Protocols) for the itinerary core.

Ports define the contracts between the itinerary core and the
collaborators it does not implement itself: the HTTP transport to OTP,
the geometry decoder, localization, caching and map rendering.
"""

from .cache import CachePort
from .geometry import GeometryDecoderPort
from .localization import LocalizerPort
from .otp import OTPTransportPort
from .rendering import MapRendererPort

__all__ = [
    # Upstream
    "OTPTransportPort",
    # Geometry
    "GeometryDecoderPort",
    # Localization
    "LocalizerPort",
    # Rendering
    "MapRendererPort",
    # Cache
    "CachePort",
]
