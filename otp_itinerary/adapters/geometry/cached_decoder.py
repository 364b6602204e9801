"""Decoder wrapper that caches decoded geometry outside the model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ...ports.cache import CachePort
from ...ports.geometry import GeometryDecoderPort


@dataclass
class CachingGeometryDecoder:
    """GeometryDecoderPort that memoizes another decoder by encoded path.

    Decoding is deterministic, so an encoded path always maps to the same
    coordinates and entries never need invalidating.
    """

    decoder: GeometryDecoderPort
    cache: CachePort[Tuple[Tuple[float, float], ...]]

    def decode(self, encoded: str) -> Sequence[Tuple[float, float]]:
        return self.cache.get_or_compute(
            encoded, lambda: tuple(self.decoder.decode(encoded))
        )
