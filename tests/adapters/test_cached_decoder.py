"""Tests for caching decoded geometry outside the model."""

from unittest.mock import MagicMock

from otp_itinerary.adapters.cache import InMemoryCache, NullCache
from otp_itinerary.adapters.geometry import CachingGeometryDecoder

COORDS = [(-122.68, 45.52), (-122.64, 45.53)]


def test_repeated_decodes_hit_the_cache():
    inner = MagicMock()
    inner.decode.return_value = COORDS
    decoder = CachingGeometryDecoder(decoder=inner, cache=InMemoryCache(name="test"))

    first = decoder.decode("abc")
    second = decoder.decode("abc")

    assert first == second == tuple(COORDS)
    inner.decode.assert_called_once_with("abc")


def test_distinct_paths_are_cached_separately():
    inner = MagicMock()
    inner.decode.side_effect = lambda encoded: [(0.0, float(len(encoded)))] * 2
    decoder = CachingGeometryDecoder(decoder=inner, cache=InMemoryCache(name="test"))

    assert decoder.decode("a") != decoder.decode("abcd")
    assert inner.decode.call_count == 2


def test_null_cache_always_decodes():
    inner = MagicMock()
    inner.decode.return_value = COORDS
    decoder = CachingGeometryDecoder(decoder=inner, cache=NullCache())

    decoder.decode("abc")
    decoder.decode("abc")

    assert inner.decode.call_count == 2
