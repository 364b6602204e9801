"""Adapters layer - Concrete implementations of ports.

This package connects the itinerary core to external systems:
- OTP over HTTP (requests)
- Geometry decoding (polyline)
- Caching (in-memory, null)
- Localization (message catalog)
- Map rendering (Folium)
"""
