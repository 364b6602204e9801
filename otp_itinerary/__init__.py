"""Itinerary core for OpenTripPlanner responses.

Turns raw OTP plan responses into immutable, display-ready itinerary
models: classified errors, decoded leg geometry, per-leg icons and line
styles, and trip-wide alerts and bounds.
"""
