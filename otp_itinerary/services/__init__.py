"""Services layer - Application orchestration.

Available services:
- ItineraryService: Fetches and classifies candidate transit itineraries
"""

from .itinerary_service import ItineraryService

__all__ = ["ItineraryService"]
