"""Trip capability shared by every kind of trip candidate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import LngLatBounds, TripMode


@runtime_checkable
class Trip(Protocol):
    """What a route picker needs from any candidate trip.

    Implemented structurally: transit itineraries satisfy it without
    inheriting from it.
    """

    @property
    def duration(self) -> float:
        """Total travel time in seconds."""
        ...

    @property
    def duration_formatted(self) -> str:
        ...

    @property
    def bounds(self) -> LngLatBounds:
        ...

    @property
    def mode(self) -> TripMode:
        ...

    @property
    def length_formatted(self) -> Optional[str]:
        ...

    def start_stop_times_formatted(self) -> str:
        ...
