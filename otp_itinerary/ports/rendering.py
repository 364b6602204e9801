"""Rendering port - Abstraction for drawing itineraries on a map."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.itinerary import Itinerary


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        itinerary: Itinerary,
        output_path: Path,
        active: bool = True,
    ) -> Path:
        """Draw an itinerary's legs and save the map to file.

        Args:
            itinerary: The itinerary to draw.
            output_path: Where to save the rendered map.
            active: Whether to use the highlighted leg styles.

        Returns:
            Path to the generated map file.
        """
        ...
