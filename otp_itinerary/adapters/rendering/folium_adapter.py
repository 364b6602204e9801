"""Folium map renderer for itineraries.

Each leg's decoded geometry becomes one polyline drawn with the leg's
paint style; the map is fitted to the itinerary bounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import folium

from ...domain.errors import GeometryDecodeError, RenderingError
from ...domain.itinerary import Itinerary


@dataclass
class FoliumMapRenderer:
    """MapRendererPort implementation producing standalone HTML maps.

    Attributes:
        tiles: Folium tile layer name
    """

    tiles: str = "OpenStreetMap"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_map(self, itinerary: Itinerary, active: bool = True) -> folium.Map:
        """Build the folium map without saving it."""
        bounds = itinerary.bounds
        if bounds.is_empty or bounds.center is None:
            raise RenderingError("Itinerary has no geometry to render", renderer_type="folium")

        center = bounds.center
        fmap = folium.Map(location=[center.lat, center.lng], tiles=self.tiles)

        for leg in itinerary.legs:
            coordinates = leg.geometry().coordinates
            if len(coordinates) < 2:
                continue
            style = leg.paint_style(active)
            folium.PolyLine(
                [[lat, lng] for lng, lat in coordinates],
                color=style.color,
                weight=style.width,
                opacity=style.opacity,
                dash_array=",".join(str(d * style.width) for d in style.dash_array)
                if style.dash_array
                else None,
                tooltip=leg.short_name or None,
            ).add_to(fmap)

        first, last = itinerary.legs[0], itinerary.legs[-1]
        folium.Marker(
            location=[first.source_lnglat.lat, first.source_lnglat.lng],
            popup=first.source_name,
            icon=folium.Icon(color="green"),
        ).add_to(fmap)
        folium.Marker(
            location=[last.destination_lnglat.lat, last.destination_lnglat.lng],
            popup=last.destination_name,
            icon=folium.Icon(color="red"),
        ).add_to(fmap)

        fmap.fit_bounds([[bounds.south, bounds.west], [bounds.north, bounds.east]])
        return fmap

    def render(self, itinerary: Itinerary, output_path: Path, active: bool = True) -> Path:
        """Render an itinerary and save it as HTML.

        Raises:
            RenderingError: If the itinerary cannot be drawn or saved.
        """
        self._logger.info(
            "Rendering itinerary map",
            extra={"legs": len(itinerary.legs), "output_path": str(output_path)},
        )

        try:
            fmap = self.build_map(itinerary, active)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fmap.save(str(output_path))
        except RenderingError:
            raise
        except (GeometryDecodeError, OSError) as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info("Map rendered", extra={"output_path": str(output_path)})
        return output_path
