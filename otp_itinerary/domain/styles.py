"""Line paint styles for drawing itinerary legs on a map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True, slots=True)
class LineStyle:
    """Paint properties for one drawn leg."""

    color: str
    width: float
    opacity: float = 1.0
    dash_array: Optional[Tuple[float, ...]] = None

    def to_paint(self) -> dict[str, Any]:
        """Render as a MapLibre ``line`` layer paint dictionary."""
        paint: dict[str, Any] = {
            "line-color": self.color,
            "line-width": self.width,
            "line-opacity": self.opacity,
        }
        if self.dash_array is not None:
            paint["line-dasharray"] = list(self.dash_array)
        return paint


class LineStyles:
    """The fixed style variants legs choose between."""

    ACTIVE = LineStyle(color="#1976D2", width=6)
    INACTIVE = LineStyle(color="#777777", width=4, opacity=0.6)
    WALKING_ACTIVE = LineStyle(color="#1976D2", width=4, dash_array=(1.0, 1.5))
    WALKING_INACTIVE = LineStyle(color="#777777", width=4, opacity=0.6, dash_array=(1.0, 1.5))

    @staticmethod
    def active_colored(color: str) -> LineStyle:
        """Active style tinted with a route's own color."""
        return LineStyle(color=color, width=LineStyles.ACTIVE.width)
