"""Message-catalog localizer.

Messages are nested dictionaries addressed with dotted keys
(``times_shortform.$n_minutes``). Placeholders use ``{name}`` syntax.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ...domain.errors import ConfigurationError

EN_US: Mapping[str, Any] = {
    "transit_area_not_supported_for_source": (
        "Sorry, trips starting here are outside of our current transit coverage area."
    ),
    "transit_area_not_supported_for_destination": (
        "Sorry, this destination is outside of our current transit coverage area."
    ),
    "transit_trip_error_unknown": "Sorry, unable to find transit directions for this trip.",
    "transit_routing_not_enabled": (
        "Transit directions are disabled or incorrectly configured. "
        "Please contact the server administrator"
    ),
    "via$transit_route": "via route {transitRoute}",
    "times": {
        "$n_seconds": "{n} seconds",
        "$n_minute": "{n} minute",
        "$n_minutes": "{n} minutes",
        "$n_day": "{n} day",
        "$n_days": "{n} days",
        "$n_hour": "{n} hour",
        "$n_hours": "{n} hours",
    },
    "times_shortform": {
        "$n_seconds": "{n} sec",
        "$n_minute": "{n} min",
        "$n_minutes": "{n} min",
        "$n_day": "{n} day",
        "$n_days": "{n} day",
        "$n_hour": "{n} hr",
        "$n_hours": "{n} hr",
    },
    "time_range$startTime$endTime": "{startTime} - {endTime}",
    "shortened_distances": {
        "kilometers": "km",
        "miles": "mi",
    },
    "walk_distance": "{preformattedDistance} walk",
    "bike_distance": "{preformattedDistance} bike",
}

CATALOGS: Mapping[str, Mapping[str, Any]] = {"en-US": EN_US}


@dataclass
class CatalogLocalizer:
    """LocalizerPort over a bundled message catalog.

    Unknown keys are logged and rendered as the key itself, so a missing
    translation shows up on screen instead of breaking the caller.

    Attributes:
        locale: Catalog to use, e.g. "en-US"
    """

    locale: str = "en-US"

    _messages: Mapping[str, Any] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        try:
            self._messages = CATALOGS[self.locale]
        except KeyError as e:
            raise ConfigurationError(
                f"No message catalog for locale {self.locale!r}",
                setting_name="OTPI_DISPLAY_LOCALE",
                expected_type=" | ".join(CATALOGS),
                cause=e,
            )

    def translate(self, key: str, **params: Any) -> str:
        node: Any = self._messages
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                self._logger.warning(
                    "Missing translation",
                    extra={"key": key, "locale": self.locale},
                )
                return key
            node = node[part]

        if not isinstance(node, str):
            self._logger.warning("Translation key is not a message", extra={"key": key})
            return key
        return node.format(**params)
