"""Interactive launcher for the itinerary core.

Asks for an origin and destination as "lat,lon", fetches the best
transit itineraries from the configured OTP server, prints a summary of
each and renders the first one to an HTML map.
"""

from __future__ import annotations

import sys
from pathlib import Path

from otp_itinerary.container import get_container
from otp_itinerary.domain import DistanceUnits, LngLat
from otp_itinerary.observability import configure_logging
from otp_itinerary.ports import LocalizerPort, MapRendererPort
from otp_itinerary.services import ItineraryService


def _ask_lnglat(prompt: str) -> LngLat:
    raw = input(prompt).strip()
    try:
        lat_text, lon_text = raw.split(",")
        return LngLat(lng=float(lon_text), lat=float(lat_text))
    except ValueError:
        print(f"Invalid coordinates: {raw!r} (expected lat,lon)")
        sys.exit(1)


def main() -> None:
    configure_logging()
    container = get_container()
    config = container.config

    print("=== OTP itinerary launcher ===")
    origin = _ask_lnglat("From (lat,lon): ")
    destination = _ask_lnglat("To (lat,lon): ")
    with_bicycle = input("Allow bicycle? (y/N): ").strip().lower() in {"y", "yes"}

    service: ItineraryService = container.resolve(ItineraryService)
    localizer: LocalizerPort = container.resolve(LocalizerPort)

    result = service.fetch_best(
        origin,
        destination,
        DistanceUnits(config.display.distance_units),
        with_bicycle=with_bicycle,
    )
    if not result.is_success:
        assert result.error is not None
        print(result.error.localized_message(localizer))
        if result.error.message:
            print(f"  ({result.error.message})")
        sys.exit(2)

    if not result.itineraries:
        print("No itineraries found.")
        return

    for i, itinerary in enumerate(result.itineraries, start=1):
        print(f"\n{i}) {itinerary.start_stop_times_formatted()} ({itinerary.duration_formatted})")
        print(f"   {itinerary.via_route_formatted}")
        print(f"   {itinerary.formatted_foot_distance()}")
        transit = itinerary.first_transit_leg
        if transit is not None:
            route = transit.route_short_name or transit.route
            print(f"   {localizer.translate('via$transit_route', transitRoute=route)}")
            print(f"   from {transit.source_name}")
        for alert in itinerary.alerts:
            print(f"   ⚠️ {alert.header_text}")

    renderer: MapRendererPort = container.resolve(MapRendererPort)
    output_path = Path(config.output_dir) / "itinerary.html"
    renderer.render(result.itineraries[0], output_path)
    print(f"\nMap saved to: {output_path}")


if __name__ == "__main__":
    main()
