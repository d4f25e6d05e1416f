"""Route distances from the Bing Maps REST Routes API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from detour_distance.config import get_settings
from detour_distance.datasources.bing.client import BING_ROUTES_API, NOT_FOUND, build_params
from detour_distance.errors import ConfigurationError
from detour_distance.services.http import create_session
from detour_distance.services.routing import (
    RouteDistance,
    RouteMalformed,
    RouteNotFound,
    RouteResult,
    RouteServerError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from detour_distance.config import Settings
    from detour_distance.schemas import Coordinate

logger = logging.getLogger(__name__)

INVALID_RESPONSE = "Invalid response received from routing server."
INCOMPLETE_RESPONSE = "Incomplete response received from routing server."

DEFAULT_TIMEOUT = 30.0  # seconds


def parse_travel_distance(data: Any) -> float | None:
    """Pull ``resourceSets[0].resources[0].travelDistance`` out of a response."""
    try:
        distance = data["resourceSets"][0]["resources"][0]["travelDistance"]
    except (KeyError, IndexError, TypeError):
        return None
    if isinstance(distance, bool) or not isinstance(distance, (int, float)) or distance < 0:
        return None
    return float(distance)


class BingRouteProvider:
    """
    RouteDistanceProvider backed by Bing Maps.

    Args:
        api_key: Bing Maps key.
        url: Routes endpoint (override for testing or a proxy).
        session: HTTP session; defaults to a new retrying session.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str,
        url: str = BING_ROUTES_API,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not api_key:
            raise ConfigurationError("A Bing Maps API key is required.")
        self._api_key = api_key
        self.url = url
        self.session = session or create_session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BingRouteProvider:
        """Build a provider from application settings."""
        settings = settings or get_settings()
        if settings.bing_maps_api_key is None:
            raise ConfigurationError(
                "No Bing Maps API key configured. Set DETOUR_BING_MAPS_API_KEY "
                f"or put the key in {settings.bing_maps_key_file}."
            )
        return cls(
            api_key=settings.bing_maps_api_key.get_secret_value(),
            url=settings.routing_url,
            timeout=settings.http_timeout,
        )

    def query_route(self, waypoints: Sequence[Coordinate]) -> RouteResult:
        """
        Ask Bing for the driving distance through ``waypoints`` in order.

        Raises:
            ValueError: If fewer than two waypoints are given.
        """
        if len(waypoints) < 2:
            raise ValueError("At least two waypoints are required to compute a route.")

        params = build_params(self._api_key, waypoints)
        logger.debug("GET %s through %s", self.url, [p.to_waypoint() for p in waypoints])
        try:
            resp = self.session.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Routing request failed: %s", e)
            return RouteServerError(status_code=None, message=f"Routing server unreachable: {e}")

        if resp.status_code == NOT_FOUND:
            # Bing answers 404 when a location cannot be routed to.
            return RouteNotFound()
        if not resp.ok:
            logger.warning("Routing server returned %d", resp.status_code)
            return RouteServerError(
                status_code=resp.status_code,
                message=f"{resp.status_code} returned from routing server.",
            )

        try:
            data = resp.json()
        except ValueError:
            return RouteMalformed(reason=INVALID_RESPONSE)

        distance = parse_travel_distance(data)
        if distance is None:
            return RouteMalformed(reason=INCOMPLETE_RESPONSE, incomplete=True)
        return RouteDistance(miles=distance)
