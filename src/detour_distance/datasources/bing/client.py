"""Bing Maps REST Routes API constants and query building.

API docs:
  - Routes: https://learn.microsoft.com/en-us/bingmaps/rest-services/routes/calculate-a-route
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from detour_distance.schemas import Coordinate

BING_ROUTES_API = "http://dev.virtualearth.net/REST/v1/Routes/"

# Fixed parameters sent with every route request
ROUTE_PARAMS = {
    "optmz": "distance",  # optimize for distance
    "du": "mi",  # distance unit: miles
}

NOT_FOUND = 404


def waypoint_params(waypoints: Sequence[Coordinate]) -> dict[str, str]:
    """
    Number waypoints from 1: endpoints are ``wp.N``, everything between them
    is a via-point ``vwp.N`` so the route passes through without stopping.
    """
    last = len(waypoints)
    params = {}
    for n, point in enumerate(waypoints, start=1):
        prefix = "wp" if n in (1, last) else "vwp"
        params[f"{prefix}.{n}"] = point.to_waypoint()
    return params


def build_params(api_key: str, waypoints: Sequence[Coordinate]) -> dict[str, str]:
    return {"key": api_key, **ROUTE_PARAMS, **waypoint_params(waypoints)}
