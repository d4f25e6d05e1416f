"""Bing Maps routing data source.

Driving distances from the Bing Maps REST Routes API (API key required).

Public API:
  - routes: BingRouteProvider (RouteDistanceProvider over HTTP)
  - client: API URL, query parameter building
"""

from detour_distance.datasources.bing.client import BING_ROUTES_API, build_params
from detour_distance.datasources.bing.routes import BingRouteProvider

__all__ = [
    "BING_ROUTES_API",
    "BingRouteProvider",
    "build_params",
]
