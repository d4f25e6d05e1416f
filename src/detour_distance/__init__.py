"""Detour Distance - driving distances with pick-up/drop-off detours.

Architecture::

    schemas.py     Coordinate (lat/lon value object, waypoint serialization)
    detour.py      Detour leg and its validity rules
    calculator.py  DistanceCalculator: distance() and minimum_detour_distance()
    services/      Provider protocol + route results, HTTP client with retry
    datasources/   Concrete routing providers (Bing Maps)
    config.py      Settings from environment / .env / key file

Data flow: cli → DistanceCalculator → RouteDistanceProvider → routing API

Extension point — new routing provider: datasources/__init__.py
"""

__version__ = "0.1.0"

from detour_distance.calculator import UNREACHABLE, DetourBreakdown, DistanceCalculator
from detour_distance.detour import Detour
from detour_distance.errors import DetourDistanceError, DistanceError
from detour_distance.schemas import Coordinate

__all__ = [
    "UNREACHABLE",
    "Coordinate",
    "Detour",
    "DetourBreakdown",
    "DetourDistanceError",
    "DistanceCalculator",
    "DistanceError",
    "__version__",
]
