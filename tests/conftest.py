"""
Shared test fixtures.

``StubProvider`` stands in for a routing service: it answers from a table
keyed by waypoint tuples and records every query so tests can assert on
how many round trips were made.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from detour_distance.calculator import DistanceCalculator
from detour_distance.schemas import Coordinate
from detour_distance.services.routing import RouteDistance, RouteNotFound, RouteResult


def coord(lat: float, lon: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon)


class StubProvider:
    """RouteDistanceProvider that answers from a lookup table."""

    def __init__(
        self,
        routes: dict[tuple[Coordinate, ...], RouteResult] | None = None,
        default: RouteResult | None = None,
    ) -> None:
        self.routes = dict(routes or {})
        self.default = default if default is not None else RouteNotFound()
        self.calls: list[tuple[Coordinate, ...]] = []

    def add(self, *waypoints: Coordinate, miles: float) -> None:
        self.routes[waypoints] = RouteDistance(miles=miles)

    def query_route(self, waypoints: Sequence[Coordinate]) -> RouteResult:
        key = tuple(waypoints)
        self.calls.append(key)
        return self.routes.get(key, self.default)


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def calculator(provider: StubProvider) -> DistanceCalculator:
    return DistanceCalculator(provider)
