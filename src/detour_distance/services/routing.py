"""
Route distance provider interface.

A provider takes an ordered sequence of waypoints and reports how far it is
to drive through them, or why it could not say. Providers never raise for
expected outcomes: "no route" and server faults both come back as values and
the calculator decides what to do with them.

Example:
    from detour_distance.services.routing import RouteDistance

    result = provider.query_route([start, pickup, dropoff, terminus])
    if isinstance(result, RouteDistance):
        print(result.miles)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from collections.abc import Sequence

    from detour_distance.schemas import Coordinate


@dataclass(frozen=True)
class RouteDistance:
    """A route was found."""

    miles: float


@dataclass(frozen=True)
class RouteNotFound:
    """No drivable path connects the waypoints."""


@dataclass(frozen=True)
class RouteServerError:
    """The routing server failed, or could not be reached (no status code)."""

    status_code: int | None
    message: str


@dataclass(frozen=True)
class RouteMalformed:
    """
    The routing server answered but the answer is unusable.

    ``incomplete`` distinguishes a parseable response missing the distance
    from one that could not be parsed at all.
    """

    reason: str
    incomplete: bool = False


RouteResult = Union[RouteDistance, RouteNotFound, RouteServerError, RouteMalformed]


class RouteDistanceProvider(Protocol):
    """Anything that can measure a driving route through ordered waypoints."""

    def query_route(self, waypoints: Sequence[Coordinate]) -> RouteResult: ...
