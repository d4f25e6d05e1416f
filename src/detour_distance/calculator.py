"""
Driving distances with optional detours, and the rideshare detour problem.

Distances are in miles. ``UNREACHABLE`` (positive infinity) means no path
exists; it is a normal result, not an error, so it flows through ``min`` and
subtraction the way "infinitely far" should.

Rideshare detour
----------------
Driver one travels from A to B, driver two from C to D. If driver one picks
up and drops off driver two on the way, the extra distance is ACDB - AB.
The other way round it is CABD - CD. The minimum detour distance is the
smaller of the two.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from detour_distance.detour import Detour
from detour_distance.errors import (
    IncompleteResponseError,
    InvalidResponseError,
    RoutingServerError,
)
from detour_distance.services.routing import (
    RouteDistance,
    RouteMalformed,
    RouteNotFound,
    RouteServerError,
)

if TYPE_CHECKING:
    from detour_distance.schemas import Coordinate
    from detour_distance.services.routing import RouteDistanceProvider

logger = logging.getLogger(__name__)

UNREACHABLE = math.inf


def is_unreachable(miles: float) -> bool:
    return miles == UNREACHABLE


def detour_extra(detoured: float, direct: float) -> float:
    """
    Extra distance of a detoured route over the direct one.

    Unreachable if either leg is, which also keeps ``inf - inf`` from
    turning into NaN.
    """
    if is_unreachable(detoured) or is_unreachable(direct):
        return UNREACHABLE
    return detoured - direct


@dataclass(frozen=True)
class DetourBreakdown:
    """Both ways of sharing a ride, and which is cheaper."""

    ab_detour: float  # extra miles for A->B driver to cover C->D
    cd_detour: float  # extra miles for C->D driver to cover A->B

    @property
    def minimum(self) -> float:
        return min(self.ab_detour, self.cd_detour)

    @property
    def best_driver(self) -> str | None:
        """``"ab"`` or ``"cd"``, whichever detours less. None if neither can."""
        if is_unreachable(self.minimum):
            return None
        return "ab" if self.ab_detour <= self.cd_detour else "cd"

    @classmethod
    def unreachable(cls) -> DetourBreakdown:
        return cls(ab_detour=UNREACHABLE, cd_detour=UNREACHABLE)


class DistanceCalculator:
    """Computes distances between Coordinates through a route provider."""

    def __init__(self, provider: RouteDistanceProvider) -> None:
        self.provider = provider

    def distance(
        self,
        start: Coordinate | None,
        terminus: Coordinate | None,
        detour: Detour | None = None,
    ) -> float:
        """
        Distance from start to terminus, passing through an optional detour.

        Returns:
            Miles, or ``UNREACHABLE`` if there is no path between the points.
            Missing endpoints and invalid detours are also ``UNREACHABLE``.

        Raises:
            DistanceError: If the routing server fails or its response is
                unusable, so neither a distance nor "no path" can be given.
        """
        if start is None or terminus is None or (detour is not None and detour.invalid()):
            logger.debug("Unroutable query: %s -> %s via %s", start, terminus, detour)
            return UNREACHABLE

        if start == terminus and (
            detour is None or (start == detour.start and detour.no_distance())
        ):
            return 0.0

        waypoints: list[Coordinate] = [start]
        if detour is not None and not detour.is_empty():
            # Both set: empty and invalid detours were handled above.
            waypoints += [detour.start, detour.terminus]  # type: ignore[list-item]
        waypoints.append(terminus)

        logger.debug("Querying route through %d waypoints: %s", len(waypoints), waypoints)
        result = self.provider.query_route(waypoints)

        if isinstance(result, RouteDistance):
            return result.miles
        if isinstance(result, RouteNotFound):
            logger.debug("No route through %s", waypoints)
            return UNREACHABLE
        if isinstance(result, RouteServerError):
            raise RoutingServerError(result.message, status_code=result.status_code)
        if isinstance(result, RouteMalformed):
            if result.incomplete:
                raise IncompleteResponseError(result.reason)
            raise InvalidResponseError(result.reason)
        raise TypeError(f"Unexpected route result: {result!r}")

    def detour_distances(
        self,
        a: Coordinate | None,
        b: Coordinate | None,
        c: Coordinate | None,
        d: Coordinate | None,
    ) -> DetourBreakdown:
        """
        Extra distance for each driver to pick up and drop off the other.

        Driver one goes from ``a`` to ``b``, driver two from ``c`` to ``d``.
        """
        if a is None or b is None or c is None or d is None:
            return DetourBreakdown.unreachable()

        acdb = self.distance(a, b, Detour(c, d))
        if is_unreachable(acdb):
            # Some point is on an undrivable island, so CABD would be
            # unreachable too. Skip the remaining queries.
            logger.debug("ACDB unreachable, skipping CABD")
            return DetourBreakdown.unreachable()

        # Not a bare subtraction: an unreachable direct leg gives UNREACHABLE, not -inf.
        ab_detour = detour_extra(acdb, self.distance(a, b))

        cabd = self.distance(c, d, Detour(a, b))
        cd_detour = detour_extra(cabd, self.distance(c, d))

        return DetourBreakdown(ab_detour=ab_detour, cd_detour=cd_detour)

    def minimum_detour_distance(
        self,
        a: Coordinate | None,
        b: Coordinate | None,
        c: Coordinate | None,
        d: Coordinate | None,
    ) -> float:
        """
        The shorter of the two drivers' detour distances.

        ``UNREACHABLE`` if any point is missing or neither detour is drivable.
        """
        return self.detour_distances(a, b, c, d).minimum
