"""
Exception hierarchy for detour distance.

"No route" is not an error: the calculator returns ``UNREACHABLE`` for it.
Everything here means the answer could not be determined at all.
"""

from __future__ import annotations


class DetourDistanceError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(DetourDistanceError):
    """Settings are missing or unusable (e.g. no routing API key)."""


class DistanceError(DetourDistanceError):
    """
    The calculator could neither return a distance nor determine that there
    is no path between the given points.
    """


class RoutingServerError(DistanceError):
    """The routing server reported a failure or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(DistanceError):
    """The routing server's response could not be parsed."""


class IncompleteResponseError(DistanceError):
    """The routing server's response lacked the travel distance."""
