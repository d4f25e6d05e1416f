"""Detour: an optional pick-up/drop-off leg inserted into a trip."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from detour_distance.schemas import Coordinate


@dataclass(frozen=True)
class Detour:
    """Start and terminus of an intermediate leg. Either may be absent."""

    start: Coordinate | None = None
    terminus: Coordinate | None = None

    def valid(self) -> bool:
        """Both endpoints present, or both absent."""
        return (self.start is None) == (self.terminus is None)

    def invalid(self) -> bool:
        return not self.valid()

    def no_distance(self) -> bool:
        """True if traversing this detour adds no travel of its own."""
        return self.start is None or self.terminus is None or self.start == self.terminus

    def is_empty(self) -> bool:
        """Neither endpoint is set, so there are no via-points to route through."""
        return self.start is None and self.terminus is None
