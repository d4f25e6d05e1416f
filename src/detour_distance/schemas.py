"""
Domain models for detour distance.

Pydantic models shared by the calculator and the routing providers.
Providers serialize these to their own waypoint format.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    """Immutable latitude/longitude pair with structural equality."""

    model_config = {"frozen": True}

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_waypoint(self) -> str:
        """Serialize as ``"lat,lon"`` in plain decimal degrees, never exponent notation."""
        return f"{_decimal_degrees(self.latitude)},{_decimal_degrees(self.longitude)}"

    @classmethod
    def from_waypoint(cls, text: str) -> Coordinate:
        """
        Parse a ``"lat,lon"`` string.

        Raises:
            ValueError: If the text is not two comma-separated numbers in range.
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lon', got {text!r}")
        lat, lon = (float(p) for p in parts)
        return cls(latitude=lat, longitude=lon)

    def __str__(self) -> str:
        return self.to_waypoint()


def _decimal_degrees(value: float) -> str:
    # repr is the shortest string that parses back to the same float
    return f"{Decimal(repr(value)):f}"
