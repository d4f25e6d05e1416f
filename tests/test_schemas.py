"""Tests for the Coordinate model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from detour_distance.detour import Detour
from detour_distance.schemas import Coordinate


class TestCoordinate:
    def test_structural_equality(self) -> None:
        """Points with the same fields are equal."""
        assert Coordinate(latitude=1.0, longitude=2.0) == Coordinate(latitude=1.0, longitude=2.0)
        assert Coordinate(latitude=1.0, longitude=2.0) != Coordinate(latitude=2.0, longitude=1.0)

    def test_hashable(self) -> None:
        """Equal points collapse in a set."""
        points = {Coordinate(latitude=1.0, longitude=2.0), Coordinate(latitude=1.0, longitude=2.0)}
        assert len(points) == 1

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        point = Coordinate(latitude=1.0, longitude=2.0)
        with pytest.raises(ValidationError):
            point.latitude = 3.0  # type: ignore[misc]

    def test_rejects_out_of_range_latitude(self) -> None:
        """Latitude beyond 90 degrees is rejected."""
        with pytest.raises(ValidationError):
            Coordinate(latitude=91.0, longitude=0.0)

    def test_rejects_out_of_range_longitude(self) -> None:
        """Longitude beyond 180 degrees is rejected."""
        with pytest.raises(ValidationError):
            Coordinate(latitude=0.0, longitude=-180.5)


class TestWaypointFormat:
    """``"lat,lon"`` serialization used by routing providers."""

    def test_to_waypoint(self) -> None:
        """Serialized as lat,lon."""
        assert Coordinate(latitude=47.6, longitude=-122.33).to_waypoint() == "47.6,-122.33"

    def test_str_is_waypoint(self) -> None:
        """str() gives the waypoint form."""
        assert str(Coordinate(latitude=0.5, longitude=1.0)) == "0.5,1.0"

    def test_from_waypoint_allows_spaces(self) -> None:
        """Whitespace around the numbers is ignored."""
        assert Coordinate.from_waypoint(" 10.25 , -20.5 ") == Coordinate(latitude=10.25, longitude=-20.5)

    @pytest.mark.parametrize(
        "point",
        [
            Coordinate(latitude=0.1 + 0.2, longitude=-122.419415),
            Coordinate(latitude=-33.868820, longitude=151.209296),
            Coordinate(latitude=1e-7, longitude=179.99999999999),
            Coordinate(latitude=-5e-7, longitude=1e-5),
        ],
    )
    def test_round_trip_preserves_equality(self, point: Coordinate) -> None:
        """Parsing a serialized point gives back an equal point."""
        parsed = Coordinate.from_waypoint(point.to_waypoint())
        assert parsed == point
        assert Detour(point, parsed).no_distance()

    @pytest.mark.parametrize("text", ["", "1.0", "1,2,3", "north,east"])
    def test_from_waypoint_rejects_garbage(self, text: str) -> None:
        """Anything but two numbers is a ValueError."""
        with pytest.raises(ValueError):
            Coordinate.from_waypoint(text)

    def test_small_values_use_decimal_degrees(self) -> None:
        """Tiny latitudes and longitudes are written out, not in exponent form."""
        point = Coordinate(latitude=1e-7, longitude=-5e-7)
        waypoint = point.to_waypoint()
        assert waypoint == "0.0000001,-0.0000005"
        assert "e" not in waypoint.lower()
        assert Coordinate.from_waypoint(waypoint) == point
