"""Tests for Detour validity and degeneracy rules."""

from __future__ import annotations

import pytest

from detour_distance.detour import Detour

from .conftest import coord

P = coord(40.0, -75.0)
Q = coord(41.0, -74.0)


class TestValidity:
    """valid() / invalid()."""

    def test_both_absent_is_valid(self) -> None:
        """No endpoints at all is a valid, empty detour."""
        assert Detour(None, None).valid()
        assert not Detour(None, None).invalid()

    def test_both_present_is_valid(self) -> None:
        """Both endpoints set is valid."""
        assert Detour(P, Q).valid()

    def test_missing_start_is_invalid(self) -> None:
        """Only a terminus is invalid."""
        assert Detour(None, Q).invalid()

    def test_missing_terminus_is_invalid(self) -> None:
        """Only a start is invalid."""
        assert Detour(P, None).invalid()

    def test_default_is_empty_and_valid(self) -> None:
        """The default detour is empty and valid."""
        detour = Detour()
        assert detour.valid()
        assert detour.is_empty()


class TestNoDistance:
    """no_distance()."""

    def test_same_endpoints(self) -> None:
        """Starting and ending at one point adds no distance."""
        assert Detour(P, P).no_distance()

    def test_structurally_equal_endpoints(self) -> None:
        """Equal coordinates count as the same point."""
        assert Detour(coord(1.5, 2.5), coord(1.5, 2.5)).no_distance()

    @pytest.mark.parametrize(
        ("start", "terminus"),
        [(None, None), (P, None), (None, Q)],
    )
    def test_absent_endpoint(self, start, terminus) -> None:
        """A missing endpoint adds no distance."""
        assert Detour(start, terminus).no_distance()

    def test_distinct_endpoints(self) -> None:
        """Distinct endpoints add distance."""
        assert not Detour(P, Q).no_distance()


class TestImmutability:
    def test_frozen(self) -> None:
        """Endpoints cannot be reassigned."""
        detour = Detour(P, Q)
        with pytest.raises(AttributeError):
            detour.start = Q  # type: ignore[misc]
