"""Unit tests for home/away perspective transforms."""

from __future__ import annotations

import pytest

from courtgrid.geometry import (
    Court,
    Point,
    TeamPlace,
    from_home_perspective,
    mirror_coords_to_away,
    to_home_perspective,
)


@pytest.fixture
def court() -> Court:
    return Court(width=40000, height=20000)


class TestMirrorCoordsToAway:
    """Tests for mirror_coords_to_away."""

    def test_mirror_basic(self, court: Court) -> None:
        assert mirror_coords_to_away(Point(x=1000, y=2000), court) == Point(
            x=39000, y=18000
        )

    def test_mirror_origin_is_far_corner(self, court: Court) -> None:
        assert mirror_coords_to_away(Point(x=0, y=0), court) == Point(
            x=40000, y=20000
        )

    def test_mirror_center_is_fixed(self, court: Court) -> None:
        center = Point(x=20000, y=10000)
        assert mirror_coords_to_away(center, court) == center

    @pytest.mark.parametrize(
        "coord", [(0, 0), (1, 1), (39999, 19999), (12345, 678), (-50, 20500)]
    )
    def test_mirror_is_involution(self, court: Court, coord: tuple[int, int]) -> None:
        point = Point.from_tuple(coord)
        assert mirror_coords_to_away(mirror_coords_to_away(point, court), court) == point

    def test_mirror_uses_given_court(self) -> None:
        court = Court(width=80, height=20)
        assert mirror_coords_to_away(Point(x=10, y=5), court) == Point(x=70, y=15)


class TestPerspective:
    """Tests for to_home_perspective and from_home_perspective."""

    def test_home_is_identity(self, court: Court) -> None:
        point = Point(x=123, y=456)
        assert to_home_perspective(point, TeamPlace.HOME, court) == point
        assert from_home_perspective(point, TeamPlace.HOME, court) == point

    def test_away_mirrors(self, court: Court) -> None:
        point = Point(x=123, y=456)
        expected = mirror_coords_to_away(point, court)
        assert to_home_perspective(point, TeamPlace.AWAY, court) == expected
        assert from_home_perspective(point, TeamPlace.AWAY, court) == expected

    @pytest.mark.parametrize("place", list(TeamPlace))
    def test_round_trip(self, court: Court, place: TeamPlace) -> None:
        point = Point(x=31000, y=4200)
        home = to_home_perspective(point, place, court)
        assert from_home_perspective(home, place, court) == point
