"""Perspective transforms for courtgrid.

Region codes are always expressed from the home team's point of view. The
away team sees the same field rotated by 180 degrees, so its points are
mirrored through the court center before grid lookup and mirrored back when
a region is turned into a physical point.

Transform Direction Conventions:
    - to_home_perspective: physical point of ``place`` -> home frame
    - from_home_perspective: home frame -> physical point of ``place``

Both directions are the same involution, ``mirror_coords_to_away``.
"""

from __future__ import annotations

from courtgrid.config import settings
from courtgrid.geometry.primitives import Court, Point, TeamPlace

__all__ = [
    "default_court",
    "from_home_perspective",
    "mirror_coords_to_away",
    "to_home_perspective",
]


def default_court() -> Court:
    """Return the court configured for this process."""
    return Court(width=settings.COURT_WIDTH, height=settings.COURT_HEIGHT)


def mirror_coords_to_away(point: Point, court: Court | None = None) -> Point:
    """Mirror a point through the court center.

    Applying the mirror twice returns the original point.

    Args:
        point: Point in either team's frame.
        court: Court extents. Defaults to the configured court.

    Returns:
        The same field position seen from the other team's frame.
    """
    court = court or default_court()
    return Point(x=court.width - point.x, y=court.height - point.y)


def to_home_perspective(
    point: Point, place: TeamPlace, court: Court | None = None
) -> Point:
    """Express a point given by ``place`` in the home team's frame."""
    if place == TeamPlace.AWAY:
        return mirror_coords_to_away(point, court)
    return point


def from_home_perspective(
    point: Point, place: TeamPlace, court: Court | None = None
) -> Point:
    """Express a home-frame point in the frame of ``place``."""
    if place == TeamPlace.AWAY:
        return mirror_coords_to_away(point, court)
    return point
