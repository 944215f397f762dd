"""Geometry primitives for courtgrid.

This module provides immutable Pydantic models for field points, court
extents and rectangular player regions. All coordinates are integer field
units with (0, 0) at the bottom-left corner of the court as seen by the home
team: x grows toward the away goal, y grows toward the home team's left.
"""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import BaseModel, Field


class TeamPlace(str, Enum):
    """Side of the court a team defends."""

    HOME = "home"
    AWAY = "away"


class Point(BaseModel, frozen=True):
    """A 2D point in field coordinates.

    Coordinates are not bounded here: mirroring a point that lies outside
    the court yields negative values, and upstream measurements can be noisy.
    Bounds are checked where a point is mapped onto the grid.

    Attributes:
        x: Position along the court length.
        y: Position across the court width.
    """

    x: int = Field(..., description="X coordinate (field units)")
    y: int = Field(..., description="Y coordinate (field units)")

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[int, int]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])


class Court(BaseModel, frozen=True):
    """Extents of the playing field.

    Attributes:
        width: Length of the court along the x axis (> 0).
        height: Length of the court along the y axis (> 0).
    """

    width: int = Field(..., gt=0, description="Court extent along x")
    height: int = Field(..., gt=0, description="Court extent along y")

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)


class PlayerRegion(BaseModel, frozen=True):
    """A rectangle of the court described by two opposite corners."""

    corner_a: Point
    corner_b: Point

    def to_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Convert to ((ax, ay), (bx, by)) tuple."""
        return (self.corner_a.to_tuple(), self.corner_b.to_tuple())
