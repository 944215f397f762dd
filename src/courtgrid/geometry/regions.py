"""Region grid for courtgrid.

The court is split into 8 columns (along x) and 4 rows (along y). A region
code addresses one cell of that grid and is always expressed from the home
team's point of view:

    - "forward" means increasing x (toward the away goal)
    - "left" means increasing y, "right" means decreasing y

Navigation never wraps. A step off the edge of the grid returns the current
region unchanged.

Example:
    from courtgrid.geometry import Point, RegionCode, TeamPlace, get_region_code

    code = get_region_code(Point(x=12000, y=3000), TeamPlace.HOME)
    target = code.forwards().left()
    waypoint = target.center(TeamPlace.HOME)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

from pydantic import BaseModel, Field

from courtgrid.geometry.primitives import Court, PlayerRegion, Point, TeamPlace
from courtgrid.geometry.transforms import (
    default_court,
    from_home_perspective,
    to_home_perspective,
)
from courtgrid.geometry.validators import CourtValidator, OutOfCourtError
from courtgrid.utils.logging import get_logger

logger = get_logger(__name__)

GRID_COLUMNS = 8
GRID_ROWS = 4

_LAST_COLUMN = GRID_COLUMNS - 1
_LAST_ROW = GRID_ROWS - 1


class RegionCode(BaseModel, frozen=True):
    """Address of one cell of the 8x4 court grid, in the home team's frame.

    Attributes:
        x: Column index, 0 at the home goal line, 7 at the away goal line.
        y: Row index, 0 on the right touchline, 3 on the left one.
    """

    x: int = Field(..., ge=0, le=_LAST_COLUMN, description="Column index")
    y: int = Field(..., ge=0, le=_LAST_ROW, description="Row index")

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, code: tuple[int, int]) -> Self:
        """Create RegionCode from (x, y) tuple."""
        return cls(x=code[0], y=code[1])

    def center(self, place: TeamPlace, grid: RegionGrid | None = None) -> Point:
        """Return the central point of the region as seen by ``place``."""
        return (grid or RegionGrid.default()).center(self, place)

    def forward_right_corner(
        self, place: TeamPlace, grid: RegionGrid | None = None
    ) -> Point:
        """Return the forward corner on the right edge as seen by ``place``."""
        return (grid or RegionGrid.default()).forward_right_corner(self, place)

    def forward_left_corner(
        self, place: TeamPlace, grid: RegionGrid | None = None
    ) -> Point:
        """Return the forward corner on the left edge as seen by ``place``."""
        return (grid or RegionGrid.default()).forward_left_corner(self, place)

    def forwards(self) -> RegionCode:
        """Return the next region toward the attack field, or self at the last column."""
        if self.x == _LAST_COLUMN:
            return self
        return RegionCode(x=self.x + 1, y=self.y)

    def backwards(self) -> RegionCode:
        """Return the next region toward the defense field, or self at the first column."""
        if self.x == 0:
            return self
        return RegionCode(x=self.x - 1, y=self.y)

    def left(self) -> RegionCode:
        """Return the region on the left, or self on the left touchline."""
        if self.y == _LAST_ROW:
            return self
        return RegionCode(x=self.x, y=self.y + 1)

    def right(self) -> RegionCode:
        """Return the region on the right, or self on the right touchline."""
        if self.y == 0:
            return self
        return RegionCode(x=self.x, y=self.y - 1)

    def chess_distance_to(self, other: RegionCode) -> int:
        """Count the king moves (diagonals included) needed to reach ``other``."""
        return max(abs(self.x - other.x), abs(self.y - other.y))


@dataclass(frozen=True)
class RegionGrid:
    """The court divided into GRID_COLUMNS x GRID_ROWS regions.

    Region sizes use integer division, so any remainder of the court
    extents is left out of the cell geometry. Lookup still assigns points
    in that remainder to the last column/row.

    Attributes:
        court: Court extents the grid is laid over.
    """

    court: Court

    def __post_init__(self) -> None:
        # Cells need at least 2 units per side for the center to fall inside.
        if (
            self.court.width < 2 * GRID_COLUMNS
            or self.court.height < 2 * GRID_ROWS
        ):
            raise ValueError(
                f"Court {self.court.to_tuple()} is too small for a "
                f"{GRID_COLUMNS}x{GRID_ROWS} grid"
            )

    @classmethod
    def default(cls) -> RegionGrid:
        """Build the grid for the configured court."""
        return cls(court=default_court())

    @property
    def region_width(self) -> int:
        """Width of one region along x."""
        return self.court.width // GRID_COLUMNS

    @property
    def region_height(self) -> int:
        """Height of one region along y."""
        return self.court.height // GRID_ROWS

    def center(self, code: RegionCode, place: TeamPlace) -> Point:
        center = Point(
            x=code.x * self.region_width + self.region_width // 2,
            y=code.y * self.region_height + self.region_height // 2,
        )
        return from_home_perspective(center, place, self.court)

    def forward_right_corner(self, code: RegionCode, place: TeamPlace) -> Point:
        # Both forward corners sit on the cell's x+1 edge.
        corner = Point(
            x=(code.x + 1) * self.region_width,
            y=code.y * self.region_height,
        )
        return from_home_perspective(corner, place, self.court)

    def forward_left_corner(self, code: RegionCode, place: TeamPlace) -> Point:
        corner = Point(
            x=(code.x + 1) * self.region_width,
            y=(code.y + 1) * self.region_height,
        )
        return from_home_perspective(corner, place, self.court)

    def player_region(self, code: RegionCode, place: TeamPlace) -> PlayerRegion:
        """Return the rectangle covered by ``code`` as seen by ``place``.

        ``corner_a`` is the back-right corner of the cell and ``corner_b`` the
        forward-left one, both in the frame of ``place``.
        """
        back_right = Point(
            x=code.x * self.region_width,
            y=code.y * self.region_height,
        )
        return PlayerRegion(
            corner_a=from_home_perspective(back_right, place, self.court),
            corner_b=self.forward_left_corner(code, place),
        )

    def region_code(self, point: Point, place: TeamPlace) -> RegionCode:
        """Find the region containing a point.

        Cells are half-open: a point on the boundary between two cells
        belongs to the one with the higher index. Points on or beyond the
        far edges of the court map to the last column/row.

        Args:
            point: Point in the frame of ``place``.
            place: Side whose frame ``point`` is given in.

        Returns:
            The region code, in the home team's frame.

        Raises:
            OutOfCourtError: If the home-frame point has a negative coordinate.
        """
        home_point = to_home_perspective(point, place, self.court)
        validator = CourtValidator()
        try:
            validator.validate(home_point, self.court)
        except OutOfCourtError as e:
            logger.warning(
                "Rejecting point outside court",
                place=place.value,
                point=home_point.to_tuple(),
                error=str(e),
            )
            raise

        if not validator.is_on_court(home_point, self.court):
            logger.debug(
                "Clamping point beyond far edge",
                place=place.value,
                point=home_point.to_tuple(),
            )

        column = home_point.x // self.region_width
        row = home_point.y // self.region_height
        return RegionCode(x=min(column, _LAST_COLUMN), y=min(row, _LAST_ROW))

    def codes(self) -> Iterator[RegionCode]:
        """Iterate over every region, column by column."""
        for x in range(GRID_COLUMNS):
            for y in range(GRID_ROWS):
                yield RegionCode(x=x, y=y)


def get_region_code(
    point: Point, place: TeamPlace, grid: RegionGrid | None = None
) -> RegionCode:
    """Find the region containing ``point``, given in the frame of ``place``.

    Convenience wrapper over RegionGrid.region_code using the configured
    court when no grid is given.
    """
    return (grid or RegionGrid.default()).region_code(point, place)
