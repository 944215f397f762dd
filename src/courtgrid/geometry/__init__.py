"""Geometry module for courtgrid.

This package discretizes the court into an 8x4 grid of regions and provides
navigation, distance and home/away mirroring over that grid.

Key Components:
    - Primitives: Point, Court, PlayerRegion, TeamPlace
    - Transforms: home/away mirroring
    - Validators: court bounds checking for grid lookup
    - Regions: RegionCode navigation and RegionGrid geometry

Example:
    from courtgrid.geometry import Court, Point, RegionGrid, TeamPlace

    grid = RegionGrid(court=Court(width=40000, height=20000))
    code = grid.region_code(Point(x=39999, y=19999), TeamPlace.HOME)
    code.to_tuple()  # (7, 3)
"""

from courtgrid.geometry.primitives import Court, PlayerRegion, Point, TeamPlace
from courtgrid.geometry.regions import (
    GRID_COLUMNS,
    GRID_ROWS,
    RegionCode,
    RegionGrid,
    get_region_code,
)
from courtgrid.geometry.transforms import (
    default_court,
    from_home_perspective,
    mirror_coords_to_away,
    to_home_perspective,
)
from courtgrid.geometry.validators import CourtValidator, OutOfCourtError

__all__ = [
    "GRID_COLUMNS",
    "GRID_ROWS",
    "Court",
    "CourtValidator",
    "OutOfCourtError",
    "PlayerRegion",
    "Point",
    "RegionCode",
    "RegionGrid",
    "TeamPlace",
    "default_court",
    "from_home_perspective",
    "get_region_code",
    "mirror_coords_to_away",
    "to_home_perspective",
]
