"""courtgrid: region grid navigation over a rectangular court."""

from courtgrid.geometry import (
    GRID_COLUMNS,
    GRID_ROWS,
    Court,
    OutOfCourtError,
    PlayerRegion,
    Point,
    RegionCode,
    RegionGrid,
    TeamPlace,
    get_region_code,
    mirror_coords_to_away,
)

__all__ = [
    "GRID_COLUMNS",
    "GRID_ROWS",
    "Court",
    "OutOfCourtError",
    "PlayerRegion",
    "Point",
    "RegionCode",
    "RegionGrid",
    "TeamPlace",
    "get_region_code",
    "mirror_coords_to_away",
]
