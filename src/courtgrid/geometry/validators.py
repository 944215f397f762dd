"""Court bounds validation for courtgrid.

Grid lookup clamps points that reach or pass the far edges of the court onto
the last column and row. Nothing sensible exists below the near edges, so
points with a negative home-frame coordinate are rejected here instead of
being turned into an out-of-grid region code.
"""

from __future__ import annotations

from courtgrid.geometry.primitives import Court, Point


class OutOfCourtError(ValueError):
    """Raised when a point cannot be placed on the court.

    Attributes:
        point: The rejected point, in the home team's frame.
        court: The court it was validated against.
    """

    def __init__(
        self,
        message: str,
        *,
        point: Point,
        court: Court,
    ) -> None:
        self.point = point
        self.court = court
        super().__init__(
            f"{message} (point={point.to_tuple()}, court={court.to_tuple()})"
        )


class CourtValidator:
    """Validator for points against court bounds.

    The validator is stateless and operates purely on the inputs provided
    to each method.
    """

    def validate(self, point: Point, court: Court) -> bool:
        """Validate that a home-frame point can be mapped onto the grid.

        Only the near edges are checked. Points beyond the far edges are
        valid and clamp to the last column/row during lookup.

        Args:
            point: The point to validate, in the home team's frame.
            court: The court extents.

        Returns:
            True if both coordinates are non-negative.

        Raises:
            OutOfCourtError: If a coordinate is negative.
        """
        violations: list[str] = []
        if point.x < 0:
            violations.append(f"x ({point.x}) is negative")
        if point.y < 0:
            violations.append(f"y ({point.y}) is negative")
        if violations:
            raise OutOfCourtError(
                f"Point outside court: {'; '.join(violations)}",
                point=point,
                court=court,
            )
        return True

    def is_on_court(self, point: Point, court: Court) -> bool:
        """Check if a point lies on the court, far edges included."""
        return 0 <= point.x <= court.width and 0 <= point.y <= court.height
