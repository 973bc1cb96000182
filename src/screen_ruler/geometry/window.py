"""Window placement rectangles derived from the ruler endpoints."""

from __future__ import annotations

from typing import List

from ..models import BOUNDARY_MARGIN, CONTROL_RADIUS, WindowGeometry
from ..utils import PointLike


def compute_window_geometry(
    start: PointLike, end: PointLike, margin: float = BOUNDARY_MARGIN
) -> WindowGeometry:
    """Bounding box of both endpoints grown by ``margin`` on every side.

    Coordinates are truncated toward zero so repeated calls give the same
    pixel edges.
    """
    min_x = min(start[0], end[0]) - margin
    max_x = max(start[0], end[0]) + margin
    min_y = min(start[1], end[1]) - margin
    max_y = max(start[1], end[1]) + margin
    return WindowGeometry(
        x=int(min_x),
        y=int(min_y),
        w=int(max_x - min_x),
        h=int(max_y - min_y),
    )


def control_regions(
    start: PointLike,
    end: PointLike,
    origin: PointLike = (0.0, 0.0),
    radius: float = CONTROL_RADIUS,
) -> List[WindowGeometry]:
    """Input-accepting squares around each endpoint, relative to ``origin``."""
    side = int(radius * 2.0)
    regions = []
    for p in (start, end):
        regions.append(
            WindowGeometry(
                x=int(p[0] - origin[0] - radius),
                y=int(p[1] - origin[1] - radius),
                w=side,
                h=side,
            )
        )
    return regions


__all__ = ["compute_window_geometry", "control_regions"]
