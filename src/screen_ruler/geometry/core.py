"""Quadratic, circle/line and half-plane routines behind the drag solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import math

import numpy as np

from ..logger import get_logger
from ..utils import PointLike, as_point, distance_squared

log = get_logger("geometry")


@dataclass(frozen=True)
class ArcClampMiss:
    """Inputs of an arc clamp whose boundary line never met the circle."""

    center: Tuple[float, float]
    radius: float
    start: Tuple[float, float]
    direction: Tuple[float, float]
    point: Tuple[float, float]


MissHook = Callable[[ArcClampMiss], None]


def log_arc_clamp_miss(miss: ArcClampMiss) -> None:
    log.warning(
        "Boundary line misses the clamp circle (center=%s radius=%.3f "
        "start=%s direction=%s); keeping point %s",
        miss.center,
        miss.radius,
        miss.start,
        miss.direction,
        miss.point,
    )


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Real roots of ``a*t**2 + b*t + c``, smaller first, or ``None``.

    ``a`` must be non-zero; ``a == 0`` gives inf/nan roots instead of an error.
    """
    a, b, c = np.float64(a), np.float64(b), np.float64(c)
    d = b * b - 4.0 * a * c
    if d < 0.0:
        return None
    sqrt_d = np.sqrt(d)
    with np.errstate(divide="ignore", invalid="ignore"):
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
    return float(t1), float(t2)


def circle_intersect(
    center: PointLike, radius: float, start: PointLike, direction: PointLike
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Points where the line ``start + t*direction`` crosses the circle.

    The pair follows root order, not position along the line.
    """
    center = as_point(center)
    start = as_point(start)
    direction = as_point(direction)

    offset = start - center
    a = float(np.dot(direction, direction))
    b = 2.0 * float(np.dot(direction, offset))
    c = float(np.dot(offset, offset)) - radius * radius

    roots = solve_quadratic(a, b, c)
    if roots is None:
        return None
    t1, t2 = roots
    return start + direction * t1, start + direction * t2


def _report_miss(
    on_miss: Optional[MissHook],
    center: np.ndarray,
    radius: float,
    start: np.ndarray,
    direction: np.ndarray,
    point: np.ndarray,
) -> None:
    hook = on_miss if on_miss is not None else log_arc_clamp_miss
    hook(
        ArcClampMiss(
            center=(float(center[0]), float(center[1])),
            radius=float(radius),
            start=(float(start[0]), float(start[1])),
            direction=(float(direction[0]), float(direction[1])),
            point=(float(point[0]), float(point[1])),
        )
    )


def closest_point_below_line_on_circle(
    center: PointLike,
    radius: float,
    start: PointLike,
    direction: PointLike,
    point: PointLike,
    on_miss: Optional[MissHook] = None,
    inside: Optional[PointLike] = None,
) -> np.ndarray:
    """Keep ``point`` on the side of the boundary line that holds ``center``.

    A point that crossed the line is moved to the nearer of the two places
    where the line cuts the circle ``(center, radius)``. When ``center`` lies
    on the line itself, ``inside`` picks the permitted side; without it the
    point is returned unchanged. A zero ``direction`` describes no line and is
    reported through ``on_miss``.
    """
    center = as_point(center)
    start = as_point(start)
    direction = as_point(direction)
    point = as_point(point)

    # Unit normal form a*x + b*y + c = 0.
    a, b = float(direction[1]), -float(direction[0])
    norm = math.hypot(a, b)
    if norm == 0.0:
        _report_miss(on_miss, center, radius, start, direction, point)
        return point
    a, b = a / norm, b / norm
    c = -(a * start[0] + b * start[1])

    side = a * center[0] + b * center[1] + c
    if side == 0.0:
        if inside is None:
            return point
        ref = as_point(inside)
        side = a * ref[0] + b * ref[1] + c
        if side == 0.0:
            return point
    if side < 0.0:
        a, b, c = -a, -b, -c

    if a * point[0] + b * point[1] + c > 0.0:
        return point

    hits = circle_intersect(center, radius, start, direction)
    if hits is None:
        _report_miss(on_miss, center, radius, start, direction, point)
        return point

    p1, p2 = hits
    if distance_squared(p1, point) < distance_squared(p2, point):
        return p1
    return p2


__all__ = [
    "ArcClampMiss",
    "MissHook",
    "log_arc_clamp_miss",
    "solve_quadratic",
    "circle_intersect",
    "closest_point_below_line_on_circle",
]
