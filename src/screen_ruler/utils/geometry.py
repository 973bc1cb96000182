"""Vector helpers shared by the drag solver and the overlay."""

import math
from typing import Optional, Sequence, Union

import numpy as np

PointLike = Union[np.ndarray, Sequence[float]]

UNIT_X = np.array([1.0, 0.0])
UNIT_Y = np.array([0.0, 1.0])
ORIGIN = np.array([0.0, 0.0])


def as_point(p: PointLike) -> np.ndarray:
    """Return ``p`` as a fresh ``float64`` array of shape ``(2,)``."""
    arr = np.array(p, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D point, got shape {arr.shape}.")
    return arr


def distance(a: PointLike, b: PointLike) -> float:
    return float(math.hypot(a[0] - b[0], a[1] - b[1]))


def distance_squared(a: PointLike, b: PointLike) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return float(dx * dx + dy * dy)


def try_normalize(v: PointLike) -> Optional[np.ndarray]:
    """Return the unit vector along ``v``, or ``None`` if it has no direction."""
    length = math.hypot(v[0], v[1])
    if length == 0.0 or not math.isfinite(length):
        return None
    return np.array([v[0] / length, v[1] / length], dtype=np.float64)


def normalize_or(v: PointLike, fallback: PointLike) -> np.ndarray:
    """Unit vector along ``v``; ``fallback`` when ``v`` is zero or non-finite."""
    unit = try_normalize(v)
    if unit is None:
        return as_point(fallback)
    return unit


def clamp_point(p: PointLike, lo: PointLike, hi: PointLike) -> np.ndarray:
    """Componentwise clamp of ``p`` into the box ``[lo, hi]``."""
    return np.clip(as_point(p), as_point(lo), as_point(hi))


__all__ = [
    "PointLike",
    "UNIT_X",
    "UNIT_Y",
    "ORIGIN",
    "as_point",
    "distance",
    "distance_squared",
    "try_normalize",
    "normalize_or",
    "clamp_point",
]
