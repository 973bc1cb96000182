"""Small helpers shared across the package."""

from .geometry import (
    ORIGIN,
    UNIT_X,
    UNIT_Y,
    PointLike,
    as_point,
    clamp_point,
    distance,
    distance_squared,
    normalize_or,
    try_normalize,
)

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
