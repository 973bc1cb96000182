"""Cursor-to-endpoint resolution under the ruler's drag constraints."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..models import MIN_LENGTH
from ..utils import (
    ORIGIN,
    UNIT_X,
    UNIT_Y,
    PointLike,
    as_point,
    clamp_point,
    distance,
    normalize_or,
)
from .core import MissHook, closest_point_below_line_on_circle


def handle_drag(
    previous: PointLike,
    anchor: PointLike,
    cursor: PointLike,
    screen_size: PointLike,
    fix_distance: bool,
    fix_angle: bool,
    *,
    min_length: float = MIN_LENGTH,
    on_miss: Optional[MissHook] = None,
) -> np.ndarray:
    """Return where the dragged endpoint goes for a new cursor position.

    ``previous`` is the dragged endpoint before this step and ``anchor`` the
    endpoint that stays put. The steps run in a fixed order: distance lock
    (sliding along the arc to stay on screen), angle lock, minimum length and
    finally a hard clamp to ``[0, 0] .. screen_size``. The hard clamp wins
    over both locks.

    The arc clamps visit the edges left, right, top, bottom. Another order can
    give a different point when a drag crosses two edges near a corner.
    """
    previous = as_point(previous)
    anchor = as_point(anchor)
    screen_size = as_point(screen_size)
    candidate = as_point(cursor)

    if fix_distance:
        old_distance = distance(previous, anchor)
        candidate = anchor + normalize_or(candidate - anchor, UNIT_X) * old_distance

        edges = (
            (ORIGIN, UNIT_Y),  # left, x = 0
            (screen_size, UNIT_Y),  # right, x = W
            (ORIGIN, UNIT_X),  # top, y = 0
            (screen_size, UNIT_X),  # bottom, y = H
        )
        screen_center = screen_size / 2.0
        for start, direction in edges:
            candidate = closest_point_below_line_on_circle(
                anchor,
                old_distance,
                start,
                direction,
                candidate,
                on_miss=on_miss,
                inside=screen_center,
            )

    if fix_angle:
        # Uses the length left by the distance lock, not the pre-drag length.
        old_direction = normalize_or(previous - anchor, UNIT_X)
        candidate = anchor + old_direction * distance(candidate, anchor)

    if distance(candidate, anchor) < min_length:
        candidate = anchor + normalize_or(candidate - anchor, UNIT_X) * min_length

    return clamp_point(candidate, ORIGIN, screen_size)


__all__ = ["handle_drag"]
