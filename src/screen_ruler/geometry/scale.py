"""Tick, label and angle values drawn on the ruler body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import math

from ..utils import PointLike

TICK_STEP_PX = 5
LABEL_STEP_PX = 50


@dataclass(frozen=True)
class Tick:
    position: int  # px from the start endpoint
    depth: float  # px from the ruler edge


@dataclass(frozen=True)
class ScaleLabel:
    position: int
    text: str
    visibility: float  # 0..1, fades labels near the end endpoint


def ruler_angle(start: PointLike, end: PointLike) -> float:
    """Signed angle in radians from +X to ``end - start`` (y points down)."""
    return math.atan2(end[1] - start[1], end[0] - start[0])


def display_angle_degrees(angle: float) -> float:
    """Counter-clockwise angle as read on screen, in ``[0, 360)`` degrees."""
    if angle > 0.0:
        angle = math.pi * 2.0 - angle
    else:
        angle = abs(angle)
    return angle * 180.0 / math.pi


def format_angle(degrees: float) -> str:
    return f"{degrees:.2f}°"


def tick_depth(position: int) -> float:
    remainder = position % LABEL_STEP_PX
    if remainder == 0:
        return 17.0
    if remainder == LABEL_STEP_PX // 2:
        return 12.0
    return 7.0


def tick_marks(length: float) -> List[Tick]:
    """Ticks every 5 px along a ruler of ``length`` px, deeper at 25 and 50."""
    return [Tick(i, tick_depth(i)) for i in range(0, int(length), TICK_STEP_PX)]


def scale_labels(length: float) -> List[ScaleLabel]:
    """Pixel labels every 50 px; the first label sits at 50."""
    labels = []
    for i in range(LABEL_STEP_PX, int(length), LABEL_STEP_PX):
        visibility = min((length - i) / LABEL_STEP_PX, 1.0)
        labels.append(ScaleLabel(i, str(i), visibility))
    return labels


__all__ = [
    "TICK_STEP_PX",
    "LABEL_STEP_PX",
    "Tick",
    "ScaleLabel",
    "ruler_angle",
    "display_angle_degrees",
    "format_angle",
    "tick_depth",
    "tick_marks",
    "scale_labels",
]
