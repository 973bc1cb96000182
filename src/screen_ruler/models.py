"""Dataclasses and constants describing the ruler and its configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Tuple

import json

RULER_HALF_WIDTH = 40.0
BOUNDARY_MARGIN = RULER_HALF_WIDTH
CONTROL_RADIUS = 20.0
MIN_LENGTH = 200.0
INITIAL_LENGTH = 400.0
HIT_RADIUS = 80.0  # press distance that grabs an endpoint
REDRAW_INTERVAL_MS = 16


class DragTarget(Enum):
    """Which endpoint, if any, follows the pointer."""

    IDLE = "idle"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class WindowGeometry:
    """Integer window rectangle in screen coordinates."""

    x: int
    y: int
    w: int
    h: int

    def pos(self) -> Tuple[int, int]:
        return self.x, self.y

    def size(self) -> Tuple[int, int]:
        return self.w, self.h


@dataclass
class RulerParams:
    """Dimensions of the ruler and its drag behaviour."""

    half_width: float = RULER_HALF_WIDTH
    control_radius: float = CONTROL_RADIUS
    min_length: float = MIN_LENGTH
    initial_length: float = INITIAL_LENGTH
    hit_radius: float = HIT_RADIUS
    redraw_interval_ms: int = REDRAW_INTERVAL_MS


@dataclass
class UIState:
    """User-interface level preferences for the overlay."""

    always_on_top: bool = True
    opacity: float = 0.6
    font_size: float = 14.0


@dataclass
class AppConfig:
    """Persisted configuration for the application."""

    ruler: RulerParams = field(default_factory=RulerParams)
    ui: UIState = field(default_factory=UIState)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        r = data.get("ruler", {})
        u = data.get("ui", {})
        return AppConfig(
            ruler=RulerParams(
                half_width=float(r.get("half_width", RULER_HALF_WIDTH)),
                control_radius=float(r.get("control_radius", CONTROL_RADIUS)),
                min_length=float(r.get("min_length", MIN_LENGTH)),
                initial_length=float(r.get("initial_length", INITIAL_LENGTH)),
                hit_radius=float(r.get("hit_radius", HIT_RADIUS)),
                redraw_interval_ms=int(
                    r.get("redraw_interval_ms", REDRAW_INTERVAL_MS)
                ),
            ),
            ui=UIState(
                always_on_top=bool(u.get("always_on_top", True)),
                opacity=float(u.get("opacity", 0.6)),
                font_size=float(u.get("font_size", 14.0)),
            ),
        )


__all__ = [
    "RULER_HALF_WIDTH",
    "BOUNDARY_MARGIN",
    "CONTROL_RADIUS",
    "MIN_LENGTH",
    "INITIAL_LENGTH",
    "HIT_RADIUS",
    "REDRAW_INTERVAL_MS",
    "DragTarget",
    "WindowGeometry",
    "RulerParams",
    "UIState",
    "AppConfig",
]
