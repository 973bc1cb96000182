"""Drag session: the ruler endpoints plus which one follows the pointer."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from .geometry import MissHook, compute_window_geometry, control_regions, handle_drag
from .logger import get_logger
from .models import DragTarget, RulerParams, WindowGeometry
from .utils import PointLike, as_point, distance, distance_squared

log = get_logger("session")


class RulerSession:
    """Owns the segment and the ``IDLE -> START/END -> IDLE`` drag state.

    Calls to :meth:`move` must arrive in event order; each result becomes the
    ``previous`` point of the next step.
    """

    def __init__(
        self,
        start: PointLike,
        end: PointLike,
        screen_size: PointLike,
        params: Optional[RulerParams] = None,
        on_miss: Optional[MissHook] = None,
    ) -> None:
        self._start = as_point(start)
        self._end = as_point(end)
        self._screen_size = as_point(screen_size)
        self._params = params or RulerParams()
        self._on_miss = on_miss
        self._dragging = DragTarget.IDLE

    @classmethod
    def initial(
        cls,
        screen_size: PointLike,
        params: Optional[RulerParams] = None,
        on_miss: Optional[MissHook] = None,
    ) -> "RulerSession":
        """Horizontal ruler of ``initial_length`` near the screen center."""
        params = params or RulerParams()
        size = as_point(screen_size)
        start_x = (size[0] - params.initial_length) / 2.0 + params.half_width
        start_y = size[1] / 2.0 + params.half_width
        start = (start_x, start_y)
        end = (start_x + params.initial_length, start_y)
        return cls(start, end, size, params, on_miss)

    # ----------------------------- Properties ---------------------------------

    @property
    def start(self) -> np.ndarray:
        return self._start.copy()

    @property
    def end(self) -> np.ndarray:
        return self._end.copy()

    @property
    def screen_size(self) -> np.ndarray:
        return self._screen_size.copy()

    @property
    def params(self) -> RulerParams:
        return self._params

    @property
    def dragging(self) -> DragTarget:
        return self._dragging

    def length(self) -> float:
        return distance(self._start, self._end)

    # ----------------------------- Interaction --------------------------------

    def press(self, cursor: PointLike) -> DragTarget:
        """Grab the endpoint within ``hit_radius`` of ``cursor``, start first."""
        hit2 = self._params.hit_radius**2
        if distance_squared(cursor, self._start) < hit2:
            self._dragging = DragTarget.START
        elif distance_squared(cursor, self._end) < hit2:
            self._dragging = DragTarget.END
        log.debug("press at %s -> %s", tuple(cursor), self._dragging.value)
        return self._dragging

    def move(self, cursor: PointLike, fix_distance: bool, fix_angle: bool) -> bool:
        """Drag the grabbed endpoint toward ``cursor``; ``False`` when idle."""
        if self._dragging is DragTarget.IDLE:
            return False
        if self._dragging is DragTarget.START:
            self._start = handle_drag(
                self._start,
                self._end,
                cursor,
                self._screen_size,
                fix_distance,
                fix_angle,
                min_length=self._params.min_length,
                on_miss=self._on_miss,
            )
        else:
            self._end = handle_drag(
                self._end,
                self._start,
                cursor,
                self._screen_size,
                fix_distance,
                fix_angle,
                min_length=self._params.min_length,
                on_miss=self._on_miss,
            )
        return True

    def release(self) -> None:
        if self._dragging is not DragTarget.IDLE:
            log.debug(
                "released %s, length %.1f px", self._dragging.value, self.length()
            )
        self._dragging = DragTarget.IDLE

    # ----------------------------- Geometry -----------------------------------

    def geometry(self) -> WindowGeometry:
        return compute_window_geometry(
            self._start, self._end, margin=self._params.half_width
        )

    def control_regions(self) -> List[WindowGeometry]:
        """Endpoint grab squares in window-local coordinates."""
        geom = self.geometry()
        return control_regions(
            self._start,
            self._end,
            origin=geom.pos(),
            radius=self._params.control_radius,
        )


__all__ = ["RulerSession"]
