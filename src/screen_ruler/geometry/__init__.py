"""Pure geometry used by the ruler overlay."""

from .core import (
    ArcClampMiss,
    MissHook,
    circle_intersect,
    closest_point_below_line_on_circle,
    log_arc_clamp_miss,
    solve_quadratic,
)
from .drag import handle_drag
from .scale import (
    ScaleLabel,
    Tick,
    display_angle_degrees,
    format_angle,
    ruler_angle,
    scale_labels,
    tick_marks,
)
from .window import compute_window_geometry, control_regions

__all__ = [
    "ArcClampMiss",
    "MissHook",
    "log_arc_clamp_miss",
    "solve_quadratic",
    "circle_intersect",
    "closest_point_below_line_on_circle",
    "handle_drag",
    "compute_window_geometry",
    "control_regions",
    "Tick",
    "ScaleLabel",
    "ruler_angle",
    "display_angle_degrees",
    "format_angle",
    "tick_marks",
    "scale_labels",
]
