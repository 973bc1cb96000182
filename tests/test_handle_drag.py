"""Behaviour of the drag solver under the distance and angle locks."""

from __future__ import annotations

import math
from typing import List, Optional

from hypothesis import given, settings
from hypothesis import strategies as st
import numpy as np
from numpy.testing import assert_allclose
import pytest

from screen_ruler.geometry import ArcClampMiss, handle_drag
from screen_ruler.models import MIN_LENGTH

SCREEN = (1000.0, 1000.0)


def _dist(a, b) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def test_fix_distance_projects_cursor_onto_circle() -> None:
    result = handle_drag(
        (100.0, 0.0),
        (0.0, 0.0),
        (100.0, 50.0),
        SCREEN,
        fix_distance=True,
        fix_angle=False,
        min_length=50.0,
    )
    expected = np.array([100.0, 50.0]) / math.hypot(100.0, 50.0) * 100.0
    assert_allclose(result, expected, atol=1e-9)
    assert_allclose(result, (89.4427191, 44.7213595), atol=1e-6)


def test_min_length_overrides_short_locked_distance() -> None:
    result = handle_drag(
        (100.0, 0.0), (0.0, 0.0), (100.0, 50.0), SCREEN, True, False
    )
    assert_allclose(_dist(result, (0.0, 0.0)), MIN_LENGTH, atol=1e-9)
    assert_allclose(result, np.array([2.0, 1.0]) / math.sqrt(5.0) * MIN_LENGTH)


def test_min_length_pushes_along_cursor_direction() -> None:
    result = handle_drag(
        (200.0, 0.0), (0.0, 0.0), (1.0, 0.0), SCREEN, False, False, min_length=200.0
    )
    assert_allclose(result, (200.0, 0.0))


def test_free_drag_follows_cursor() -> None:
    result = handle_drag(
        (700.0, 500.0), (500.0, 500.0), (620.0, 830.0), SCREEN, False, False
    )
    assert_allclose(result, (620.0, 830.0))


def test_fix_distance_slides_along_arc_at_right_edge() -> None:
    anchor = (900.0, 500.0)
    result = handle_drag((700.0, 500.0), anchor, (1300.0, 600.0), SCREEN, True, False)
    assert_allclose(result, (1000.0, 500.0 + 100.0 * math.sqrt(3.0)), atol=1e-6)
    assert_allclose(_dist(result, anchor), 200.0, atol=1e-6)


def test_fix_distance_slides_along_arc_at_top_edge() -> None:
    anchor = (500.0, 100.0)
    result = handle_drag((500.0, 400.0), anchor, (600.0, -500.0), SCREEN, True, False)
    # Circle of radius 300 meets y = 0 at x = 500 +- sqrt(300**2 - 100**2).
    assert_allclose(result, (500.0 + math.sqrt(80000.0), 0.0), atol=1e-6)
    assert_allclose(_dist(result, anchor), 300.0, atol=1e-6)


@pytest.mark.parametrize(
    "anchor, previous, cursor, expected",
    [
        ((500.0, 0.0), (500.0, 300.0), (600.0, -500.0), (800.0, 0.0)),
        ((500.0, 1000.0), (500.0, 700.0), (600.0, 1500.0), (800.0, 1000.0)),
        ((0.0, 500.0), (300.0, 500.0), (-500.0, 600.0), (0.0, 800.0)),
        ((1000.0, 500.0), (700.0, 500.0), (1500.0, 600.0), (1000.0, 800.0)),
    ],
    ids=["top", "bottom", "left", "right"],
)
def test_fix_distance_slides_along_edge_holding_the_anchor(
    anchor, previous, cursor, expected
) -> None:
    result = handle_drag(previous, anchor, cursor, SCREEN, True, False)
    assert_allclose(result, expected, atol=1e-6)
    assert_allclose(_dist(result, anchor), 300.0, atol=1e-6)


def test_fix_angle_keeps_direction_and_uses_cursor_distance() -> None:
    result = handle_drag(
        (600.0, 500.0), (500.0, 500.0), (500.0, 800.0), SCREEN, False, True
    )
    assert_allclose(result, (800.0, 500.0), atol=1e-9)


def test_both_locks_freeze_the_endpoint() -> None:
    result = handle_drag(
        (700.0, 500.0), (500.0, 500.0), (500.0, 900.0), SCREEN, True, True
    )
    assert_allclose(result, (700.0, 500.0), atol=1e-9)


def test_fix_distance_cursor_on_anchor_falls_back_to_unit_x() -> None:
    result = handle_drag(
        (500.0, 300.0), (500.0, 500.0), (500.0, 500.0), SCREEN, True, False
    )
    assert_allclose(result, (700.0, 500.0))


def test_free_drag_cursor_on_anchor_falls_back_to_unit_x() -> None:
    result = handle_drag(
        (700.0, 500.0), (500.0, 500.0), (500.0, 500.0), SCREEN, False, False
    )
    assert_allclose(result, (700.0, 500.0))


def test_fix_angle_with_coincident_previous_falls_back_to_unit_x() -> None:
    result = handle_drag(
        (500.0, 500.0), (500.0, 500.0), (500.0, 750.0), SCREEN, False, True
    )
    assert_allclose(result, (750.0, 500.0))


def test_hard_clamp_keeps_point_on_screen() -> None:
    result = handle_drag(
        (700.0, 500.0), (500.0, 500.0), (-50.0, 1200.0), SCREEN, False, False
    )
    assert_allclose(result, (0.0, 1000.0))


def test_hard_clamp_can_break_angle_lock() -> None:
    result = handle_drag(
        (900.0, 500.0), (500.0, 500.0), (500.0, 1400.0), SCREEN, False, True
    )
    # Angle lock asks for (1400, 500); the screen edge wins.
    assert_allclose(result, (1000.0, 500.0))


def test_regular_drags_never_hit_the_miss_hook() -> None:
    misses: List[ArcClampMiss] = []
    previous = np.array([700.0, 500.0])
    anchor = (500.0, 500.0)
    for cursor in ((900.0, 100.0), (1200.0, -300.0), (-400.0, 500.0), (500.0, 1500.0)):
        previous = handle_drag(
            previous, anchor, cursor, SCREEN, True, False, on_miss=misses.append
        )
        assert_allclose(_dist(previous, anchor), 200.0, atol=1e-6)
    assert misses == []


def test_inputs_are_not_mutated() -> None:
    previous = np.array([700.0, 500.0])
    anchor = np.array([500.0, 500.0])
    cursor = np.array([1500.0, 500.0])
    handle_drag(previous, anchor, cursor, SCREEN, True, True)
    assert_allclose(previous, (700.0, 500.0))
    assert_allclose(anchor, (500.0, 500.0))
    assert_allclose(cursor, (1500.0, 500.0))


sizes = st.floats(min_value=2 * MIN_LENGTH, max_value=4000.0)
fractions = st.floats(min_value=0.0, max_value=1.0)
offsets = st.floats(min_value=-1.0, max_value=2.0)


@given(
    width=sizes,
    height=sizes,
    ax=fractions,
    ay=fractions,
    px=fractions,
    py=fractions,
    cx=offsets,
    cy=offsets,
    fix_distance=st.booleans(),
    fix_angle=st.booleans(),
    edge=st.sampled_from([None, "left", "right", "top", "bottom"]),
)
@settings(deadline=None, max_examples=400)
def test_result_stays_on_screen_and_long_enough(
    width: float,
    height: float,
    ax: float,
    ay: float,
    px: float,
    py: float,
    cx: float,
    cy: float,
    fix_distance: bool,
    fix_angle: bool,
    edge: Optional[str],
) -> None:
    """Any lock combination keeps the endpoint on screen and >= MIN_LENGTH.

    The anchor is either at least MIN_LENGTH from every edge or sits on one
    edge while staying MIN_LENGTH from the two edges that meet it.
    """
    x = MIN_LENGTH + ax * (width - 2 * MIN_LENGTH)
    y = MIN_LENGTH + ay * (height - 2 * MIN_LENGTH)
    if edge == "left":
        x = 0.0
    elif edge == "right":
        x = width
    elif edge == "top":
        y = 0.0
    elif edge == "bottom":
        y = height
    anchor = (x, y)
    previous = (px * width, py * height)
    cursor = (cx * width, cy * height)

    result = handle_drag(
        previous, anchor, cursor, (width, height), fix_distance, fix_angle
    )

    assert np.all(np.isfinite(result))
    assert 0.0 <= result[0] <= width
    assert 0.0 <= result[1] <= height
    # A free drag pulled off the anchor's own edge is cut short by the hard clamp.
    if edge is None or fix_distance or fix_angle:
        assert _dist(result, anchor) >= MIN_LENGTH - 1e-6


@given(
    edge=st.sampled_from(["left", "right", "top", "bottom"]),
    width=st.floats(min_value=4 * MIN_LENGTH, max_value=4000.0),
    height=st.floats(min_value=4 * MIN_LENGTH, max_value=4000.0),
    along=fractions,
    radius=st.floats(min_value=MIN_LENGTH, max_value=1.5 * MIN_LENGTH),
    angle=st.floats(min_value=0.0, max_value=2 * math.pi),
    cx=offsets,
    cy=offsets,
)
@settings(deadline=None, max_examples=300)
def test_fix_distance_holds_length_for_anchor_on_edge(
    edge: str,
    width: float,
    height: float,
    along: float,
    radius: float,
    angle: float,
    cx: float,
    cy: float,
) -> None:
    """An anchor on an edge still lets the endpoint slide along the arc."""
    span = 1.5 * MIN_LENGTH
    if edge in ("left", "right"):
        anchor = (0.0 if edge == "left" else width, span + along * (height - 2 * span))
    else:
        anchor = (span + along * (width - 2 * span), 0.0 if edge == "top" else height)
    previous = (
        anchor[0] + math.cos(angle) * radius,
        anchor[1] + math.sin(angle) * radius,
    )
    cursor = (cx * width, cy * height)

    result = handle_drag(previous, anchor, cursor, (width, height), True, False)

    assert 0.0 <= result[0] <= width
    assert 0.0 <= result[1] <= height
    assert_allclose(_dist(result, anchor), _dist(previous, anchor), atol=1e-6)


@given(
    angle=st.floats(min_value=0.0, max_value=2 * math.pi),
    cursor_angle=st.floats(min_value=0.0, max_value=2 * math.pi),
    cursor_dist=st.floats(min_value=0.0, max_value=150.0),
)
@settings(deadline=None, max_examples=100)
def test_fix_distance_preserves_length_away_from_edges(
    angle: float, cursor_angle: float, cursor_dist: float
) -> None:
    anchor = (1000.0, 1000.0)
    previous = (
        anchor[0] + math.cos(angle) * 250.0,
        anchor[1] + math.sin(angle) * 250.0,
    )
    cursor = (
        anchor[0] + math.cos(cursor_angle) * cursor_dist,
        anchor[1] + math.sin(cursor_angle) * cursor_dist,
    )
    result = handle_drag(previous, anchor, cursor, (2000.0, 2000.0), True, False)
    assert_allclose(_dist(result, anchor), 250.0, atol=1e-6)


@given(
    angle=st.floats(min_value=0.0, max_value=2 * math.pi),
    cx=st.floats(min_value=600.0, max_value=900.0),
    cy=st.floats(min_value=600.0, max_value=1400.0),
)
@settings(deadline=None, max_examples=100)
def test_fix_angle_result_is_parallel_to_previous_direction(
    angle: float, cx: float, cy: float
) -> None:
    anchor = (1000.0, 1000.0)
    previous = (
        anchor[0] + math.cos(angle) * 300.0,
        anchor[1] + math.sin(angle) * 300.0,
    )
    result = handle_drag(previous, anchor, (cx, cy), (2000.0, 2000.0), False, True)
    old = np.subtract(previous, anchor)
    new = np.subtract(result, anchor)
    cross = old[0] * new[1] - old[1] * new[0]
    assert abs(cross) <= 1e-6 * np.linalg.norm(old) * np.linalg.norm(new)
    assert float(np.dot(old, new)) > 0.0
