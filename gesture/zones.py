# gesture/zones.py
"""
Zone predicates for directional swipes.

Every orientation is the same test on a different axis: the hand has to stay
inside the target's band on the cross axis while it travels along the other
axis from the pre-zone, through the target, into the post-zone.
Display y grows downward, so DOWN travels towards increasing y.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from gesture.types import Orientation, Point2D, Rect

X, Y = 0, 1


@dataclass(frozen=True)
class SwipeAxis:
    along: int        # coordinate index the hand travels on
    ascending: bool   # True when travel goes towards larger coordinates

    @property
    def across(self) -> int:
        return Y if self.along == X else X


SWIPE_AXES: Dict[Orientation, SwipeAxis] = {
    Orientation.DOWN: SwipeAxis(along=Y, ascending=True),
    Orientation.UP: SwipeAxis(along=Y, ascending=False),
    Orientation.RIGHT: SwipeAxis(along=X, ascending=True),
    Orientation.LEFT: SwipeAxis(along=X, ascending=False),
}


def _span(bounds: Rect, axis: int) -> Tuple[float, float]:
    if axis == X:
        return bounds.left, bounds.right
    return bounds.top, bounds.bottom


def within_target_x(bounds: Rect, px: float) -> bool:
    return bounds.left <= px <= bounds.right


def within_target_y(bounds: Rect, py: float) -> bool:
    return bounds.top <= py <= bounds.bottom


def in_band(bounds: Rect, orientation: Orientation, p: Point2D) -> bool:
    """Inside the target on the cross axis (x-range for UP/DOWN, y-range for LEFT/RIGHT)."""
    axis = SWIPE_AXES[orientation]
    lo, hi = _span(bounds, axis.across)
    return lo <= p[axis.across] <= hi


def _before(bounds: Rect, axis: SwipeAxis, p: Point2D) -> bool:
    lo, hi = _span(bounds, axis.along)
    v = p[axis.along]
    return v <= lo if axis.ascending else v >= hi


def _after(bounds: Rect, axis: SwipeAxis, p: Point2D) -> bool:
    lo, hi = _span(bounds, axis.along)
    v = p[axis.along]
    return v >= hi if axis.ascending else v <= lo


def pre_zone(bounds: Rect, orientation: Orientation, p: Point2D) -> bool:
    return in_band(bounds, orientation, p) and _before(bounds, SWIPE_AXES[orientation], p)


def target_zone(bounds: Rect, orientation: Orientation, p: Point2D) -> bool:
    return within_target_x(bounds, p[X]) and within_target_y(bounds, p[Y])


def post_zone(bounds: Rect, orientation: Orientation, p: Point2D) -> bool:
    return in_band(bounds, orientation, p) and _after(bounds, SWIPE_AXES[orientation], p)
