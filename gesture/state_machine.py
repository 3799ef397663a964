# gesture/state_machine.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from gesture.types import (
    GestureEvent,
    GesturePhase,
    HandPositions,
    Orientation,
    Point2D,
    Rect,
    Target,
)
from gesture.zones import in_band, post_zone, pre_zone, target_zone

logger = logging.getLogger(__name__)

ZonePredicate = Callable[[Rect, Orientation, Point2D], bool]

# (phase required before the step, zone to reach, phase after the step)
TRANSITIONS: Tuple[Tuple[GesturePhase, ZonePredicate, GesturePhase], ...] = (
    (GesturePhase.IDLE, pre_zone, GesturePhase.PRE_ZONE),
    (GesturePhase.PRE_ZONE, target_zone, GesturePhase.TARGET_ZONE),
    (GesturePhase.TARGET_ZONE, post_zone, GesturePhase.POST_ZONE),
)


class SwipeStateMachine:
    """
    Latch-based swipe detector, one phase per orientation.

    Each frame only the active target's orientation is evaluated. Either wrist
    may drive any step; a wrist passed as None is ignored for the frame.
    Phases only move forward until a hit, a stale-gesture reset or reset().
    """

    def __init__(self, name: str = "body"):
        self.name = name
        self._phases: Dict[Orientation, GesturePhase] = {o: GesturePhase.IDLE for o in Orientation}

    def phase(self, orientation: Orientation) -> GesturePhase:
        return self._phases[orientation]

    def flags(self, orientation: Orientation) -> Tuple[bool, bool, bool]:
        """(entered_pre_zone, entered_target_zone, entered_post_zone)"""
        p = self._phases[orientation]
        return (p >= GesturePhase.PRE_ZONE, p >= GesturePhase.TARGET_ZONE, p >= GesturePhase.POST_ZONE)

    def reset(self) -> None:
        for o in self._phases:
            self._phases[o] = GesturePhase.IDLE

    def update(self, target: Target, hands: HandPositions) -> GestureEvent:
        orientation = target.orientation
        bounds = target.bounds
        present = hands.present()
        phase = self._phases[orientation]

        for required, zone, reached in TRANSITIONS:
            if phase >= required and phase < reached:
                if any(zone(bounds, orientation, p) for p in present):
                    logger.debug("[%s] %s %s -> %s", self.name, orientation.value, phase.name, reached.name)
                    phase = reached

        if phase == GesturePhase.POST_ZONE:
            logger.info("[%s] swipe %s completed", self.name, orientation.value)
            self._phases[orientation] = GesturePhase.IDLE
            return GestureEvent.HIT

        # stale gesture: a tracked hand exists but none is lined up with the target
        if present and not any(in_band(bounds, orientation, p) for p in present):
            if phase != GesturePhase.IDLE:
                logger.debug("[%s] %s %s -> IDLE (left the band)", self.name, orientation.value, phase.name)
            phase = GesturePhase.IDLE

        self._phases[orientation] = phase
        return GestureEvent.NO_EVENT
