# game/targets.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from config import PLACEMENT_MARGIN, TARGET_SIZE, TIMEOUT_FRAMES
from gesture.types import Orientation, Rect, Target

logger = logging.getLogger(__name__)

ORIENTATIONS = tuple(Orientation)

OrientationPolicy = Callable[[object, Optional[Orientation]], Orientation]
RespawnListener = Callable[[Target, str], None]


class TargetInvariantError(RuntimeError):
    """Raised when the manager does not hold exactly one active target."""


def fixed_orientation(orientation: Orientation) -> OrientationPolicy:
    def policy(rng, previous):
        return orientation
    return policy


def random_orientation(rng, previous: Optional[Orientation]) -> Orientation:
    return ORIENTATIONS[int(rng.integers(0, len(ORIENTATIONS)))]


def _origin(rng, extent: int, size: int, margin: int) -> int:
    high = extent - size - margin
    if high < margin:
        logger.debug("display extent %s too small for size %s + margin %s, clamping", extent, size, margin)
        return margin
    return int(rng.integers(margin, high, endpoint=True))


def spawn_target(rng, display_width: int, display_height: int, size: int, margin: int,
                 orientation: Orientation, serial: int = 0) -> Target:
    """New target with its origin uniform in [margin, extent - size - margin] on both axes."""
    x = _origin(rng, display_width, size, margin)
    y = _origin(rng, display_height, size, margin)
    return Target(bounds=Rect(x, y, size, size), orientation=orientation, age_in_frames=0, serial=serial)


class TargetManager:
    """Owns the single active target: spawns it, ages it and replaces it on timeout or hit."""

    def __init__(
        self,
        rng,
        display_width: int,
        display_height: int,
        size: int = TARGET_SIZE,
        margin: int = PLACEMENT_MARGIN,
        timeout_frames: int = TIMEOUT_FRAMES,
        orientation_policy: OrientationPolicy = random_orientation,
    ):
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        if margin < 0:
            raise ValueError(f"margin must not be negative, got {margin}")
        if timeout_frames <= 0:
            raise ValueError(f"timeout_frames must be positive, got {timeout_frames}")

        self.rng = rng
        self.display_width = display_width
        self.display_height = display_height
        self.size = size
        self.margin = margin
        self.timeout_frames = timeout_frames
        self.orientation_policy = orientation_policy
        self._listeners: List[RespawnListener] = []
        self._serial = 0
        self._target: Optional[Target] = None
        self._target = self.spawn()

    @property
    def current(self) -> Target:
        if self._target is None:
            raise TargetInvariantError("no active target")
        return self._target

    def add_respawn_listener(self, listener: RespawnListener) -> None:
        self._listeners.append(listener)

    def spawn(self) -> Target:
        previous = self._target.orientation if self._target is not None else None
        orientation = self.orientation_policy(self.rng, previous)
        self._serial += 1
        return spawn_target(self.rng, self.display_width, self.display_height,
                            self.size, self.margin, orientation, serial=self._serial)

    def tick(self) -> Optional[Target]:
        """Age the target by one frame; returns the replacement if it timed out, else None."""
        target = self.current
        target.age_in_frames += 1
        if target.age_in_frames >= self.timeout_frames:
            return self.replace("timeout")
        return None

    def replace_on_hit(self) -> Target:
        if self._target is None:
            raise TargetInvariantError("no active target to replace")
        return self.replace("hit")

    def replace(self, reason: str) -> Target:
        new = self.spawn()
        self._target = new
        logger.info("Target respawned (%s): %s at (%d, %d)", reason, new.orientation.value, new.bounds.x, new.bounds.y)
        for listener in self._listeners:
            listener(new, reason)
        return new
