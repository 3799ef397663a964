# gesture/types.py
from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, Flag, IntEnum, auto
from typing import Dict, Optional, Tuple

Point2D = Tuple[float, float]


class TrackingState(str, Enum):
    TRACKED = "TRACKED"
    INFERRED = "INFERRED"
    NOT_TRACKED = "NOT_TRACKED"


class JointId(str, Enum):
    HEAD = "HEAD"
    SPINE_SHOULDER = "SPINE_SHOULDER"
    SPINE_BASE = "SPINE_BASE"
    SHOULDER_LEFT = "SHOULDER_LEFT"
    SHOULDER_RIGHT = "SHOULDER_RIGHT"
    ELBOW_LEFT = "ELBOW_LEFT"
    ELBOW_RIGHT = "ELBOW_RIGHT"
    WRIST_LEFT = "WRIST_LEFT"
    WRIST_RIGHT = "WRIST_RIGHT"
    HAND_TIP_LEFT = "HAND_TIP_LEFT"
    HAND_TIP_RIGHT = "HAND_TIP_RIGHT"
    THUMB_LEFT = "THUMB_LEFT"
    THUMB_RIGHT = "THUMB_RIGHT"
    HIP_LEFT = "HIP_LEFT"
    HIP_RIGHT = "HIP_RIGHT"
    KNEE_LEFT = "KNEE_LEFT"
    KNEE_RIGHT = "KNEE_RIGHT"
    ANKLE_LEFT = "ANKLE_LEFT"
    ANKLE_RIGHT = "ANKLE_RIGHT"
    FOOT_LEFT = "FOOT_LEFT"
    FOOT_RIGHT = "FOOT_RIGHT"


class FrameEdges(Flag):
    NONE = 0
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


class Orientation(str, Enum):
    """Direction the hand has to sweep through the target."""
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class GesturePhase(IntEnum):
    """Progress of one swipe attempt. Ordered: a later phase implies the earlier ones."""
    IDLE = 0
    PRE_ZONE = 1
    TARGET_ZONE = 2
    POST_ZONE = 3


class GestureEvent(str, Enum):
    HIT = "HIT"
    NO_EVENT = "NO_EVENT"


class SensorStatus(str, Enum):
    RUNNING = "Running"
    NOT_AVAILABLE = "Sensor not available"
    NO_SENSOR = "No ready sensor found"


@dataclass(frozen=True)
class CameraSpacePoint:
    """Metres in camera space: x right, y up, z away from the sensor."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Joint:
    joint_id: JointId
    tracking_state: TrackingState
    position: CameraSpacePoint


@dataclass(frozen=True)
class JointSample:
    joint_id: JointId
    display_position: Point2D
    tracking_state: TrackingState

    @property
    def usable(self) -> bool:
        return self.tracking_state != TrackingState.NOT_TRACKED


@dataclass(frozen=True)
class Body:
    index: int
    joints: Dict[JointId, Joint]
    is_tracked: bool = True
    clipped_edges: FrameEdges = FrameEdges.NONE


@dataclass(frozen=True)
class BodyFrame:
    """All bodies reported for one sensor tick. An empty tuple is a valid frame."""
    bodies: Tuple[Body, ...] = ()
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass
class Target:
    bounds: Rect
    orientation: Orientation
    age_in_frames: int = 0
    serial: int = 0


@dataclass(frozen=True)
class HandPositions:
    """Display-space wrist positions; None means the wrist is not tracked this frame."""
    left: Optional[Point2D] = None
    right: Optional[Point2D] = None

    def present(self) -> Tuple[Point2D, ...]:
        return tuple(p for p in (self.left, self.right) if p is not None)


@dataclass
class SensorState:
    """Shared between the camera worker and the main loop, guarded by the worker's lock."""
    status: SensorStatus = SensorStatus.NO_SENSOR
    cam_info: str = ""
    bodies_seen: int = 0
    dropped_frames: int = 0
