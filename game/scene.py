# game/scene.py
"""
Builds the ordered draw commands for one frame: background, target,
skeletons, score and sensor status. The renderer only executes them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from config import CLIP_BOUNDS_THICKNESS, JOINT_THICKNESS, WRIST_MARKER_RADIUS
from gesture.types import (
    FrameEdges,
    JointId,
    JointSample,
    Orientation,
    Point2D,
    Rect,
    SensorStatus,
    Target,
    TrackingState,
)

Color = Tuple[int, int, int]

BACKGROUND: Color = (0, 0, 0)
TEXT_COLOR: Color = (230, 230, 230)
STATUS_COLOR: Color = (150, 150, 150)
CLIP_COLOR: Color = (255, 0, 0)
TRACKED_JOINT: Color = (68, 192, 68)
INFERRED_JOINT: Color = (255, 255, 0)
INFERRED_BONE: Color = (128, 128, 128)
WRIST_MARKER: Color = (128, 255, 128)
BODY_PEN_WIDTH = 6
INFERRED_PEN_WIDTH = 1

TARGET_COLORS: Dict[Orientation, Color] = {
    Orientation.UP: (80, 160, 255),
    Orientation.DOWN: (255, 90, 90),
    Orientation.LEFT: (255, 200, 60),
    Orientation.RIGHT: (170, 110, 255),
}

BODY_COLORS: Tuple[Color, ...] = (
    (255, 0, 0),      # red
    (255, 165, 0),    # orange
    (0, 128, 0),      # green
    (0, 0, 255),      # blue
    (75, 0, 130),     # indigo
    (238, 130, 238),  # violet
)

BONES: Tuple[Tuple[JointId, JointId], ...] = (
    # torso
    (JointId.HEAD, JointId.SPINE_SHOULDER),
    (JointId.SPINE_SHOULDER, JointId.SPINE_BASE),
    (JointId.SPINE_SHOULDER, JointId.SHOULDER_RIGHT),
    (JointId.SPINE_SHOULDER, JointId.SHOULDER_LEFT),
    (JointId.SPINE_BASE, JointId.HIP_RIGHT),
    (JointId.SPINE_BASE, JointId.HIP_LEFT),
    # right arm
    (JointId.SHOULDER_RIGHT, JointId.ELBOW_RIGHT),
    (JointId.ELBOW_RIGHT, JointId.WRIST_RIGHT),
    (JointId.WRIST_RIGHT, JointId.HAND_TIP_RIGHT),
    (JointId.WRIST_RIGHT, JointId.THUMB_RIGHT),
    # left arm
    (JointId.SHOULDER_LEFT, JointId.ELBOW_LEFT),
    (JointId.ELBOW_LEFT, JointId.WRIST_LEFT),
    (JointId.WRIST_LEFT, JointId.HAND_TIP_LEFT),
    (JointId.WRIST_LEFT, JointId.THUMB_LEFT),
    # right leg
    (JointId.HIP_RIGHT, JointId.KNEE_RIGHT),
    (JointId.KNEE_RIGHT, JointId.ANKLE_RIGHT),
    (JointId.ANKLE_RIGHT, JointId.FOOT_RIGHT),
    # left leg
    (JointId.HIP_LEFT, JointId.KNEE_LEFT),
    (JointId.KNEE_LEFT, JointId.ANKLE_LEFT),
    (JointId.ANKLE_LEFT, JointId.FOOT_LEFT),
)

WRISTS = (JointId.WRIST_LEFT, JointId.WRIST_RIGHT)


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class FillRect:
    rect: Rect
    color: Color


@dataclass(frozen=True)
class Line:
    start: Point2D
    end: Point2D
    color: Color
    width: int


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: int
    color: Color


@dataclass(frozen=True)
class Text:
    text: str
    position: Point2D
    color: Color


DrawCommand = Union[Clear, FillRect, Line, Circle, Text]


@dataclass(frozen=True)
class ProjectedBody:
    index: int
    samples: Dict[JointId, JointSample]
    clipped_edges: FrameEdges = FrameEdges.NONE


def clipped_edge_commands(edges: FrameEdges, width: int, height: int) -> List[DrawCommand]:
    t = CLIP_BOUNDS_THICKNESS
    out: List[DrawCommand] = []
    if edges & FrameEdges.BOTTOM:
        out.append(FillRect(Rect(0, height - t, width, t), CLIP_COLOR))
    if edges & FrameEdges.TOP:
        out.append(FillRect(Rect(0, 0, width, t), CLIP_COLOR))
    if edges & FrameEdges.LEFT:
        out.append(FillRect(Rect(0, 0, t, height), CLIP_COLOR))
    if edges & FrameEdges.RIGHT:
        out.append(FillRect(Rect(width - t, 0, t, height), CLIP_COLOR))
    return out


def body_commands(body: ProjectedBody) -> List[DrawCommand]:
    pen = BODY_COLORS[body.index % len(BODY_COLORS)]
    samples = body.samples
    out: List[DrawCommand] = []

    for a, b in BONES:
        ja, jb = samples.get(a), samples.get(b)
        if ja is None or jb is None or not ja.usable or not jb.usable:
            continue
        both_tracked = ja.tracking_state == TrackingState.TRACKED and jb.tracking_state == TrackingState.TRACKED
        if both_tracked:
            out.append(Line(ja.display_position, jb.display_position, pen, BODY_PEN_WIDTH))
        else:
            out.append(Line(ja.display_position, jb.display_position, INFERRED_BONE, INFERRED_PEN_WIDTH))

    for s in samples.values():
        if s.tracking_state == TrackingState.TRACKED:
            out.append(Circle(s.display_position, JOINT_THICKNESS, TRACKED_JOINT))
        elif s.tracking_state == TrackingState.INFERRED:
            out.append(Circle(s.display_position, JOINT_THICKNESS, INFERRED_JOINT))

    for w in WRISTS:
        s = samples.get(w)
        if s is not None and s.usable:
            out.append(Circle(s.display_position, WRIST_MARKER_RADIUS, WRIST_MARKER))
    return out


def build_scene(
    target: Target,
    bodies: Sequence[ProjectedBody],
    score: int,
    status: SensorStatus,
    width: int,
    height: int,
) -> List[DrawCommand]:
    commands: List[DrawCommand] = [Clear(BACKGROUND), FillRect(target.bounds, TARGET_COLORS[target.orientation])]
    for body in bodies:
        commands.extend(clipped_edge_commands(body.clipped_edges, width, height))
        commands.extend(body_commands(body))
    commands.append(Text(f"Score: {score}", (8, 6), TEXT_COLOR))
    commands.append(Text(status.value, (8, height - 24), STATUS_COLOR))
    return commands
