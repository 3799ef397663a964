# gesture/pose.py
"""
Convert MediaPipe Pose landmarks into a Body in camera space.

MediaPipe reports normalized image coordinates plus a visibility score per
landmark. Coordinates are scaled to the display, lifted to camera space at a
nominal depth and tagged TRACKED / INFERRED / NOT_TRACKED from visibility.
"""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from config import INFERRED_VISIBILITY, NOMINAL_DEPTH, TRACKED_VISIBILITY
from gesture.projector import ScreenProjector
from gesture.types import Body, FrameEdges, Joint, JointId, TrackingState

# MediaPipe Pose landmark indices
POSE_LANDMARKS: Dict[JointId, int] = {
    JointId.HEAD: 0,
    JointId.SHOULDER_LEFT: 11,
    JointId.SHOULDER_RIGHT: 12,
    JointId.ELBOW_LEFT: 13,
    JointId.ELBOW_RIGHT: 14,
    JointId.WRIST_LEFT: 15,
    JointId.WRIST_RIGHT: 16,
    JointId.HAND_TIP_LEFT: 19,
    JointId.HAND_TIP_RIGHT: 20,
    JointId.THUMB_LEFT: 21,
    JointId.THUMB_RIGHT: 22,
    JointId.HIP_LEFT: 23,
    JointId.HIP_RIGHT: 24,
    JointId.KNEE_LEFT: 25,
    JointId.KNEE_RIGHT: 26,
    JointId.ANKLE_LEFT: 27,
    JointId.ANKLE_RIGHT: 28,
    JointId.FOOT_LEFT: 31,
    JointId.FOOT_RIGHT: 32,
}

# joints the pose model has no landmark for: midpoint of two others
MIDPOINT_JOINTS: Dict[JointId, Tuple[JointId, JointId]] = {
    JointId.SPINE_SHOULDER: (JointId.SHOULDER_LEFT, JointId.SHOULDER_RIGHT),
    JointId.SPINE_BASE: (JointId.HIP_LEFT, JointId.HIP_RIGHT),
}

_STRENGTH = {TrackingState.NOT_TRACKED: 0, TrackingState.INFERRED: 1, TrackingState.TRACKED: 2}


def tracking_state_from_visibility(visibility: float) -> TrackingState:
    if visibility >= TRACKED_VISIBILITY:
        return TrackingState.TRACKED
    if visibility >= INFERRED_VISIBILITY:
        return TrackingState.INFERRED
    return TrackingState.NOT_TRACKED


def weaker(a: TrackingState, b: TrackingState) -> TrackingState:
    return a if _STRENGTH[a] <= _STRENGTH[b] else b


def clipped_edges_of(points: Sequence[Tuple[float, float]]) -> FrameEdges:
    """Which image edges the normalized points fall past."""
    edges = FrameEdges.NONE
    for x, y in points:
        if x < 0.0:
            edges |= FrameEdges.LEFT
        if x > 1.0:
            edges |= FrameEdges.RIGHT
        if y < 0.0:
            edges |= FrameEdges.TOP
        if y > 1.0:
            edges |= FrameEdges.BOTTOM
    return edges


def landmarks_to_body(
    landmarks,
    index: int,
    width: int,
    height: int,
    projector: ScreenProjector,
    depth: float = NOMINAL_DEPTH,
) -> Body:
    """
    landmarks: sequence of objects with x, y and visibility (MediaPipe NormalizedLandmark).
    width/height: display size the normalized coordinates are scaled to.
    """
    joints: Dict[JointId, Joint] = {}
    normalized: Dict[JointId, Tuple[float, float]] = {}
    states: Dict[JointId, TrackingState] = {}

    for joint_id, i in POSE_LANDMARKS.items():
        lm = landmarks[i]
        normalized[joint_id] = (float(lm.x), float(lm.y))
        states[joint_id] = tracking_state_from_visibility(float(getattr(lm, "visibility", 1.0) or 0.0))

    for joint_id, (a, b) in MIDPOINT_JOINTS.items():
        (ax, ay), (bx, by) = normalized[a], normalized[b]
        normalized[joint_id] = ((ax + bx) / 2.0, (ay + by) / 2.0)
        states[joint_id] = weaker(states[a], states[b])

    for joint_id, (nx, ny) in normalized.items():
        position = projector.unproject((nx * width, ny * height), depth)
        joints[joint_id] = Joint(joint_id, states[joint_id], position)

    edges = clipped_edges_of(
        [normalized[j] for j, s in states.items() if s == TrackingState.TRACKED]
    )
    return Body(index=index, joints=joints, is_tracked=True, clipped_edges=edges)
