# gesture/projector.py
"""
Pinhole projection between camera space (metres) and display space (pixels).
"""
from __future__ import annotations

import math
from typing import Dict

import numpy as np

from config import HORIZONTAL_FOV_DEG, MIN_DEPTH
from gesture.types import Body, CameraSpacePoint, JointId, JointSample, Point2D


class ScreenProjector:
    def __init__(
        self,
        display_width: int,
        display_height: int,
        horizontal_fov_deg: float = HORIZONTAL_FOV_DEG,
        min_depth: float = MIN_DEPTH,
    ) -> None:
        if display_width <= 0 or display_height <= 0:
            raise ValueError(f"display must be positive, got {display_width}x{display_height}")
        if not 0.0 < horizontal_fov_deg < 180.0:
            raise ValueError(f"horizontal_fov_deg out of range: {horizontal_fov_deg}")
        if min_depth <= 0:
            raise ValueError(f"min_depth must be positive, got {min_depth}")

        self.display_width = display_width
        self.display_height = display_height
        self.min_depth = min_depth
        self.fx = (display_width / 2.0) / math.tan(math.radians(horizontal_fov_deg) / 2.0)
        self.fy = self.fx
        self.cx = display_width / 2.0
        self.cy = display_height / 2.0

    def project_many(self, points: np.ndarray) -> np.ndarray:
        """(N, 3) camera-space array -> (N, 2) display-space array."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        z = np.maximum(pts[:, 2], self.min_depth)
        u = self.cx + self.fx * pts[:, 0] / z
        v = self.cy - self.fy * pts[:, 1] / z
        return np.stack([u, v], axis=1)

    def project(self, point: CameraSpacePoint) -> Point2D:
        u, v = self.project_many(np.array([[point.x, point.y, point.z]]))[0]
        return float(u), float(v)

    def unproject(self, display_point: Point2D, depth: float) -> CameraSpacePoint:
        u, v = display_point
        return CameraSpacePoint(
            x=(u - self.cx) * depth / self.fx,
            y=(self.cy - v) * depth / self.fy,
            z=depth,
        )

    def project_body(self, body: Body) -> Dict[JointId, JointSample]:
        joints = list(body.joints.values())
        if not joints:
            return {}
        coords = self.project_many(np.array([[j.position.x, j.position.y, j.position.z] for j in joints]))
        return {
            j.joint_id: JointSample(j.joint_id, (float(u), float(v)), j.tracking_state)
            for j, (u, v) in zip(joints, coords)
        }
