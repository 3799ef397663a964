# game/settings.py
from dataclasses import dataclass
from typing import Optional, Sequence

from config import (
    DISPLAY_W, DISPLAY_H, TARGET_SIZE, PLACEMENT_MARGIN, TIMEOUT_FRAMES,
    SKIP_GESTURES_ON_RESPAWN, SHOW_CAMERA, FPS,
)
from gesture.types import Orientation


@dataclass(frozen=True)
class GameSettings:
    source: str = "camera"                      # "camera" or "mouse"
    camera_indices: Optional[Sequence[int]] = None
    orientation: Optional[Orientation] = None   # None: random on every respawn
    display_width: int = DISPLAY_W
    display_height: int = DISPLAY_H
    target_size: int = TARGET_SIZE
    margin: int = PLACEMENT_MARGIN
    timeout_frames: int = TIMEOUT_FRAMES
    skip_gestures_on_respawn: bool = SKIP_GESTURES_ON_RESPAWN
    seed: Optional[int] = None
    show_camera: bool = SHOW_CAMERA
    fps: int = FPS
