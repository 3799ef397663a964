# gesture/camera.py
"""
Camera discovery. Index/backend pairs are walked index-major until one
capture opens; captures that fail to open are released straight away.
"""
import logging
from typing import Iterator, Optional, Sequence, Tuple

import cv2

from config import CAM_INDEX_CANDIDATES, CAP_BACKENDS, CAM_W, CAM_H

logger = logging.getLogger(__name__)

OPEN_FAILED = "CAMERA_OPEN_FAILED"

Backend = Tuple[str, Optional[int]]


def camera_candidates(
    indices: Optional[Sequence[int]] = None,
    backends: Sequence[Backend] = CAP_BACKENDS,
) -> Iterator[Tuple[int, str, Optional[int]]]:
    for idx in CAM_INDEX_CANDIDATES if indices is None else indices:
        for name, api in backends:
            yield idx, name, api


def open_capture(idx: int, api: Optional[int], width: int = CAM_W, height: int = CAM_H):
    """Open one capture and request a frame size; None if the device would not open."""
    cap = cv2.VideoCapture(idx) if api is None else cv2.VideoCapture(idx, api)
    if not cap.isOpened():
        cap.release()
        return None
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    return cap


def describe_capture(cap, idx: int, backend_name: str) -> str:
    # drivers may ignore the requested size, so report what they settled on
    w = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
    h = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
    return f"CAM idx={idx}, backend={backend_name}, {w}x{h}"


def try_open_camera(
    indices: Optional[Sequence[int]] = None,
    backends: Sequence[Backend] = CAP_BACKENDS,
    width: int = CAM_W,
    height: int = CAM_H,
) -> Tuple[Optional[cv2.VideoCapture], str]:
    """Return the first capture that opens and its description, or (None, OPEN_FAILED)."""
    tried = 0
    for idx, name, api in camera_candidates(indices, backends):
        tried += 1
        cap = open_capture(idx, api, width, height)
        if cap is not None:
            return cap, describe_capture(cap, idx, name)
        logger.debug("camera idx=%s backend=%s did not open", idx, name)

    logger.debug("no camera among %d candidates", tried)
    return None, OPEN_FAILED
