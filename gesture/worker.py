# gesture/worker.py
import logging
import os
import queue
import threading
import time
import urllib.request

import cv2
import mediapipe as mp
from mediapipe.tasks import python
from mediapipe.tasks.python import vision

from config import (
    MIRROR, SHOW_CAMERA, MAX_BODIES,
    POSE_MODEL_PATH, POSE_MODEL_URL,
    DISPLAY_W, DISPLAY_H, NOMINAL_DEPTH,
)
from gesture.camera import try_open_camera
from gesture.pose import POSE_LANDMARKS, landmarks_to_body
from gesture.projector import ScreenProjector
from gesture.types import BodyFrame, SensorState, SensorStatus

logger = logging.getLogger(__name__)

PREVIEW_WINDOW = "Camera (press Q to close this window)"


def ensure_pose_model(path: str = POSE_MODEL_PATH, url: str = POSE_MODEL_URL) -> str:
    if not os.path.exists(path):
        logger.info("Downloading pose landmarker model to %s", path)
        urllib.request.urlretrieve(url, path)
    return path


def create_pose_landmarker(model_path: str, num_poses: int = MAX_BODIES):
    return vision.PoseLandmarker.create_from_options(
        vision.PoseLandmarkerOptions(
            base_options=python.BaseOptions(model_asset_path=model_path),
            running_mode=vision.RunningMode.VIDEO,
            num_poses=num_poses,
            min_pose_detection_confidence=0.5,
            min_pose_presence_confidence=0.5,
            min_tracking_confidence=0.5,
        )
    )


class PoseWorker(threading.Thread):
    """
    Camera acquisition thread. Publishes one BodyFrame per camera frame into
    `frames`; the game loop consumes them on its own thread. When the queue is
    full the new frame is dropped.
    """

    def __init__(self, frames: "queue.Queue[BodyFrame]", state: SensorState,
                 projector: ScreenProjector, camera_indices=None, show_camera: bool = SHOW_CAMERA):
        super().__init__(daemon=True)
        self.frames = frames
        self.state = state
        self.projector = projector
        self.camera_indices = camera_indices
        self.show_camera = show_camera
        self._stop_event = threading.Event()
        self.lock = threading.Lock()

    def stop(self):
        self._stop_event.set()

    def _set_status(self, status: SensorStatus):
        with self.lock:
            changed = self.state.status != status
            self.state.status = status
        if changed:
            logger.info("Sensor status: %s", status.value)

    def _publish(self, frame: BodyFrame):
        try:
            self.frames.put_nowait(frame)
        except queue.Full:
            with self.lock:
                self.state.dropped_frames += 1

    def run(self):
        cap = None
        landmarker = None
        try:
            cap, cam_info = try_open_camera(self.camera_indices)
            with self.lock:
                self.state.cam_info = cam_info

            if cap is None:
                self._set_status(SensorStatus.NO_SENSOR)
                logger.warning("%s. Close apps using the camera or try another index.", cam_info)
                return

            logger.info("Opened: %s", cam_info)
            landmarker = create_pose_landmarker(ensure_pose_model())
            self._set_status(SensorStatus.RUNNING)
            started = time.monotonic()
            last_ts = -1

            while not self._stop_event.is_set():
                ok, image = cap.read()
                if not ok:
                    self._set_status(SensorStatus.NOT_AVAILABLE)
                    time.sleep(0.01)
                    continue
                self._set_status(SensorStatus.RUNNING)

                if MIRROR:
                    image = cv2.flip(image, 1)

                rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
                mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
                # VIDEO mode needs strictly increasing timestamps
                ts = max(int((time.monotonic() - started) * 1000), last_ts + 1)
                last_ts = ts
                result = landmarker.detect_for_video(mp_image, ts)

                bodies = tuple(
                    landmarks_to_body(lms, i, DISPLAY_W, DISPLAY_H, self.projector, NOMINAL_DEPTH)
                    for i, lms in enumerate(result.pose_landmarks or [])
                )
                self._publish(BodyFrame(bodies=bodies))
                with self.lock:
                    self.state.bodies_seen = len(bodies)

                if self.show_camera:
                    self._show_preview(image, result.pose_landmarks or [], cam_info)

        except Exception:
            self._set_status(SensorStatus.NOT_AVAILABLE)
            logger.exception("Pose worker stopped")
        finally:
            self._release(cap, landmarker)

    def _release(self, cap, landmarker):
        if cap is not None:
            cap.release()
        if landmarker is not None:
            landmarker.close()
        if self.show_camera:
            cv2.destroyAllWindows()

    def _show_preview(self, image, poses, cam_info: str):
        h, w = image.shape[:2]
        for lms in poses:
            for i in POSE_LANDMARKS.values():
                lm = lms[i]
                color = (0, 255, 0) if (lm.visibility or 0.0) >= 0.5 else (0, 200, 255)
                cv2.circle(image, (int(lm.x * w), int(lm.y * h)), 4, color, -1)
        cv2.putText(image, cam_info, (10, 24), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)
        cv2.putText(image, f"bodies: {len(poses)}", (10, 52), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (0, 255, 0), 2)
        cv2.imshow(PREVIEW_WINDOW, image)
        k = cv2.waitKey(1) & 0xFF
        if k in (ord('q'), ord('Q')):
            cv2.destroyWindow(PREVIEW_WINDOW)
            self.show_camera = False
