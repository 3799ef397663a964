# config.py
import cv2

# Camera: these indices are tried in order
CAM_INDEX_CANDIDATES = [0, 1, 2]

# Capture backends, tried in order for each index
CAP_BACKENDS = [
    ("DSHOW", cv2.CAP_DSHOW),
    ("MSMF", cv2.CAP_MSMF),
    ("DEFAULT", None),
]

CAM_W, CAM_H = 640, 360
MIRROR = True

SHOW_CAMERA = True  # True: show the camera preview (Q closes it, tracking keeps running)

# Pose model (MediaPipe Tasks)
POSE_MODEL_PATH = "pose_landmarker_lite.task"
POSE_MODEL_URL = (
    "https://storage.googleapis.com/mediapipe-models/pose_landmarker/"
    "pose_landmarker_lite/float16/latest/pose_landmarker_lite.task"
)
MAX_BODIES = 6                # same body slot count as the depth sensor
TRACKED_VISIBILITY = 0.5      # landmark visibility >= this -> TRACKED
INFERRED_VISIBILITY = 0.2     # >= this -> INFERRED, below -> NOT_TRACKED
BODY_QUEUE_SIZE = 4           # frames beyond this are dropped

# Display space (depth frame resolution)
DISPLAY_W, DISPLAY_H = 512, 424
HORIZONTAL_FOV_DEG = 70.6
MIN_DEPTH = 0.1               # metres; smaller/negative depth is clamped to this
NOMINAL_DEPTH = 2.0           # metres; depth used to lift 2-D detections

# Targets
TARGET_SIZE = 50
PLACEMENT_MARGIN = 50
SPAWN_MARGIN_INCREMENT = 10   # historical, the engine does not read it
TIMEOUT_FRAMES = 200
SKIP_GESTURES_ON_RESPAWN = True

# Render
FPS = 30
CLIP_BOUNDS_THICKNESS = 10
JOINT_THICKNESS = 3
WRIST_MARKER_RADIUS = 15
