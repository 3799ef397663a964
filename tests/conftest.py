import pytest

from config import NOMINAL_DEPTH
from game.targets import TargetManager, fixed_orientation
from gesture.projector import ScreenProjector
from gesture.types import Body, CameraSpacePoint, Joint, JointId, Orientation, TrackingState

DISPLAY = (512, 424)


class StubRng:
    """Returns queued values from integers(); falls back to `low` once the queue is empty."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high=None, endpoint=False):
        self.calls.append((low, high, endpoint))
        if self.values:
            return self.values.pop(0)
        return low


@pytest.fixture
def projector():
    return ScreenProjector(*DISPLAY)


@pytest.fixture
def make_body(projector):
    def _make(index=0, left=None, right=None, is_tracked=True):
        joints = {}
        for joint_id, pos in ((JointId.WRIST_LEFT, left), (JointId.WRIST_RIGHT, right)):
            if pos is None:
                joints[joint_id] = Joint(joint_id, TrackingState.NOT_TRACKED, CameraSpacePoint(0.0, 0.0, NOMINAL_DEPTH))
            else:
                joints[joint_id] = Joint(joint_id, TrackingState.TRACKED, projector.unproject(pos, NOMINAL_DEPTH))
        return Body(index=index, joints=joints, is_tracked=is_tracked)
    return _make


@pytest.fixture
def make_manager():
    """Manager whose targets all land at (x, y) with a fixed orientation."""
    def _make(x=100, y=100, orientation=Orientation.DOWN, timeout_frames=200, size=50, margin=50):
        rng = StubRng(*([x, y] * 50))
        return TargetManager(rng, *DISPLAY, size=size, margin=margin, timeout_frames=timeout_frames,
                             orientation_policy=fixed_orientation(orientation))
    return _make
