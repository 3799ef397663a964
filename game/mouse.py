# game/mouse.py
import pygame

from config import NOMINAL_DEPTH
from gesture.projector import ScreenProjector
from gesture.types import Body, BodyFrame, Joint, JointId, TrackingState

_ORIGIN = (0.0, 0.0)


class MouseJointSource:
    """
    Stand-in sensor for playing without a camera: the mouse pointer is the
    right wrist, the left wrist is never tracked.
    """

    def __init__(self, projector: ScreenProjector, depth: float = NOMINAL_DEPTH):
        self.projector = projector
        self.depth = depth

    def body_at(self, pos) -> Body:
        right = Joint(JointId.WRIST_RIGHT, TrackingState.TRACKED, self.projector.unproject(pos, self.depth))
        left = Joint(JointId.WRIST_LEFT, TrackingState.NOT_TRACKED, self.projector.unproject(_ORIGIN, self.depth))
        return Body(index=0, joints={JointId.WRIST_RIGHT: right, JointId.WRIST_LEFT: left})

    def read(self) -> BodyFrame:
        if not pygame.mouse.get_focused():
            return BodyFrame()
        x, y = pygame.mouse.get_pos()
        return BodyFrame(bodies=(self.body_at((float(x), float(y))),))
