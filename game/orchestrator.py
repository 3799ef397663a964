# game/orchestrator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config import SKIP_GESTURES_ON_RESPAWN
from game.scene import DrawCommand, ProjectedBody, build_scene
from game.score import ScoreTracker
from game.targets import TargetManager
from gesture.projector import ScreenProjector
from gesture.state_machine import SwipeStateMachine
from gesture.types import (
    BodyFrame,
    GestureEvent,
    HandPositions,
    JointId,
    JointSample,
    Orientation,
    SensorStatus,
    Target,
)

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    event: GestureEvent
    target: Target
    score: int
    respawned: Optional[str] = None
    hit_orientation: Optional[Orientation] = None
    hit_body: Optional[int] = None
    commands: List[DrawCommand] = field(default_factory=list)


def wrist_positions(samples: Dict[JointId, JointSample]) -> HandPositions:
    def pos(joint_id):
        s = samples.get(joint_id)
        return s.display_position if s is not None and s.usable else None

    return HandPositions(left=pos(JointId.WRIST_LEFT), right=pos(JointId.WRIST_RIGHT))


class FrameOrchestrator:
    """
    Runs one synchronous cycle per body frame:
    age target -> project joints -> swipe detection per body -> score/respawn -> scene.
    """

    def __init__(
        self,
        targets: TargetManager,
        projector: ScreenProjector,
        score: Optional[ScoreTracker] = None,
        skip_gestures_on_respawn: bool = SKIP_GESTURES_ON_RESPAWN,
    ):
        self.targets = targets
        self.projector = projector
        self.score = score if score is not None else ScoreTracker()
        self.skip_gestures_on_respawn = skip_gestures_on_respawn
        self.sensor_status = SensorStatus.NO_SENSOR
        self.machines: Dict[int, SwipeStateMachine] = {}
        self.frames_processed = 0
        self._respawn_reason: Optional[str] = None
        targets.add_respawn_listener(self._on_respawn)

    def current_target(self) -> Target:
        return self.targets.current

    def current_score(self) -> int:
        return self.score.current()

    def machine_for(self, body_index: int) -> SwipeStateMachine:
        machine = self.machines.get(body_index)
        if machine is None:
            machine = self.machines[body_index] = SwipeStateMachine(name=f"body{body_index}")
        return machine

    def restart(self) -> Target:
        """Put up a fresh target; the score is kept."""
        return self.targets.replace("restart")

    def _on_respawn(self, target: Target, reason: str) -> None:
        self._respawn_reason = reason
        for machine in self.machines.values():
            machine.reset()

    def process_frame(self, frame: BodyFrame) -> FrameResult:
        self.frames_processed += 1
        self._respawn_reason = None

        self.targets.tick()
        evaluate = not (self.skip_gestures_on_respawn and self._respawn_reason == "timeout")

        event = GestureEvent.NO_EVENT
        hit_orientation = None
        hit_body = None
        projected: List[ProjectedBody] = []

        for body in frame.bodies:
            if not body.is_tracked:
                continue
            samples = self.projector.project_body(body)
            projected.append(ProjectedBody(body.index, samples, body.clipped_edges))

            if not evaluate or event == GestureEvent.HIT:
                continue

            target = self.targets.current
            if self.machine_for(body.index).update(target, wrist_positions(samples)) == GestureEvent.HIT:
                event = GestureEvent.HIT
                hit_orientation = target.orientation
                hit_body = body.index
                total = self.score.record_hit()
                logger.info("Hit %s by body %d, score %d", hit_orientation.value, body.index, total)
                self.targets.replace_on_hit()

        target = self.targets.current
        score = self.score.current()
        commands = build_scene(target, projected, score, self.sensor_status,
                               self.projector.display_width, self.projector.display_height)
        return FrameResult(
            event=event,
            target=target,
            score=score,
            respawned=self._respawn_reason,
            hit_orientation=hit_orientation,
            hit_body=hit_body,
            commands=commands,
        )
