# game/swipe.py
import logging
import queue

import numpy as np
import pygame

from config import BODY_QUEUE_SIZE
from game.mouse import MouseJointSource
from game.orchestrator import FrameOrchestrator
from game.render import draw_commands
from game.settings import GameSettings
from game.targets import TargetManager, fixed_orientation, random_orientation
from gesture.projector import ScreenProjector
from gesture.types import BodyFrame, SensorState, SensorStatus

logger = logging.getLogger(__name__)


def build_orchestrator(settings: GameSettings) -> FrameOrchestrator:
    rng = np.random.default_rng(settings.seed)
    policy = random_orientation if settings.orientation is None else fixed_orientation(settings.orientation)
    targets = TargetManager(
        rng,
        settings.display_width,
        settings.display_height,
        size=settings.target_size,
        margin=settings.margin,
        timeout_frames=settings.timeout_frames,
        orientation_policy=policy,
    )
    projector = ScreenProjector(settings.display_width, settings.display_height)
    return FrameOrchestrator(targets, projector, skip_gestures_on_respawn=settings.skip_gestures_on_respawn)


def drain(frames: "queue.Queue[BodyFrame]"):
    while True:
        try:
            yield frames.get_nowait()
        except queue.Empty:
            return


def run_game(settings: GameSettings):
    pygame.init()
    screen = pygame.display.set_mode((settings.display_width, settings.display_height))
    pygame.display.set_caption("SwipeTargets")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 18)

    orchestrator = build_orchestrator(settings)
    worker = None
    mouse = None
    frames: "queue.Queue[BodyFrame]" = queue.Queue(maxsize=BODY_QUEUE_SIZE)
    sensor = SensorState()

    if settings.source == "mouse":
        mouse = MouseJointSource(orchestrator.projector)
        sensor.status = SensorStatus.RUNNING
        sensor.cam_info = "mouse"
    else:
        # imported here so the mouse demo runs without the pose model
        from gesture.worker import PoseWorker
        worker = PoseWorker(frames, sensor, orchestrator.projector,
                            camera_indices=settings.camera_indices, show_camera=settings.show_camera)
        worker.start()
        logger.info("PoseWorker started: %s", worker.is_alive())

    def shutdown():
        if worker is not None:
            worker.stop()
            worker.join(timeout=2.0)
        pygame.quit()

    last = None
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                shutdown()
                return orchestrator.current_score()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    shutdown()
                    return orchestrator.current_score()
                # keyboard fallback
                if event.key == pygame.K_r:
                    orchestrator.restart()

        if worker is not None:
            with worker.lock:
                orchestrator.sensor_status = sensor.status
            incoming = list(drain(frames))
        else:
            orchestrator.sensor_status = sensor.status
            incoming = [mouse.read()]

        # one frame at a time, in arrival order
        for frame in incoming:
            last = orchestrator.process_frame(frame)

        if last is not None:
            draw_commands(screen, font, last.commands)
        else:
            screen.fill((0, 0, 0))
            screen.blit(font.render(f"Waiting for sensor... {sensor.status.value}", True, (200, 200, 200)), (8, 6))

        pygame.display.flip()
        clock.tick(settings.fps)
