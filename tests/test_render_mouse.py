import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from game.mouse import MouseJointSource
from game.render import draw_commands
from game.scene import Circle, Clear, FillRect, Line, Text
from gesture.types import JointId, Rect, TrackingState


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((64, 64))
    yield surface
    pygame.quit()


def test_draw_commands_paint_surface(screen):
    font = pygame.font.Font(None, 18)
    draw_commands(screen, font, [
        Clear((0, 0, 0)),
        FillRect(Rect(10, 10, 20, 20), (255, 0, 0)),
        Line((0, 50), (63, 50), (0, 255, 0), 3),
        Circle((50, 20), 4, (0, 0, 255)),
        Text("1", (0, 0), (255, 255, 255)),
    ])
    assert screen.get_at((15, 15))[:3] == (255, 0, 0)
    assert screen.get_at((30, 50))[:3] == (0, 255, 0)
    assert screen.get_at((50, 20))[:3] == (0, 0, 255)
    assert screen.get_at((60, 5))[:3] == (0, 0, 0)


def test_unknown_command_is_rejected(screen):
    with pytest.raises(TypeError):
        draw_commands(screen, pygame.font.Font(None, 18), [object()])


def test_mouse_drives_right_wrist(projector, monkeypatch):
    source = MouseJointSource(projector)
    monkeypatch.setattr(pygame.mouse, "get_focused", lambda: True)
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (100, 50))

    frame = source.read()
    assert len(frame.bodies) == 1
    samples = projector.project_body(frame.bodies[0])
    assert samples[JointId.WRIST_RIGHT].display_position == pytest.approx((100, 50))
    assert samples[JointId.WRIST_LEFT].tracking_state == TrackingState.NOT_TRACKED


def test_mouse_outside_window_gives_empty_frame(projector, monkeypatch):
    monkeypatch.setattr(pygame.mouse, "get_focused", lambda: False)
    assert MouseJointSource(projector).read().bodies == ()
