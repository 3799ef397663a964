import numpy as np
import pytest

from conftest import DISPLAY, StubRng
from game.targets import (
    TargetInvariantError,
    TargetManager,
    fixed_orientation,
    random_orientation,
    spawn_target,
)
from gesture.types import Orientation


class ExplodingRng:
    def integers(self, *args, **kwargs):
        raise AssertionError("rng should not be used")


def test_spawn_stays_within_margin_bounds():
    rng = np.random.default_rng(1234)
    w, h = DISPLAY
    for _ in range(500):
        t = spawn_target(rng, w, h, 50, 50, Orientation.UP)
        assert 50 <= t.bounds.x <= w - 50 - 50
        assert 50 <= t.bounds.y <= h - 50 - 50
        assert (t.bounds.w, t.bounds.h) == (50, 50)
        assert t.age_in_frames == 0


def test_spawn_interval_is_inclusive():
    rng = StubRng(412, 324)
    t = spawn_target(rng, 512, 424, 50, 50, Orientation.DOWN)
    assert (t.bounds.x, t.bounds.y) == (412, 324)
    assert rng.calls == [(50, 412, True), (50, 324, True)]


def test_degenerate_display_falls_back_to_margin():
    t = spawn_target(ExplodingRng(), 100, 120, 50, 50, Orientation.LEFT)
    assert (t.bounds.x, t.bounds.y) == (50, 50)


def test_tick_ages_and_times_out(make_manager):
    manager = make_manager(timeout_frames=200)
    first = manager.current
    reasons = []
    manager.add_respawn_listener(lambda target, reason: reasons.append(reason))

    for frame in range(1, 200):
        assert manager.tick() is None
        assert manager.current is first
        assert first.age_in_frames == frame

    replacement = manager.tick()
    assert replacement is manager.current
    assert replacement is not first
    assert replacement.age_in_frames == 0
    assert replacement.serial == first.serial + 1
    assert reasons == ["timeout"]


def test_replace_on_hit_resets_age_and_notifies(make_manager):
    manager = make_manager()
    for _ in range(10):
        manager.tick()
    seen = []
    manager.add_respawn_listener(lambda target, reason: seen.append((target, reason)))

    new = manager.replace_on_hit()
    assert new.age_in_frames == 0
    assert manager.current is new
    assert seen == [(new, "hit")]


def test_respawn_redraws_position_within_bounds():
    manager = TargetManager(np.random.default_rng(7), *DISPLAY, timeout_frames=1)
    for _ in range(100):
        t = manager.tick()
        assert t is not None
        assert 50 <= t.bounds.x <= DISPLAY[0] - 100
        assert 50 <= t.bounds.y <= DISPLAY[1] - 100


def test_fixed_orientation_policy(make_manager):
    manager = make_manager(orientation=Orientation.RIGHT)
    for _ in range(5):
        assert manager.replace_on_hit().orientation == Orientation.RIGHT


def test_random_orientation_draws_from_rng():
    assert random_orientation(StubRng(0), None) == Orientation.UP
    assert random_orientation(StubRng(3), Orientation.UP) == Orientation.RIGHT
    rng = np.random.default_rng(0)
    assert {random_orientation(rng, None) for _ in range(200)} == set(Orientation)


def test_fixed_orientation_ignores_rng():
    assert fixed_orientation(Orientation.DOWN)(ExplodingRng(), Orientation.UP) == Orientation.DOWN


@pytest.mark.parametrize("kwargs", [
    {"size": 0},
    {"margin": -1},
    {"timeout_frames": 0},
])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        TargetManager(np.random.default_rng(0), *DISPLAY, **kwargs)


def test_missing_target_fails_fast(make_manager):
    manager = make_manager()
    manager._target = None
    with pytest.raises(TargetInvariantError):
        manager.current
    with pytest.raises(TargetInvariantError):
        manager.tick()
    with pytest.raises(TargetInvariantError):
        manager.replace_on_hit()
