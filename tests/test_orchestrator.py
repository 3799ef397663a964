import pytest

from game.orchestrator import FrameOrchestrator, wrist_positions
from game.scene import Clear, FillRect, Text
from game.score import ScoreTracker
from gesture.types import BodyFrame, GestureEvent, GesturePhase, Orientation, SensorStatus

FAR = (400, 400)
DOWN_SWIPE = [(120, 50), (120, 120), (120, 200)]


@pytest.fixture
def orchestrator(make_manager, projector):
    return FrameOrchestrator(make_manager(100, 100, Orientation.DOWN), projector)


def frame(*bodies):
    return BodyFrame(bodies=tuple(bodies))


def test_empty_frame_only_ages_target(orchestrator):
    result = orchestrator.process_frame(frame())
    assert result.event == GestureEvent.NO_EVENT
    assert result.target.age_in_frames == 1
    assert result.score == 0
    assert result.respawned is None


def test_down_swipe_scores_and_respawns(orchestrator, make_body):
    first = orchestrator.current_target()
    results = [orchestrator.process_frame(frame(make_body(left=FAR, right=p))) for p in DOWN_SWIPE]

    assert [r.event for r in results] == [GestureEvent.NO_EVENT, GestureEvent.NO_EVENT, GestureEvent.HIT]
    hit = results[-1]
    assert hit.hit_orientation == Orientation.DOWN
    assert hit.hit_body == 0
    assert hit.respawned == "hit"
    assert hit.score == 1
    assert orchestrator.current_score() == 1
    new = orchestrator.current_target()
    assert new.serial == first.serial + 1
    assert new.age_in_frames == 0
    assert orchestrator.machines[0].phase(Orientation.DOWN) == GesturePhase.IDLE


def test_no_swipe_until_timeout_resets_gestures_and_keeps_score(orchestrator, make_body):
    orchestrator.process_frame(frame(make_body(right=(120, 50))))
    assert orchestrator.machines[0].phase(Orientation.DOWN) == GesturePhase.PRE_ZONE

    results = [orchestrator.process_frame(frame()) for _ in range(199)]
    assert results[-1].respawned == "timeout"
    assert all(r.respawned is None for r in results[:-1])
    assert orchestrator.current_target().age_in_frames == 0
    assert all(orchestrator.machines[0].phase(o) == GesturePhase.IDLE for o in Orientation)
    assert orchestrator.current_score() == 0


def test_no_hit_on_the_frame_the_target_times_out(make_manager, projector, make_body):
    orchestrator = FrameOrchestrator(make_manager(100, 100, Orientation.DOWN, timeout_frames=3), projector)
    results = [orchestrator.process_frame(frame(make_body(right=p))) for p in DOWN_SWIPE]

    assert results[-1].respawned == "timeout"
    assert results[-1].event == GestureEvent.NO_EVENT
    assert orchestrator.current_score() == 0
    assert orchestrator.machines[0].phase(Orientation.DOWN) == GesturePhase.IDLE


def test_respawn_frame_is_evaluated_when_skip_disabled(make_manager, projector, make_body):
    orchestrator = FrameOrchestrator(make_manager(100, 100, Orientation.DOWN, timeout_frames=2),
                                     projector, skip_gestures_on_respawn=False)
    orchestrator.process_frame(frame(make_body(right=(120, 50))))
    # second frame times out; the replacement sits at the same spot, so the new attempt starts here
    result = orchestrator.process_frame(frame(make_body(right=(120, 50))))
    assert result.respawned == "timeout"
    assert orchestrator.machines[0].phase(Orientation.DOWN) == GesturePhase.PRE_ZONE


def test_first_body_wins_a_tie(orchestrator, make_body):
    for p in DOWN_SWIPE:
        result = orchestrator.process_frame(frame(make_body(index=3, right=p), make_body(index=1, left=p)))
    assert result.event == GestureEvent.HIT
    assert result.hit_body == 3
    assert orchestrator.current_score() == 1
    assert orchestrator.machines[1].phase(Orientation.DOWN) == GesturePhase.IDLE


def test_bodies_keep_separate_progress(orchestrator, make_body):
    orchestrator.process_frame(frame(make_body(index=0, right=(120, 50)), make_body(index=1, right=FAR)))
    assert orchestrator.machines[0].phase(Orientation.DOWN) == GesturePhase.PRE_ZONE
    assert orchestrator.machines[1].phase(Orientation.DOWN) == GesturePhase.IDLE


def test_untracked_body_is_ignored(orchestrator, make_body):
    result = orchestrator.process_frame(frame(make_body(index=0, right=(120, 50), is_tracked=False)))
    assert orchestrator.machines == {}
    assert not [c for c in result.commands if c.__class__.__name__ == "Circle"]


def test_scene_order_and_score_text(orchestrator, make_body):
    orchestrator.sensor_status = SensorStatus.RUNNING
    for p in DOWN_SWIPE:
        result = orchestrator.process_frame(frame(make_body(right=p)))

    commands = result.commands
    assert isinstance(commands[0], Clear)
    assert commands[1] == FillRect(result.target.bounds, commands[1].color)
    texts = [c.text for c in commands if isinstance(c, Text)]
    assert texts == ["Score: 1", SensorStatus.RUNNING.value]


def test_restart_keeps_score_and_replaces_target(make_manager, projector, make_body):
    score = ScoreTracker()
    orchestrator = FrameOrchestrator(make_manager(100, 100, Orientation.DOWN), projector, score=score)
    for p in DOWN_SWIPE:
        orchestrator.process_frame(frame(make_body(right=p)))
    before = orchestrator.current_target()

    orchestrator.restart()
    assert orchestrator.current_score() == 1
    assert orchestrator.score is score
    assert orchestrator.current_target().serial == before.serial + 1

    for p in DOWN_SWIPE:
        orchestrator.process_frame(frame(make_body(right=p)))
    assert score.current() == 2


def test_wrist_positions_skip_untracked(projector, make_body):
    hands = wrist_positions(projector.project_body(make_body(left=None, right=(10, 20))))
    assert hands.left is None
    assert hands.right == pytest.approx((10, 20))
