from game.score import ScoreTracker


def test_score_starts_at_zero_and_counts_hits():
    score = ScoreTracker()
    assert score.current() == 0
    assert [score.record_hit() for _ in range(3)] == [1, 2, 3]
    assert score.current() == 3
