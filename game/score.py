# game/score.py


class ScoreTracker:
    """Hit counter. Only ever goes up by one."""

    def __init__(self):
        self._score = 0

    def record_hit(self) -> int:
        self._score += 1
        return self._score

    def current(self) -> int:
        return self._score
