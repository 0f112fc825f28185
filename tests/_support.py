# tests/_support.py

from backend.board import generate_board


class ScriptedRandom:
    """Random source that hands out a fixed sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside range({n})"
        self.calls += 1
        return value


def board_with_mines(width, height, mines):
    """Generate a board whose mines sit exactly at the given (x, y) coordinates."""
    script = [v for x, y in mines for v in (x, y)]
    return generate_board(width, height, len(mines), ScriptedRandom(script))


class RecordingRenderer:
    """Renderer that remembers what each frame would have shown."""

    def __init__(self):
        self.frames = []

    def render(self, board, origin, cursor, outcome):
        self.frames.append({
            "origin": origin,
            "cursor": cursor,
            "outcome": outcome,
            "hidden": board.hidden_count,
        })
