from tetris_rng import PieceRandom


class FixedRandom(PieceRandom):
    """Always the same shape index and color."""
    def __init__(self, shape=0, color=1):
        super().__init__(0)
        self.shape = shape
        self.color = color

    def choose_shape(self, count):
        return self.shape

    def choose_color(self, palette_size):
        return self.color


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, game):
        self.frames.append(game.phase)
