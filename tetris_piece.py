
"""Piece model, catalog shapes, palette, rotation"""
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from tetris_rng import PieceRandom

log = logging.getLogger(__name__)

Shape = Tuple[Tuple[int, ...], ...]

SHAPES: Tuple[Shape, ...] = (
    ((1, 1, 1, 1),),           # I
    ((1, 1), (1, 1)),          # O
    ((0, 1, 0), (1, 1, 1)),    # T
    ((1, 0), (1, 0), (1, 1)),  # L
    ((0, 1), (0, 1), (1, 1)),  # J
    ((1, 1, 0), (0, 1, 1)),    # S
    ((0, 1, 1), (1, 1, 0)),    # Z
)

PALETTE: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0),        # background
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (255, 165, 0),
)


def rotate_cw(m: Shape) -> Shape:
    return tuple(
        tuple(m[r][i] for r in range(len(m) - 1, -1, -1))
        for i in range(len(m[0]))
    )


@dataclass
class Piece:
    shape: Shape
    x: int
    y: int
    color: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Absolute (col, row) of every set cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r


def spawn_random_piece(cols: int, rng: PieceRandom,
                       shapes: Sequence[Shape] = SHAPES,
                       palette_size: int = len(PALETTE)) -> Optional[Piece]:
    if not shapes:
        log.warning("piece catalog is empty, nothing to spawn")
        return None
    shape = shapes[rng.choose_shape(len(shapes))]
    color = rng.choose_color(palette_size)
    return Piece(shape, (cols - len(shape[0])) // 2, 0, color)
