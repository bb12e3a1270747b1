
"""Board helpers: collide, merge, sweep, scoring"""
from typing import List

from tetris_piece import Piece

Grid = List[List[int]]

# indexed by lines cleared - 1
LINE_REWARDS = (40, 100, 300, 1200)


def new_grid(rows: int, cols: int) -> Grid:
    return [[0] * cols for _ in range(rows)]


def collide(grid: Grid, piece: Piece) -> bool:
    rows, cols = len(grid), len(grid[0])
    for bx, by in piece.cells():
        if bx < 0 or bx >= cols or by >= rows:
            return True
        if by >= 0 and grid[by][bx]:
            return True
    return False


def merge(grid: Grid, piece: Piece) -> None:
    """Write the piece into the grid; cells above the top are dropped."""
    for bx, by in piece.cells():
        if by >= 0:
            grid[by][bx] = piece.color


def sweep(grid: Grid) -> int:
    """Clear full rows bottom-up and return how many went."""
    cols = len(grid[0])
    c = 0
    y = len(grid) - 1
    while y >= 0:
        if all(grid[y]):
            del grid[y]
            grid.insert(0, [0] * cols)
            c += 1
        else:
            y -= 1
    return c


def line_reward(cleared: int) -> int:
    if cleared == 0:
        return 0
    if not 1 <= cleared <= len(LINE_REWARDS):
        raise ValueError(f"no reward defined for {cleared} lines")
    return LINE_REWARDS[cleared - 1]
