# tetris_layout.py
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from tetris_config import CONFIG


@dataclass
class Dims:
    cell: int
    rows: int
    cols: int
    width: int
    height: int


def grid_size(width: int, height: int, block: int) -> Tuple[int, int]:
    """Rows and cols that fit a canvas of width x height pixels."""
    return height // block, width // block


def compute_dims(config: Dict[str, Any] = CONFIG) -> Dims:
    cell = int(config["BLOCK_SIZE"])
    rows, cols = grid_size(config["CANVAS_WIDTH"], config["CANVAS_HEIGHT"], cell)
    return Dims(
        cell=cell, rows=rows, cols=cols,
        width=config["CANVAS_WIDTH"], height=config["CANVAS_HEIGHT"],
    )
