
"""Game state machine: phases, commands, gravity, landing"""
from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Callable, Optional, Protocol, Sequence

from tetris_board import Grid, collide, line_reward, merge, new_grid, sweep
from tetris_config import CONFIG
from tetris_loop import FrameScheduler
from tetris_piece import PALETTE, SHAPES, Piece, Shape, rotate_cw, spawn_random_piece
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE = auto()
    START = auto()
    PAUSE = auto()
    RESUME = auto()
    TOGGLE_PAUSE = auto()
    RESTART = auto()


class Descent(Enum):
    MOVED = auto()
    LANDED = auto()


class Renderer(Protocol):
    def draw(self, game: "Game") -> None: ...


def descend(grid: Grid, piece: Piece) -> Descent:
    """Move the piece one row down, or leave it where it is if it landed."""
    piece.y += 1
    if collide(grid, piece):
        piece.y -= 1
        return Descent.LANDED
    return Descent.MOVED


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Game:
    """
    One board, one falling piece, one score.

    The game never loops by itself: while RUNNING, every tick() asks the
    scheduler for exactly one more frame, and pause, game over and reset
    cancel whatever frame is still outstanding. The renderer is only ever
    asked to draw; it reads grid, piece, score and phase back from here.
    """
    def __init__(self, rows: int, cols: int,
                 drop_interval_ms: int = CONFIG["DROP_INTERVAL_MS"],
                 renderer: Optional[Renderer] = None,
                 scheduler: Optional[FrameScheduler] = None,
                 clock: Optional[Callable[[], float]] = None,
                 rng: Optional[PieceRandom] = None,
                 shapes: Sequence[Shape] = SHAPES,
                 palette_size: int = len(PALETTE)):
        self.rows = rows
        self.cols = cols
        self.drop_interval_ms = drop_interval_ms
        self.renderer = renderer
        self.scheduler = scheduler
        self.clock = clock or _monotonic_ms
        self.rng = rng or PieceRandom()
        self.shapes = tuple(shapes)
        self.palette_size = palette_size

        self.grid: Grid = []
        self.piece: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.phase = Phase.NOT_STARTED
        self.last_move = 0.0
        self._frame: Optional[int] = None
        self.reset()

    # ----- lifecycle -----
    def reset(self) -> None:
        self._cancel_frame()
        self.grid = new_grid(self.rows, self.cols)
        self.score = 0
        self.lines = 0
        self.piece = self._spawn()
        self.last_move = self.clock()
        self._set_phase(Phase.NOT_STARTED)

    def start(self) -> None:
        if self.phase is Phase.GAME_OVER:
            self.reset()
        if self.phase is Phase.RUNNING:
            return
        if self.piece is not None and collide(self.grid, self.piece):
            # the fresh piece doesn't even fit
            self._game_over()
            self._redraw()
            return
        self._set_phase(Phase.RUNNING)
        self.last_move = self.clock()
        self._schedule()
        self._redraw()

    def pause(self) -> None:
        if self.phase is not Phase.RUNNING:
            return
        self._set_phase(Phase.PAUSED)
        self._cancel_frame()
        self._redraw()

    def resume(self) -> None:
        if self.phase is not Phase.PAUSED:
            return
        self._set_phase(Phase.RUNNING)
        self.last_move = self.clock()
        self._schedule()
        self._redraw()

    def toggle_pause(self) -> None:
        if self.phase is Phase.RUNNING:
            self.pause()
        else:
            self.resume()

    def restart(self) -> None:
        self.reset()
        self.start()

    # ----- per frame -----
    def tick(self) -> None:
        if self.phase is not Phase.RUNNING:
            return
        now = self.clock()
        if now - self.last_move > self.drop_interval_ms:
            self._descend()
            self.last_move = now
        self._redraw()
        if self.phase is Phase.RUNNING:
            self._schedule()

    # ----- player commands -----
    def move_left(self) -> None:
        self._shift(-1)

    def move_right(self) -> None:
        self._shift(1)

    def rotate(self) -> None:
        if not self._can_act():
            return
        old = self.piece.shape
        self.piece.shape = rotate_cw(old)
        if collide(self.grid, self.piece):
            self.piece.shape = old
        self._redraw()

    def soft_drop(self) -> None:
        if not self._can_act():
            return
        self._descend()
        self._redraw()

    def dispatch(self, command: Command) -> None:
        handler = {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE: self.rotate,
            Command.START: self.start,
            Command.PAUSE: self.pause,
            Command.RESUME: self.resume,
            Command.TOGGLE_PAUSE: self.toggle_pause,
            Command.RESTART: self.restart,
        }[command]
        handler()

    # ----- internals -----
    def _can_act(self) -> bool:
        return self.phase is Phase.RUNNING and self.piece is not None

    def _shift(self, dx: int) -> None:
        if not self._can_act():
            return
        self.piece.x += dx
        if collide(self.grid, self.piece):
            self.piece.x -= dx
        self._redraw()

    def _descend(self) -> Optional[Descent]:
        if self.piece is None:
            return None
        result = descend(self.grid, self.piece)
        if result is Descent.LANDED:
            self._land()
        return result

    def _land(self) -> None:
        merge(self.grid, self.piece)
        cleared = sweep(self.grid)
        if cleared:
            self.score += line_reward(cleared)
            self.lines += cleared
            log.debug("cleared %d line(s), score %d", cleared, self.score)
        self.piece = self._spawn()
        if self.piece is not None and collide(self.grid, self.piece):
            self._game_over()

    def _spawn(self) -> Optional[Piece]:
        piece = spawn_random_piece(self.cols, self.rng, self.shapes, self.palette_size)
        if piece is not None:
            log.debug("spawned %dx%d piece at x=%d color=%d",
                      piece.width, piece.height, piece.x, piece.color)
        return piece

    def _game_over(self) -> None:
        self._set_phase(Phase.GAME_OVER)
        self._cancel_frame()
        log.info("game over with score %d", self.score)

    def _set_phase(self, phase: Phase) -> None:
        if phase is not self.phase:
            log.info("phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def _schedule(self) -> None:
        if self.scheduler is None:
            return
        self._cancel_frame()
        self._frame = self.scheduler.request(self.tick)

    def _cancel_frame(self) -> None:
        if self.scheduler is not None and self._frame is not None:
            self.scheduler.cancel(self._frame)
        self._frame = None

    def _redraw(self) -> None:
        if self.renderer is not None:
            self.renderer.draw(self)
