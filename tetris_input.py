
"""Keyboard adapter: one key-down, one command"""
from typing import Callable, List, Optional

import pygame

from tetris_game import Command

KEY_BINDINGS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_SPACE: Command.START,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
}

EventHandler = Callable[[pygame.event.Event], Optional[Command]]


class KeyboardInput:
    def __init__(self, dispatch: Callable[[Command], None], bindings=None):
        self.dispatch = dispatch
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def handle_event(self, event: pygame.event.Event) -> Optional[Command]:
        if event.type != pygame.KEYDOWN:
            return None
        command = self.bindings.get(event.key)
        if command is not None:
            self.dispatch(command)
        return command

    def bind(self, handlers: List[EventHandler]) -> None:
        handlers.append(self.handle_event)

    def unbind(self, handlers: List[EventHandler]) -> None:
        # bound methods compare equal per instance, so only ours goes
        if self.handle_event in handlers:
            handlers.remove(self.handle_event)
