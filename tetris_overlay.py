
import pygame

from tetris_game import Phase

MESSAGES = {
    Phase.NOT_STARTED: "Press Enter",
    Phase.PAUSED: "Paused",
    Phase.GAME_OVER: "Game Over",
}


class Overlay:
    """Veil and message drawn over the board for every phase but RUNNING."""
    def __init__(self, font: pygame.font.Font):
        self.font = font

    def draw(self, screen: pygame.Surface, phase: Phase) -> None:
        msg = MESSAGES.get(phase)
        if msg is None:
            return
        w, h = screen.get_size()
        s = pygame.Surface((w, h), pygame.SRCALPHA)
        s.fill((0, 0, 0, 128))
        screen.blit(s, (0, 0))
        text = self.font.render(msg, True, (255, 255, 255))
        screen.blit(text, text.get_rect(center=(w // 2, h // 2)))
