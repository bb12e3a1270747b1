import unittest

import pygame

from tetris_game import Command
from tetris_input import KeyboardInput


def key(k, kind=pygame.KEYDOWN):
    return pygame.event.Event(kind, key=k)


class KeyboardInputTests(unittest.TestCase):
    def setUp(self):
        self.sent = []
        self.keyboard = KeyboardInput(self.sent.append)

    def test_arrows(self):
        for k in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_DOWN, pygame.K_UP):
            self.keyboard.handle_event(key(k))
        self.assertEqual(self.sent, [Command.MOVE_LEFT, Command.MOVE_RIGHT,
                                     Command.SOFT_DROP, Command.ROTATE])

    def test_game_controls(self):
        for k in (pygame.K_RETURN, pygame.K_p, pygame.K_r):
            self.keyboard.handle_event(key(k))
        self.assertEqual(self.sent, [Command.START, Command.TOGGLE_PAUSE, Command.RESTART])

    def test_key_up_and_unbound_keys_ignored(self):
        self.assertIsNone(self.keyboard.handle_event(key(pygame.K_LEFT, pygame.KEYUP)))
        self.assertIsNone(self.keyboard.handle_event(key(pygame.K_q)))
        self.assertEqual(self.sent, [])

    def test_unbind_removes_only_own_handler(self):
        other_sent = []
        other = KeyboardInput(other_sent.append)
        handlers = []
        self.keyboard.bind(handlers)
        other.bind(handlers)
        self.keyboard.unbind(handlers)
        self.assertEqual(len(handlers), 1)
        for h in handlers:
            h(key(pygame.K_UP))
        self.assertEqual(self.sent, [])
        self.assertEqual(other_sent, [Command.ROTATE])


if __name__ == "__main__":
    unittest.main()
