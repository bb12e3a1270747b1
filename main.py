
import argparse
import logging
import sys

import pygame

from tetris_config import ConfigError, make_config
from tetris_game import Game
from tetris_input import KeyboardInput
from tetris_layout import compute_dims
from tetris_loop import FrameScheduler
from tetris_render import Renderer
from tetris_rng import PieceRandom

log = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Canvas Tetris")
    p.add_argument("--width", type=int, dest="CANVAS_WIDTH", help="canvas width in pixels (default: 300)")
    p.add_argument("--height", type=int, dest="CANVAS_HEIGHT", help="canvas height in pixels (default: 600)")
    p.add_argument("--block", type=int, dest="BLOCK_SIZE", help="block size in pixels (default: 30)")
    p.add_argument("--drop-interval", type=int, dest="DROP_INTERVAL_MS",
                   help="milliseconds between automatic drops (default: 1000)")
    p.add_argument("--fps", type=int, dest="TARGET_FPS", help="frame rate (default: 60)")
    p.add_argument("--seed", type=int, dest="SEED", help="seed for reproducible piece order")
    p.add_argument("--log-level", dest="LOG_LEVEL", help="logging level (default: INFO)")
    args = p.parse_args(argv)
    try:
        return make_config(**vars(args))
    except ConfigError as e:
        p.error(str(e))


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(level=cfg["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    dims = compute_dims(cfg)
    screen = pygame.display.set_mode((dims.width, dims.height))
    pygame.display.set_caption("Tetris")
    log.info("board %dx%d, drop interval %d ms", dims.cols, dims.rows, cfg["DROP_INTERVAL_MS"])

    rng = PieceRandom(cfg["SEED"])
    log.info("piece seed %d (replay with --seed %d)", rng.seed, rng.seed)

    scheduler = FrameScheduler()
    game = Game(
        dims.rows, dims.cols,
        drop_interval_ms=cfg["DROP_INTERVAL_MS"],
        renderer=Renderer(screen, dims),
        scheduler=scheduler,
        clock=pygame.time.get_ticks,
        rng=rng,
    )
    handlers = []
    keyboard = KeyboardInput(game.dispatch)
    keyboard.bind(handlers)

    clock = pygame.time.Clock()
    game.renderer.draw(game)
    running = True
    while running:
        clock.tick(cfg["TARGET_FPS"])
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            for handler in list(handlers):
                handler(event)
        scheduler.run_pending()

    keyboard.unbind(handlers)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
