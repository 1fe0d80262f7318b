# main.py
from __future__ import annotations
import argparse
import random
import sys
from dataclasses import replace
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, CAPTION, CFG, Config
from .game import GameContext, GameState
from .controls import handle_events
from .render import Renderer, load_font
from .autopilot import choose_direction


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rnake", description="Classic grid snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (same seed, same food sequence)")
    parser.add_argument("--fps", type=_positive_int, default=CFG.fps,
                        help="frames rendered per second")
    parser.add_argument("--tick-every", type=_positive_int, default=CFG.tick_every,
                        help="advance the snake once every N frames")
    parser.add_argument("--font", type=str, default=CFG.font_path,
                        help="path to a .ttf/.otf for the overlay text (default: pygame's font)")
    parser.add_argument(
        "--autopilot",
        action="store_true",
        help="let a greedy bot steer; keys still pause/restart/quit",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return replace(
        CFG,
        seed=args.seed,
        fps=args.fps,
        tick_every=args.tick_every,
        font_path=args.font,
    )


def run(cfg: Config, autopilot: bool = False) -> None:
    """Open the window and play until quit. pygame errors propagate."""
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(CAPTION)
    renderer = Renderer(screen, load_font(cfg.font_path, cfg.font_size))
    clock = pygame.time.Clock()

    ctx = GameContext(random.Random(cfg.seed))
    frame = 0
    running = True

    while running:
        # 1) input
        running = handle_events(ctx, pygame.event.get())
        if not running:
            break

        # 2) update, decoupled from the frame rate
        frame += 1
        if frame % cfg.tick_every == 0:
            frame = 0
            if autopilot and ctx.state is GameState.PLAYING:
                ctx.steer(choose_direction(ctx.snapshot()))
            was_playing = ctx.state is GameState.PLAYING
            ctx.tick()
            if was_playing and ctx.state is GameState.OVER:
                print(f"[RNAKE] Game over, score={ctx.score}. Press R to restart.")

        # 3) render
        renderer.draw(ctx.snapshot())
        pygame.display.flip()
        clock.tick(cfg.fps)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = config_from_args(args)
    print(
        f"[RNAKE] Starting: fps={cfg.fps} tick_every={cfg.tick_every} "
        f"seed={cfg.seed} autopilot={args.autopilot}"
    )
    try:
        run(cfg, autopilot=args.autopilot)
    except (pygame.error, OSError) as e:
        print(f"[RNAKE] Fatal: {e}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
