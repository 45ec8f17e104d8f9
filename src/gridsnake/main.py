# main.py
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import Config
from .loop import GameLoop, PygameTimer
from .render import Renderer
from .storage import HighScoreStore, MemoryStore

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> Config:
    cfg = Config.reduced() if args.profile == "reduced" else Config.classic()
    overrides = {}
    if args.tick_ms is not None:
        overrides["tick_ms"] = args.tick_ms
    if args.grid:
        overrides["draw_grid"] = True
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.high_score_file is not None:
        overrides["high_score_path"] = args.high_score_file
    return replace(cfg, **overrides).validate()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake on a 500x500 canvas.")
    parser.add_argument(
        "--profile",
        type=str,
        default="classic",
        choices=["classic", "reduced"],
        help=(
            "classic: bite check, restart, high score, optional grid\n"
            "reduced: wall-only deaths, wider margin, one session"
        ),
    )
    parser.add_argument("--tick-ms", type=int, default=None, help="ms between steps (default 200)")
    parser.add_argument("--grid", action="store_true", help="draw grid lines")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--high-score-file",
        type=str,
        default=None,
        help="JSON file holding the high score (default ./high_score.json)",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)

    if cfg.persist_high_score:
        store = HighScoreStore(cfg.high_score_path, cfg.storage_key)
    else:
        store = MemoryStore()

    pygame.init()
    clock = pygame.time.Clock()
    timer = PygameTimer()
    rng = np.random.default_rng(cfg.seed)

    try:
        with Renderer(cfg) as renderer, GameLoop(
            cfg, timer, store, rng=rng,
            on_frame=renderer.frame,
            on_game_over=renderer.game_over,
        ) as loop:
            loop.start()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        loop.handle_key(pygame.key.name(event.key))
                    else:
                        timer.dispatch(event)
                clock.tick(60)  # idle pacing; movement is driven by the timer
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
