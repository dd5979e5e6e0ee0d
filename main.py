# main.py
import argparse
import logging

from config import AppConfig

DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--grid-w", type=int, default=DEFAULTS.grid_w)
    p.add_argument("--grid-h", type=int, default=DEFAULTS.grid_h)
    p.add_argument("--start-len", type=int, default=DEFAULTS.start_len)
    p.add_argument("--fps", type=int, default=DEFAULTS.fps)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--bounded", action="store_true", help="walls end the game instead of wrapping")
    p.add_argument("--games", type=int, default=1, help="headless only")
    p.add_argument("--ticks", type=int, default=1000, help="headless only: tick limit per game")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        start_len=args.start_len,
        fps=args.fps,
        seed=args.seed,
        wrap=not args.bounded,
    )

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    if args.mode == "play":
        from runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from runners.run_headless import main as headless
        headless(cfg, games=args.games, max_ticks=args.ticks)

if __name__ == "__main__":
    main()
