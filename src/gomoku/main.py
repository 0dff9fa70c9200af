from __future__ import annotations

import argparse
import logging

from gomoku.config import LOG_LEVEL, SHOW_SCORES
from gomoku.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Gomoku (five in a row) against a heuristic AI.")
    ap.add_argument("--seed", type=int, default=None, help="Seed the AI tie-break RNG for reproducible games")
    ap.add_argument("--show-scores", action="store_true", default=SHOW_SCORES, help="Overlay the AI's score grid")
    ap.add_argument("--ai-first", action="store_true", help="Let the AI (Black) move first")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_menu(seed=args.seed, show_scores=args.show_scores, ai_first=args.ai_first)


if __name__ == "__main__":
    main()
