from __future__ import annotations

import time

from gomoku.ai.heuristic_agent import HeuristicAgent
from gomoku.game.controller import run_game
from gomoku.types import ATTACKER, DEFENDER
from gomoku.ui.human import HumanAgent


def _again() -> bool:
    return input("\nPlay again? [y/N]: ").strip().lower() in {"y", "yes"}


def run_menu(seed: int | None = None, show_scores: bool = False, ai_first: bool = False) -> None:
    print("Select mode:")
    print("1) Human vs AI")
    print("2) AI vs AI (watch)")
    print("3) Run AI series (headless round robin)")

    choice = input("Choice: ").strip()
    first = ATTACKER if ai_first else DEFENDER

    if choice == "2":
        while True:
            black = HeuristicAgent(name="Heuristic (Black)", seed=seed)
            white = HeuristicAgent(name="Heuristic (White)", seed=None if seed is None else seed + 1)
            print(f"\nStarting game: {black.name} vs {white.name}\n")
            time.sleep(1)
            run_game(black, white, show_scores=show_scores, first=first)
            if not _again():
                return

    if choice == "3":
        from gomoku.scripts.series import main as series_main

        series_main([])
        return

    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs AI.\n")
        time.sleep(1)

    while True:
        ai = HeuristicAgent(seed=seed)
        human = HumanAgent()
        print(f"\nStarting game: {human.name} (White) vs {ai.name} (Black)\n")
        time.sleep(1)
        outcome = run_game(ai, human, show_scores=show_scores, first=first)
        if outcome is None or not _again():
            return
