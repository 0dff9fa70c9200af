from __future__ import annotations

import argparse
import csv
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from itertools import combinations
from pathlib import Path
from typing import Dict, List, Sequence

from .series_format import A, hr
from .series_play import add_result, add_stats, run_pairing
from .series_scoring import avg_ms_per_move, ppg, strength_score
from .series_types import Agg, Team

log = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "forcing",
]


def build_roster() -> List[Team]:
    from gomoku.ai.heuristic_agent import HeuristicAgent
    from gomoku.ai.random_agent import RandomAgent

    teams: List[Team] = []
    for seed in [0, 1]:
        teams.append(Team(f"Random seed{seed}", partial(RandomAgent, name=f"Random seed{seed}", seed=seed)))
    for seed in [0, 1, 2]:
        teams.append(Team(f"Heuristic seed{seed}", partial(HeuristicAgent, name=f"Heuristic seed{seed}", seed=seed)))
    return teams


def run_series(
    roster: Sequence[Team],
    *,
    games_per_pair: int = 2,
    seed: int = 1234,
    board_size: int | None = None,
    max_workers: int | None = None,
) -> Dict[str, Agg]:
    """Round robin: every pair of teams plays `games_per_pair` games, colours alternating."""
    agg: Dict[str, Agg] = {t.name: Agg() for t in roster}

    items = []
    for i, (a, b) in enumerate(combinations(roster, 2)):
        items.append((a.name, b.name, a.make, b.make, games_per_pair, seed + 1000 * i, board_size))

    if max_workers and max_workers > 1:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            batches = list(ex.map(run_pairing, items))
    else:
        batches = [run_pairing(it) for it in items]

    for results in batches:
        for (a_name, b_name, a_is_black, outcome, stats) in results:
            add_result(agg[a_name], agg[b_name], outcome, a_is_black)
            a_side, b_side = ("B", "W") if a_is_black else ("W", "B")
            add_stats(agg[a_name], stats[a_side])
            add_stats(agg[b_name], stats[b_side])
            log.debug("%s vs %s (a black=%s): %s", a_name, b_name, a_is_black, outcome)

    return agg


def ranking(agg: Dict[str, Agg], z: float) -> List[tuple[str, Agg]]:
    return sorted(agg.items(), key=lambda kv: (-strength_score(kv[1], z), avg_ms_per_move(kv[1])))


def print_table(agg: Dict[str, Agg], z: float) -> None:
    print("\n" + A.bold("Series results"))
    print(A.dim(hr("═")))
    print(f"{'rk':>3}  {'name':<22} {'W-D-L':>9} {'ppg':>6} {'lcb':>6} {'ms/mv':>7}")
    print(A.dim(hr()))
    for rk, (name, a) in enumerate(ranking(agg, z), start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{rk:>3}  {name:<22} {wdl:>9} {ppg(a):>6.3f} "
            f"{strength_score(a, z):>6.3f} {avg_ms_per_move(a):>7.1f}"
        )


def export_csv(agg: Dict[str, Agg], out_path: Path, z: float) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in ranking(agg, z):
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.forcing,
            ])
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a headless Gomoku round robin and export results.")
    ap.add_argument("--games", type=int, default=2, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for openings and agent RNGs")
    ap.add_argument("--board-size", type=int, default=None, help="Override the board size")
    ap.add_argument("--workers", type=int, default=None, help="Process pool size (default: run inline)")
    ap.add_argument("--z", type=float, default=1.28, help="Z for Wilson LCB")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where series_results_*.csv goes")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    roster = build_roster()
    print(A.bold(f"Roster size: {len(roster)} teams"))

    start = time.perf_counter()
    agg = run_series(
        roster,
        games_per_pair=args.games,
        seed=args.seed,
        board_size=args.board_size,
        max_workers=args.workers,
    )
    elapsed = time.perf_counter() - start

    print_table(agg, args.z)

    if not args.no_csv:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = export_csv(agg, Path(args.results_dir) / f"series_results_{ts}.csv", args.z)
        print(f"\nWrote CSV: {out_path}")

    print(A.bold(f"Total runtime: {elapsed:.3f}s"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
