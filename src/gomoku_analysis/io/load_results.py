from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


NUMERIC_COLS = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "forcing",
]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    numeric_cols: tuple[str, ...] = tuple(NUMERIC_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    if "name" not in df.columns:
        raise ValueError(f"CSV missing required column 'name'. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, spec.numeric_cols)

    df["name"] = df["name"].astype(str)
    df = df[df["name"].str.len() > 0].copy()

    # Derived: how often a move was a forced four (win or block)
    if "forcing" in df.columns and "moves" in df.columns:
        df["forcing_rate"] = (df["forcing"] / df["moves"].where(df["moves"] > 0)).fillna(0.0)

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "series_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
