from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "forcing_rate",
    "wins",
    "points",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games].copy()
    return out


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)

    # lower is better only for avg_ms_per_move
    ascending = (cfg.metric == "avg_ms_per_move")
    out = out.sort_values(cfg.metric, ascending=ascending)

    cols = [
        "name",
        "games", "wins", "draws", "losses",
        "ppg",
        "strength_wilson_lcb",
        "avg_ms_per_move",
        "forcing_rate",
        "points",
    ]
    keep = [c for c in cols if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T


def family_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Group agents by the first word of their name (Heuristic, Random, ...)."""
    _require_cols(df, ["name", "games", "points"])
    fam = df.assign(family=df["name"].str.split().str[0])
    out = fam.groupby("family", as_index=False)[["games", "points"]].sum()
    out["ppg"] = out["points"] / out["games"].where(out["games"] > 0)
    return out.sort_values("ppg", ascending=False).reset_index(drop=True)
