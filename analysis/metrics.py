import math
from typing import Dict

import pandas as pd


def population_over_time(ticks_df: pd.DataFrame) -> pd.Series:
    """Number of creatures that thought at each tick."""
    if ticks_df.empty or "tick" not in ticks_df.columns:
        return pd.Series(dtype="int64")
    return ticks_df.groupby("tick")["creature_id"].nunique()


def energy_stats(ticks_df: pd.DataFrame) -> pd.DataFrame:
    """Per-creature energy statistics."""
    if ticks_df.empty or "energy" not in ticks_df.columns:
        return pd.DataFrame()
    return ticks_df.groupby("creature_id")["energy"].agg(["mean", "min", "max", "last"])


def reproduction_rate(ticks_df: pd.DataFrame) -> float:
    """Fraction of think-cycles that ended with a will to reproduce."""
    if ticks_df.empty or "reproduction_will" not in ticks_df.columns:
        return 0.0
    return float(ticks_df["reproduction_will"].astype(float).mean())


def hue_stats(ticks_df: pd.DataFrame) -> Dict[str, float]:
    """Statistics of decided hues, in radians."""
    if ticks_df.empty or "hue" not in ticks_df.columns:
        return {}
    hue = ticks_df["hue"]
    return {
        "mean": float(hue.mean()),
        "std": float(hue.std()) if len(hue) > 1 else 0.0,
        "min": float(hue.min()),
        "max": float(hue.max()),
        # decoded hues outside [-pi, pi] mean the network emitted values outside [0, 1]
        "out_of_range": int(((hue < -math.pi) | (hue > math.pi)).sum()),
    }


def memory_activity(ticks_df: pd.DataFrame) -> Dict[str, float]:
    """Mean absolute change of each memory slot between consecutive ticks of a creature."""
    columns = sorted(c for c in ticks_df.columns if c.startswith("memory_"))
    if ticks_df.empty or not columns:
        return {}
    ordered = ticks_df.sort_values(["creature_id", "tick"])
    deltas = ordered.groupby("creature_id")[columns].diff().abs()
    return {c: float(deltas[c].mean()) if deltas[c].notna().any() else 0.0 for c in columns}


def run_all_metrics(ticks_df: pd.DataFrame) -> Dict:
    population = population_over_time(ticks_df)
    return {
        "rows": int(len(ticks_df)),
        "ticks": int(population.size),
        "peak_population": int(population.max()) if not population.empty else 0,
        "creatures_seen": int(ticks_df["creature_id"].nunique()) if not ticks_df.empty else 0,
        "reproduction_rate": reproduction_rate(ticks_df),
        "hue": hue_stats(ticks_df),
        "memory_activity": memory_activity(ticks_df),
    }
