import argparse
import json
from pathlib import Path

import pandas as pd

TUPLE_COLUMNS = {"pos": ("x", "y"), "velocity": ("vx", "vy"), "force": ("fx", "fy")}


def ticks_frame(rows: list) -> pd.DataFrame:
    """
    Builds a flat DataFrame from TickData dicts.
    Pair columns (pos, velocity, force) are split into scalar columns and the
    memory list into memory_0..memory_{N-1}.
    """
    if not rows:
        return pd.DataFrame()
    df = pd.DataFrame(rows)
    for column, (a, b) in TUPLE_COLUMNS.items():
        if column in df.columns:
            df[a] = df[column].map(lambda v: v[0])
            df[b] = df[column].map(lambda v: v[1])
            df = df.drop(columns=[column])
    if "memory" in df.columns:
        memory = pd.DataFrame(df["memory"].tolist(), index=df.index)
        memory.columns = [f"memory_{i}" for i in memory.columns]
        df = pd.concat([df.drop(columns=["memory"]), memory], axis=1)
    return df


def load_ticks(path: Path) -> pd.DataFrame:
    """Loads a run's ticks.jsonl."""
    path = Path(path)
    if not path.exists():
        return pd.DataFrame()
    with open(path, "r", encoding="utf-8") as f:
        rows = [json.loads(line) for line in f if line.strip()]
    return ticks_frame(rows)


def main():
    parser = argparse.ArgumentParser(description="Flatten a run's ticks.jsonl into a CSV table.")
    parser.add_argument("run_dir", type=Path, help="Directory of the run.")
    parser.add_argument("--output", type=Path, default=None, help="CSV path (default: <run_dir>/ticks.csv).")
    args = parser.parse_args()

    df = load_ticks(args.run_dir / "ticks.jsonl")
    output = args.output or args.run_dir / "ticks.csv"
    df.to_csv(output, index=False)
    print(f"Ticks table saved to {output} ({len(df)} rows)")


if __name__ == "__main__":
    main()
