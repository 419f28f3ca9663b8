from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

from core.config import SimulationConfig
from core.engine import Engine
from metrics.hash import RunHash
from metrics.logger import JsonlLogger
from metrics.schema import SCHEMA_VERSION


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless creature simulation runner")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--ticks", type=int, default=200)
    parser.add_argument("--creatures", type=int)
    parser.add_argument("--out", type=str, required=False)
    parser.add_argument("--config", type=str, help="Path to JSON simulation config")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig.from_json(args.config) if args.config else SimulationConfig()
    overrides: Dict[str, Any] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.creatures is not None:
        overrides["creatures"] = args.creatures
    return replace(config, **overrides) if overrides else config


def run(config: SimulationConfig, ticks: int, outdir: Path) -> Dict[str, Any]:
    engine = Engine(config)

    outdir.mkdir(parents=True, exist_ok=True)
    tick_path = outdir / "ticks.jsonl"
    summary_path = outdir / "summary.json"

    rh = RunHash()
    reproduction_intents = 0
    ticks_run_actual = 0
    with JsonlLogger(tick_path) as logger:
        for _ in range(ticks):
            if not engine.world.creatures:
                break
            rows = engine.run(1)
            ticks_run_actual += 1
            for row in rows:
                logger.write_tick(row)
                rh.update(row)
                reproduction_intents += int(row.reproduction_will)

    world = engine.world
    summary = {
        "seed": config.seed,
        "ticks_requested": ticks,
        "ticks_run": ticks_run_actual,
        "population_start": config.creatures,
        "population_end": len(world.creatures),
        "births": world.births,
        "deaths": world.deaths,
        "reproduction_intents": reproduction_intents,
        "max_generation": max((c.generation for c in world.creatures), default=0),
        "schema_version": SCHEMA_VERSION,
        "run_hash": rh.hexdigest(),
        "config": config.to_dict(),
    }
    summary_path.write_text(json.dumps(summary, sort_keys=True, separators=(",", ":")))
    return summary


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"Invalid config: {exc}") from exc
    if args.ticks < 0:
        raise SystemExit("--ticks must be non-negative")
    outdir = Path(args.out) if args.out else Path(f"runs/seed_{config.seed}")
    summary = run(config, args.ticks, outdir)
    print(
        f"Ran {summary['ticks_run']} ticks: population {summary['population_start']} -> "
        f"{summary['population_end']}, run_hash={summary['run_hash']}"
    )


if __name__ == "__main__":
    main()
