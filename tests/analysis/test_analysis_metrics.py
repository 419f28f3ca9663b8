import json

import pytest

from analysis.extract import load_ticks, ticks_frame
from analysis.metrics import (
    energy_stats,
    hue_stats,
    memory_activity,
    population_over_time,
    reproduction_rate,
    run_all_metrics,
)
from analysis.report import generate_report
from core.config import SimulationConfig
from core.engine import Engine
from experiments.runner import run


def small_config(**overrides):
    values = dict(creatures=3, width_tiles=4, height_tiles=4, tile_size=10.0, hidden_layers=(4,))
    values.update(overrides)
    return SimulationConfig(**values)


@pytest.fixture
def ticks_df():
    trace = Engine(small_config()).run(6)
    return ticks_frame([t.to_ordered_dict() for t in trace])


def test_ticks_frame_flattens_pairs_and_memory(ticks_df):
    for column in ["x", "y", "vx", "vy", "fx", "fy", "memory_0", "memory_4"]:
        assert column in ticks_df.columns
    for column in ["pos", "velocity", "force", "memory"]:
        assert column not in ticks_df.columns
    assert len(ticks_df) == 18


def test_population_and_energy(ticks_df):
    population = population_over_time(ticks_df)
    assert population.tolist() == [3] * 6
    energy = energy_stats(ticks_df)
    assert list(energy.index) == [0, 1, 2]
    assert (energy["min"] <= energy["max"]).all()


def test_rates_and_hue(ticks_df):
    assert 0.0 <= reproduction_rate(ticks_df) <= 1.0
    hue = hue_stats(ticks_df)
    assert hue["out_of_range"] == 0
    assert hue["min"] <= hue["mean"] <= hue["max"]


def test_memory_activity_has_one_entry_per_slot(ticks_df):
    activity = memory_activity(ticks_df)
    assert sorted(activity) == [f"memory_{i}" for i in range(5)]
    assert all(v >= 0.0 for v in activity.values())


def test_empty_frames_are_handled():
    empty = ticks_frame([])
    assert run_all_metrics(empty)["rows"] == 0
    assert hue_stats(empty) == {}
    assert reproduction_rate(empty) == 0.0


def test_load_ticks_and_report_from_run(tmp_path):
    run(small_config(), ticks=4, outdir=tmp_path)
    df = load_ticks(tmp_path / "ticks.jsonl")
    assert len(df) == 12

    report = generate_report(tmp_path, tmp_path / "report")
    assert report["rows"] == 12
    assert report["peak_population"] == 3
    assert "population.png" in report["plots"]
    saved = json.loads((tmp_path / "report" / "report.json").read_text())
    assert saved["summary"]["ticks_run"] == 4
    assert len(saved["energy"]) == 3


def test_load_ticks_missing_file(tmp_path):
    assert load_ticks(tmp_path / "nope.jsonl").empty
