import argparse
import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from analysis.extract import load_ticks  # noqa: E402
from analysis.metrics import energy_stats, population_over_time, run_all_metrics  # noqa: E402


def _json_default(obj):
    # numpy scalars from pandas aggregations
    if hasattr(obj, "item"):
        return obj.item()
    raise TypeError(f"Not JSON serializable: {type(obj)!r}")


def generate_report(run_dir: Path, report_dir: Path) -> dict:
    """
    Writes report.json and plots for a run directory.
    """
    report_dir.mkdir(parents=True, exist_ok=True)
    ticks_df = load_ticks(run_dir / "ticks.jsonl")
    report = run_all_metrics(ticks_df)

    summary_path = run_dir / "summary.json"
    if summary_path.exists():
        report["summary"] = json.loads(summary_path.read_text())

    plots = []
    population = population_over_time(ticks_df)
    if not population.empty:
        plt.figure()
        population.plot()
        plt.title("Population")
        plt.xlabel("Tick")
        plt.ylabel("Creatures")
        plt.savefig(report_dir / "population.png")
        plt.close()
        plots.append("population.png")

    if "hue" in ticks_df.columns:
        plt.figure()
        ticks_df["hue"].hist(bins=50)
        plt.title("Decided Hue Distribution")
        plt.xlabel("Hue (radians)")
        plt.ylabel("Frequency")
        plt.savefig(report_dir / "hue_dist.png")
        plt.close()
        plots.append("hue_dist.png")

    energy = energy_stats(ticks_df)
    report["energy"] = energy.reset_index().to_dict(orient="records") if not energy.empty else []
    report["plots"] = plots

    (report_dir / "report.json").write_text(json.dumps(report, indent=2, sort_keys=True, default=_json_default))
    return report


def main():
    parser = argparse.ArgumentParser(description="Generate an analysis report for a run.")
    parser.add_argument("run_dir", type=Path, help="Directory of the run.")
    parser.add_argument("--report-dir", type=Path, default=None, help="Directory to save the report.")
    args = parser.parse_args()

    report_dir = args.report_dir or args.run_dir / "report"
    generate_report(args.run_dir, report_dir)
    print(f"Report generated at {report_dir / 'report.json'}")


if __name__ == "__main__":
    main()
