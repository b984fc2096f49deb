# svm_lab/benchmarks/plot_results.py
# Bar charts of mean simulated accuracy per kernel, one panel per margin mode.
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

import matplotlib
import matplotlib.pyplot as plt
import pandas as pd

HERE = Path(__file__).parent
RESULTS_CSV = HERE / "results.csv"


def load_rows(path: Path = RESULTS_CSV) -> pd.DataFrame:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m svm_lab.benchmarks.run_all")
    df = pd.read_csv(path)
    df = df[df["error"].isna()]
    if df.empty:
        raise SystemExit("No successful rows to plot.")
    return df


def plot_accuracy_by_kernel(df: pd.DataFrame):
    modes = list(dict.fromkeys(df["mode"]))
    fig, axs = plt.subplots(1, len(modes), figsize=(4 * len(modes), 4), squeeze=False)
    for ax, mode in zip(axs[0], modes):
        means = df[df["mode"] == mode].groupby("kernel", sort=False)["accuracy"].mean()
        x = list(range(len(means)))
        ax.bar(x, means.values)
        ax.set_xticks(x)
        ax.set_xticklabels(means.index, rotation=20, ha="right")
        ax.set_ylim(0, 1.05)
        ax.set_title(f"{mode} margin")
        ax.set_ylabel("mean accuracy")
        for xi, v in zip(x, means.values):
            ax.text(xi, v + 0.01, f"{v:.2f}", ha="center", va="bottom", fontsize=8)
    fig.suptitle("Simulated accuracy over the C x gamma grid")
    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return fig


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--results", default=str(RESULTS_CSV))
    ap.add_argument("--out", default=str(HERE / "accuracy_by_kernel.png"))
    args = ap.parse_args(argv)

    matplotlib.use("Agg")
    fig = plot_accuracy_by_kernel(load_rows(Path(args.results)))
    fig.savefig(args.out, dpi=160)
    plt.close(fig)
    print(f"[saved] {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
