# svm_lab/__main__.py
# ------------------------------------------------------------
# Evaluate one scene from the command line and report it in the
# vocabulary of the chosen profession.
# Example:
#   python -m svm_lab --mode soft --kernel rbf --C 0.5 --gamma 0.05 \
#                     --profession finance --save-plot soft_rbf.png
# ------------------------------------------------------------
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .core import config
from .core.types import Hyperparameters, KernelType, MarginMode
from .logging_config import setup_logging
from .pipeline import run_scene
from .professions import Profession, describe_confusion, describe_metrics, terms_for

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="svm_lab", description="Illustrative SVM hyperparameter lab")
    ap.add_argument("--mode", choices=[m.value for m in MarginMode], default="hard")
    ap.add_argument("--kernel", choices=[k.value for k in KernelType], default="linear")
    ap.add_argument("--C", type=float, default=1.0, help="regularization strength (UI range 0.1-10)")
    ap.add_argument("--gamma", type=float, default=0.1, help="kernel coefficient (UI range 0.01-1)")
    ap.add_argument("--degree", type=int, default=3, help="polynomial degree")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--profession", choices=[p.value for p in Profession], default="medical")
    ap.add_argument("--save-plot", default="")
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    if args.C <= 0 or args.gamma <= 0:
        ap.error("--C and --gamma must be positive")
    if args.degree < 1:
        ap.error("--degree must be a positive integer")

    params = Hyperparameters(C=args.C, gamma=args.gamma, degree=args.degree)
    try:
        scene = run_scene(args.mode, args.kernel, params, seed=args.seed)
        terms = terms_for(args.profession)
    except ValueError as e:
        ap.error(str(e))

    print(f"Mode={scene.mode.value}  kernel={scene.kernel.value}  C={params.C:g}  "
          f"gamma={params.gamma:g}  seed={scene.seed}")
    neg, pos = scene.dataset.class_counts()
    print(f"Points: {len(scene.dataset)}  support vectors: {scene.n_support_vectors}  "
          f"{terms.positive}: {pos}  {terms.negative}: {neg}")
    print("Confusion matrix:")
    for label, count in describe_confusion(scene.confusion, terms):
        print(f"  {label:<45} {count:>3}")
    print("Metrics:")
    for label, value in describe_metrics(scene.metrics, terms):
        print(f"  {label:<45} {value * 100:>5.0f}%")

    if args.save_plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .plots.plotting import plot_scene

        fig = plot_scene(scene, terms=terms)
        fig.savefig(args.save_plot, dpi=160)
        plt.close(fig)
        print(f"[saved] {args.save_plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
