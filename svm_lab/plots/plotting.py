# svm_lab/plots/plotting.py
# Matplotlib views of a scene: points, support-vector rings, boundary, margins,
# the C x gamma parameter grid, and a labelled confusion-matrix heatmap.
from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..core import config
from ..core.decision import build_decision_function
from ..core.geometry import decision_surface
from ..core.types import ConfusionMatrix, Scene
from ..professions import ProfessionTerms

POSITIVE_COLOR = "#2a9d8f"
NEGATIVE_COLOR = "#e76f51"
SUPPORT_COLOR = "#f4a261"
BOUNDARY_COLOR = "#264653"


def _frame(ax):
    lo, hi = config.VIEWPORT_MIN, config.VIEWPORT_MAX
    for pos in np.linspace(lo, hi, 5):
        ax.axvline(pos, color="0.85", linewidth=0.5, zorder=0)
        ax.axhline(pos, color="0.85", linewidth=0.5, zorder=0)
    ax.set_xlim(lo, hi)
    ax.set_ylim(lo, hi)
    ax.set_aspect("equal")


def plot_scene(scene: Scene, terms: Optional[ProfessionTerms] = None, ax=None,
               shade: bool = True, legend: bool = True, title: Optional[str] = None):
    """Draw one scene; returns the Figure."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure
    _frame(ax)

    if shade:
        df = build_decision_function(scene.dataset, scene.kernel, scene.params)
        xs, ys, Z = decision_surface(df, step=2.0, points=scene.dataset.X)
        ax.contourf(xs, ys, (Z > 0).astype(float), levels=[-0.5, 0.5, 1.5],
                    colors=[NEGATIVE_COLOR, POSITIVE_COLOR], alpha=0.08, zorder=0)

    X, y = scene.dataset.X, scene.dataset.y
    sv = scene.dataset.support_mask
    pos_label = terms.positive if terms else "class 1"
    neg_label = terms.negative if terms else "class 0"
    if len(X):
        ax.scatter(X[y == 1, 0], X[y == 1, 1], s=40, c=POSITIVE_COLOR, edgecolors="white", label=pos_label, zorder=3)
        ax.scatter(X[y == 0, 0], X[y == 0, 1], s=40, c=NEGATIVE_COLOR, edgecolors="white", label=neg_label, zorder=3)
        if sv.any():
            ax.scatter(X[sv, 0], X[sv, 1], s=160, facecolors="none", edgecolors=SUPPORT_COLOR,
                       linewidths=1.5, label="Support Vectors", zorder=4)

    if len(scene.boundary):
        ax.plot(scene.boundary[:, 0], scene.boundary[:, 1], "--", color=BOUNDARY_COLOR,
                linewidth=1.6, label="decision boundary", zorder=2)
    for curve in (scene.margins.upper, scene.margins.lower):
        if len(curve):
            ax.plot(curve[:, 0], curve[:, 1], ":", color=BOUNDARY_COLOR, linewidth=1.0, alpha=0.7, zorder=2)

    if title is None:
        title = f"{scene.kernel.value}  C={scene.params.C:g}  γ={scene.params.gamma:g}"
    ax.set_title(title)
    if legend:
        ax.legend(loc="upper right", fontsize=8)
    return fig


def plot_parameter_grid(scenes: Sequence[Scene], c_values: Sequence[float] = config.C_GRID,
                        gamma_values: Sequence[float] = config.GAMMA_GRID,
                        terms: Optional[ProfessionTerms] = None):
    """Scenes laid out with C on the rows and gamma on the columns."""
    rows, cols = len(c_values), len(gamma_values)
    if len(scenes) != rows * cols:
        raise ValueError(f"expected {rows * cols} scenes for a {rows}x{cols} grid, got {len(scenes)}")
    fig, axs = plt.subplots(rows, cols, figsize=(3.2 * cols, 3.2 * rows), squeeze=False)
    for i, c in enumerate(c_values):
        for j, g in enumerate(gamma_values):
            scene = scenes[i * cols + j]
            ax = axs[i][j]
            plot_scene(scene, terms=terms, ax=ax, shade=False, legend=False,
                       title=f"C={c:g}, γ={g:g}  acc={scene.metrics.accuracy:.2f}")
            ax.set_xticks([])
            ax.set_yticks([])
    fig.suptitle("Parameter Combinations Grid (C \\ γ)")
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig


def plot_confusion(cm: ConfusionMatrix, terms: Optional[ProfessionTerms] = None, title: str = "Confusion Matrix"):
    pos = terms.positive if terms else "1"
    neg = terms.negative if terms else "0"
    fig, ax = plt.subplots(figsize=(4.5, 4))
    grid = cm.as_array()
    im = ax.imshow(grid, interpolation="nearest", cmap="Blues")
    ax.set_title(title)
    ax.set_xlabel("Predicted")
    ax.set_ylabel("Actual")
    ax.set_xticks([0, 1])
    ax.set_xticklabels([pos, neg])
    ax.set_yticks([0, 1])
    ax.set_yticklabels([pos, neg])
    for (i, j), v in np.ndenumerate(grid):
        ax.text(j, i, str(v), ha="center", va="center")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    fig.tight_layout()
    return fig
