# svm_lab/core/geometry.py
# Decision boundary and margin curves for every kernel.
# - linear: sample the centroid-bisector line (and its +/- margin copies) across the viewport
# - curved kernels: zero level set of the kernel decision function (contourpy),
#   margins = boundary offset along its local normal
# Curves are (n, 2) arrays; disjoint pieces are separated by a NaN row, which
# matplotlib draws as a gap.
from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np
from contourpy import LineType, contour_generator

from . import config
from .decision import DecisionFunction, KernelDecision, LinearDecision, build_decision_function
from .linear import LinearRule, margin_distance
from .types import Dataset, Hyperparameters, KernelType, Margins

logger = logging.getLogger(__name__)

_TOL = 1e-9
_PROBE = 0.5  # step used to orient normals toward increasing decision value


# ---------------- Curve helpers ----------------

def empty_curve() -> np.ndarray:
    return np.empty((0, 2), dtype=float)


def join_pieces(pieces: List[np.ndarray]) -> np.ndarray:
    pieces = [np.asarray(p, dtype=float).reshape(-1, 2) for p in pieces]
    pieces = [p for p in pieces if len(p)]
    if not pieces:
        return empty_curve()
    gap = np.full((1, 2), np.nan)
    out = [pieces[0]]
    for p in pieces[1:]:
        out.extend([gap, p])
    return np.vstack(out)


def split_pieces(curve: np.ndarray) -> List[np.ndarray]:
    curve = np.asarray(curve, dtype=float).reshape(-1, 2)
    breaks = np.isnan(curve).any(axis=1)
    pieces, start = [], 0
    for i in np.flatnonzero(breaks):
        if i > start:
            pieces.append(curve[start:i])
        start = i + 1
    if start < len(curve):
        pieces.append(curve[start:])
    return pieces


def _inside(P: np.ndarray) -> np.ndarray:
    lo, hi = config.VIEWPORT_MIN - _TOL, config.VIEWPORT_MAX + _TOL
    return np.all((P >= lo) & (P <= hi), axis=1)


def _clip_runs(P: np.ndarray) -> List[np.ndarray]:
    """Split a polyline into the runs that stay inside the viewport."""
    keep = _inside(P)
    runs, start = [], None
    for i, k in enumerate(keep):
        if k and start is None:
            start = i
        elif not k and start is not None:
            runs.append(P[start:i])
            start = None
    if start is not None:
        runs.append(P[start:])
    return runs


def _lattice(step: float) -> np.ndarray:
    count = int(round((config.VIEWPORT_MAX - config.VIEWPORT_MIN) / step)) + 1
    return np.linspace(config.VIEWPORT_MIN, config.VIEWPORT_MAX, max(count, 2))


# ---------------- Sampling ----------------

def sample_line(rule: LinearRule, level: float = 0.0, step: float | None = None) -> np.ndarray:
    """Points of ``rule.decision(p) == level`` inside the viewport.

    Scans x in fixed steps, or y when the line is closer to vertical.
    """
    a, b = rule.normal
    k = rule.offset + level
    t = _lattice(step or config.SCAN_STEP)
    if abs(b) >= abs(a):
        P = np.column_stack([t, (k - a * t) / b])
    else:
        P = np.column_stack([(k - b * t) / a, t])
    return P[_inside(P)]


def _knots(df: DecisionFunction, points: np.ndarray | None) -> np.ndarray:
    """Extra lattice coordinates: the data points, each support vector and, for
    rbf, the flanks of every support-vector bump."""
    extra = []
    if points is not None:
        extra.append(np.asarray(points, dtype=float).reshape(-1, 2))
    if isinstance(df, KernelDecision):
        extra.append(df.sv_X)
        if df.kernel is KernelType.RBF and df.gamma > 0:
            w = 0.5 / np.sqrt(df.gamma)
            extra.extend([df.sv_X - w, df.sv_X + w])
    if not extra:
        return np.empty((0, 2))
    return np.clip(np.vstack(extra), config.VIEWPORT_MIN, config.VIEWPORT_MAX)


def decision_surface(df: DecisionFunction, step: float | None = None,
                     points: np.ndarray | None = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate ``df`` on a rectilinear lattice over the viewport -> (xs, ys, Z[len(ys), len(xs)]).

    The uniform lattice is refined with the coordinates of ``points`` and of the
    support vectors, so every sign the classifier gives a data point also shows
    up at a lattice node.
    """
    base = _lattice(step or config.GRID_STEP)
    knots = _knots(df, points)
    xs = np.union1d(base, knots[:, 0])
    ys = np.union1d(base, knots[:, 1])
    XX, YY = np.meshgrid(xs, ys)
    Z = df(np.column_stack([XX.ravel(), YY.ravel()])).reshape(XX.shape)
    return xs, ys, Z


def level_set(df: DecisionFunction, level: float = 0.0, step: float | None = None,
              points: np.ndarray | None = None) -> np.ndarray:
    xs, ys, Z = decision_surface(df, step, points)
    if not np.all(np.isfinite(Z)):
        Z = np.ma.masked_invalid(Z)
    lines = contour_generator(xs, ys, Z, line_type=LineType.Separate).lines(level)
    logger.debug("level set %.3g: %d piece(s)", level, len(lines))
    return join_pieces(lines)


def _offset_pieces(df: DecisionFunction, base: np.ndarray, distance: float) -> Tuple[np.ndarray, np.ndarray]:
    upper, lower = [], []
    for piece in split_pieces(base):
        if len(piece) < 2:
            continue
        tangent = np.gradient(piece, axis=0)
        length = np.linalg.norm(tangent, axis=1, keepdims=True)
        length[length == 0] = 1.0
        normal = np.column_stack([-tangent[:, 1], tangent[:, 0]]) / length
        flip = df(piece + _PROBE * normal) < df(piece - _PROBE * normal)
        normal[flip] *= -1.0
        upper.extend(_clip_runs(piece + distance * normal))
        lower.extend(_clip_runs(piece - distance * normal))
    return join_pieces(upper), join_pieces(lower)


# ---------------- Public API ----------------

def margin_width(C: float) -> float:
    """Full distance between the two margin curves."""
    return 2.0 * margin_distance(C)


def boundary(kernel: KernelType | str, params: Hyperparameters, dataset: Dataset) -> np.ndarray:
    """Decision boundary curve; the zero level set of the classifier's rule."""
    df = build_decision_function(dataset, kernel, params)
    if isinstance(df, LinearDecision):
        return sample_line(df.rule, 0.0)
    return level_set(df, 0.0, points=dataset.X)


def margins(kernel: KernelType | str, params: Hyperparameters, dataset: Dataset) -> Margins:
    """Curves at perpendicular distance ``margin_distance(C)`` either side of the boundary."""
    df = build_decision_function(dataset, kernel, params)
    d = margin_distance(params.C)
    if isinstance(df, LinearDecision):
        return Margins(upper=sample_line(df.rule, +d), lower=sample_line(df.rule, -d))
    upper, lower = _offset_pieces(df, level_set(df, 0.0, points=dataset.X), d)
    return Margins(upper=upper, lower=lower)
