# svm_lab/core/linear.py
# Centroid-bisector line used as the "linear SVM" of the lab.
#
#   c1, c0 = class centroids,  w = c1 - c0,  m = (c1 + c0) / 2,  n = w / |w|
#   line:  n . (p - m) = s,    s = BOUNDARY_SHIFT_SCALE * (1 / max(C, C_FLOOR) - 1)
#
# This is a heuristic, not a maximum-margin solution. Decision values are
# signed perpendicular distances (positive on the class-1 side).
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from . import config
from .types import Dataset

logger = logging.getLogger(__name__)

_EPS = 1e-9


def clamp_c(C: float) -> float:
    return max(float(C), config.C_FLOOR)


def boundary_shift(C: float) -> float:
    """Distance the line slides along its normal; 0 at C=1, grows as C shrinks."""
    return config.BOUNDARY_SHIFT_SCALE * (1.0 / clamp_c(C) - 1.0)


def margin_distance(C: float) -> float:
    """Perpendicular half-width of the margin; large C -> narrow margin."""
    return config.MARGIN_SCALE / clamp_c(C)


@dataclass(frozen=True)
class LinearRule:
    """Line ``normal . p = offset`` with a unit ``normal``."""
    normal: tuple
    offset: float
    fallback: bool = False

    def decision(self, X: np.ndarray) -> np.ndarray:
        X = np.asarray(X, dtype=float).reshape(-1, 2)
        return X @ np.asarray(self.normal, dtype=float) - self.offset

    def predict(self, X: np.ndarray) -> np.ndarray:
        return (self.decision(X) > 0).astype(int)


def fallback_rule() -> LinearRule:
    # x + y = 105, label 1 above the line
    r = 1.0 / math.sqrt(2.0)
    return LinearRule(normal=(r, r), offset=config.FALLBACK_INTERCEPT * r, fallback=True)


def fit_linear_rule(dataset: Dataset, C: float = 1.0) -> LinearRule:
    """Centroid bisector for ``dataset``, slid by ``boundary_shift(C)``.

    Empty or single-class datasets (and coincident centroids) get the fixed
    fallback line instead.
    """
    X, y = dataset.X, dataset.y
    if len(X) == 0 or not (y == 1).any() or not (y == 0).any():
        logger.debug("linear rule: degenerate dataset (n=%d), using fallback line", len(X))
        return fallback_rule()

    c1 = X[y == 1].mean(axis=0)
    c0 = X[y == 0].mean(axis=0)
    w = c1 - c0
    norm = float(np.linalg.norm(w))
    if norm < _EPS:
        logger.debug("linear rule: coincident centroids, using fallback line")
        return fallback_rule()

    n = w / norm
    m = 0.5 * (c1 + c0)
    offset = float(n @ m) + boundary_shift(C)
    return LinearRule(normal=(float(n[0]), float(n[1])), offset=offset)


def tag_support_vectors(dataset: Dataset, C: float = 1.0) -> Dataset:
    """Return a copy of ``dataset`` with ``is_support_vector`` set.

    A point counts as a support vector when its distance to the C-adjusted
    linear boundary is within ``margin_distance(C)``. Geometric proxy only.
    """
    if len(dataset) == 0:
        return dataset
    rule = fit_linear_rule(dataset, C)
    mask = np.abs(rule.decision(dataset.X)) <= margin_distance(C)
    logger.debug("tagged %d/%d support vectors (C=%.3g)", int(mask.sum()), len(dataset), C)
    return dataset.with_support_mask(mask)
