# svm_lab/core/dataset.py
# Synthetic 2-D datasets for the three margin modes.
# - hard:      two clusters on opposite sides of the diagonal, linearly separable
# - soft:      same clusters, a few points of each class dropped into the other one
# - nonlinear: class 1 on an inner ring, class 0 on an outer ring
# Randomness comes from an explicit seed, so every dataset is reproducible.
from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from . import config
from .types import Dataset, MarginMode, Point

logger = logging.getLogger(__name__)

Coord = Tuple[float, float]

# 3x3 anchor lattices; class midpoint is (50, 55)
_POSITIVE_ANCHORS: List[Coord] = [(x, y) for y in (84.0, 75.0, 66.0) for x in (20.0, 28.0, 36.0)]
_NEGATIVE_ANCHORS: List[Coord] = [(x, y) for y in (26.0, 35.0, 44.0) for x in (80.0, 72.0, 64.0)]

# soft-margin outliers sit inside the *other* class's cluster
_POSITIVE_OUTLIERS: List[Coord] = [(70.0, 33.0), (75.0, 38.0)]
_NEGATIVE_OUTLIERS: List[Coord] = [(26.0, 72.0), (31.0, 77.0)]
_OUTLIER_JITTER = 1.0

RING_CENTER: Coord = (50.0, 50.0)
INNER_RADIUS = (18.0, 24.0)
OUTER_RADIUS = (32.0, 38.0)

MARGIN_MODE_INFO = {
    MarginMode.HARD: {
        "title": "Hard Margin",
        "description": "Perfectly separable data with a clear boundary. No overlap between classes.",
        "difficulty": "Beginner",
    },
    MarginMode.SOFT: {
        "title": "Soft Margin",
        "description": "Mostly separable with some overlap. Allows for some misclassification.",
        "difficulty": "Intermediate",
    },
    MarginMode.NONLINEAR: {
        "title": "Non-Linear Margin",
        "description": "Complex patterns requiring curved decision boundaries. Needs kernel tricks.",
        "difficulty": "Advanced",
    },
}


def _split_sizes(size: int) -> Tuple[int, int]:
    """(positives, negatives); class 1 takes the odd point."""
    n_pos = (size + 1) // 2
    return n_pos, size - n_pos


def _jitter_around(rng: np.random.Generator, spots: List[Coord], n: int, jitter: float) -> np.ndarray:
    base = np.array([spots[i % len(spots)] for i in range(n)], dtype=float).reshape(-1, 2)
    return base + rng.uniform(-jitter, jitter, size=base.shape)


def _clusters(rng: np.random.Generator, n_pos: int, n_neg: int, outliers: int) -> Tuple[np.ndarray, np.ndarray]:
    out_pos = min(outliers, n_pos // 2)
    out_neg = min(outliers, n_neg // 2)
    pos = _jitter_around(rng, _POSITIVE_ANCHORS, n_pos - out_pos, config.CLUSTER_JITTER)
    neg = _jitter_around(rng, _NEGATIVE_ANCHORS, n_neg - out_neg, config.CLUSTER_JITTER)
    if out_pos:
        pos = np.vstack([pos, _jitter_around(rng, _POSITIVE_OUTLIERS, out_pos, _OUTLIER_JITTER)])
    if out_neg:
        neg = np.vstack([neg, _jitter_around(rng, _NEGATIVE_OUTLIERS, out_neg, _OUTLIER_JITTER)])
    return pos, neg


def _ring(rng: np.random.Generator, n: int, radius: Tuple[float, float], phase: float) -> np.ndarray:
    if n == 0:
        return np.empty((0, 2), dtype=float)
    # evenly spaced angles keep every ring wrapped around the centre
    angles = 2.0 * math.pi * np.arange(n) / n + phase
    angles = angles + rng.uniform(-config.RING_ANGLE_JITTER, config.RING_ANGLE_JITTER, size=n)
    radii = rng.uniform(radius[0], radius[1], size=n)
    cx, cy = RING_CENTER
    return np.column_stack([cx + radii * np.cos(angles), cy + radii * np.sin(angles)])


def generate_dataset(mode: MarginMode | str, seed: Optional[int] = None, size: Optional[int] = None) -> Dataset:
    """Return a labelled point set laid out for the given margin mode.

    Parameters
    ----------
    mode : {"hard", "soft", "nonlinear"}
    seed : seed for the private ``numpy.random.Generator``; ``None`` uses
           ``config.DEFAULT_SEED`` so the default dataset is stable too.
    size : number of points, split evenly between the classes (default 18).
    """
    mode = MarginMode.coerce(mode)
    size = config.DATASET_SIZE if size is None else int(size)
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    seed = config.DEFAULT_SEED if seed is None else int(seed)
    rng = np.random.default_rng(seed)
    n_pos, n_neg = _split_sizes(size)

    if mode is MarginMode.HARD:
        pos, neg = _clusters(rng, n_pos, n_neg, outliers=0)
    elif mode is MarginMode.SOFT:
        pos, neg = _clusters(rng, n_pos, n_neg, outliers=config.SOFT_OUTLIERS)
    else:
        pos = _ring(rng, n_pos, INNER_RADIUS, phase=0.0)
        neg = _ring(rng, n_neg, OUTER_RADIUS, phase=math.pi / max(n_neg, 1))

    X = np.clip(np.vstack([pos.reshape(-1, 2), neg.reshape(-1, 2)]), config.VIEWPORT_MIN, config.VIEWPORT_MAX)
    labels = [1] * len(pos) + [0] * len(neg)
    logger.debug("generated %s dataset: seed=%d, %d positives, %d negatives", mode.value, seed, len(pos), len(neg))
    return Dataset(tuple(Point(float(x), float(y), lab) for (x, y), lab in zip(X, labels)))
