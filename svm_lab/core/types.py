# svm_lab/core/types.py
# Plain data containers shared by the generator, geometry, classifier and metrics.
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Tuple

import numpy as np


class ChoiceEnum(str, Enum):
    """String enum that coerces its plain value and reports the valid choices."""

    @classmethod
    def coerce(cls, value) -> "ChoiceEnum":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} {value!r}; expected one of: {choices}") from None


class MarginMode(ChoiceEnum):
    HARD = "hard"
    SOFT = "soft"
    NONLINEAR = "nonlinear"


class KernelType(ChoiceEnum):
    LINEAR = "linear"
    RBF = "rbf"
    POLYNOMIAL = "polynomial"
    SIGMOID = "sigmoid"


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: int
    is_support_vector: bool = False


@dataclass(frozen=True)
class Dataset:
    """Immutable, ordered collection of points.

    Support-vector membership is view state: tagging builds a new Dataset and
    leaves the sampled points alone.
    """
    points: Tuple[Point, ...] = ()

    @classmethod
    def from_arrays(cls, X: np.ndarray, y: Iterable[int]) -> "Dataset":
        X = np.asarray(X, dtype=float).reshape(-1, 2)
        return cls(tuple(Point(float(a), float(b), int(lab)) for (a, b), lab in zip(X, y)))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, i: int) -> Point:
        return self.points[i]

    @property
    def X(self) -> np.ndarray:
        if not self.points:
            return np.empty((0, 2), dtype=float)
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    @property
    def y(self) -> np.ndarray:
        return np.array([p.label for p in self.points], dtype=int)

    @property
    def support_mask(self) -> np.ndarray:
        return np.array([p.is_support_vector for p in self.points], dtype=bool)

    @property
    def support_vectors(self) -> "Dataset":
        return Dataset(tuple(p for p in self.points if p.is_support_vector))

    def class_counts(self) -> Tuple[int, int]:
        """(negatives, positives)"""
        pos = sum(1 for p in self.points if p.label == 1)
        return len(self.points) - pos, pos

    def with_support_mask(self, mask: Iterable[bool]) -> "Dataset":
        return Dataset(tuple(replace(p, is_support_vector=bool(m)) for p, m in zip(self.points, mask)))


@dataclass(frozen=True)
class Hyperparameters:
    C: float = 1.0
    gamma: float = 0.1
    degree: int = 3


@dataclass(frozen=True, eq=False)
class Margins:
    upper: np.ndarray  # class-1 side
    lower: np.ndarray  # class-0 side


@dataclass(frozen=True)
class ConfusionMatrix:
    true_positive: int = 0
    true_negative: int = 0
    false_positive: int = 0
    false_negative: int = 0

    @property
    def total(self) -> int:
        return self.true_positive + self.true_negative + self.false_positive + self.false_negative

    def as_array(self) -> np.ndarray:
        # rows: actual positive / negative, cols: predicted positive / negative
        return np.array(
            [[self.true_positive, self.false_negative],
             [self.false_positive, self.true_negative]],
            dtype=int,
        )


@dataclass(frozen=True)
class PerformanceMetrics:
    accuracy: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0

    def as_dict(self) -> dict:
        return {
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
        }


@dataclass(frozen=True, eq=False)
class Scene:
    """One fully evaluated (dataset, kernel, hyperparameters) combination."""
    kernel: KernelType
    params: Hyperparameters
    dataset: Dataset
    boundary: np.ndarray
    margins: Margins
    confusion: ConfusionMatrix
    metrics: PerformanceMetrics
    mode: MarginMode | None = None
    seed: int | None = None

    @property
    def n_support_vectors(self) -> int:
        return int(self.dataset.support_mask.sum())
