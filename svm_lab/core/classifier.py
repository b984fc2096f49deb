# svm_lab/core/classifier.py
# Simulated classification: threshold the kernel's decision function at 0.
from __future__ import annotations

import numpy as np
from sklearn.metrics import confusion_matrix as _sk_confusion_matrix

from .decision import build_decision_function
from .types import ConfusionMatrix, Dataset, Hyperparameters, KernelType, Point


def predict_many(X: np.ndarray, dataset: Dataset, kernel: KernelType | str, params: Hyperparameters) -> np.ndarray:
    """Labels (0/1) for every row of ``X`` under the rule built from ``dataset``."""
    df = build_decision_function(dataset, kernel, params)
    return df.predict(np.asarray(X, dtype=float).reshape(-1, 2))


def predict(point: Point, dataset: Dataset, kernel: KernelType | str, gamma: float, C: float, degree: int = 3) -> int:
    params = Hyperparameters(C=C, gamma=gamma, degree=degree)
    return int(predict_many(np.array([[point.x, point.y]]), dataset, kernel, params)[0])


def confusion_matrix(dataset: Dataset, kernel: KernelType | str, gamma: float, C: float, degree: int = 3) -> ConfusionMatrix:
    """Tally predicted vs. actual labels over the whole dataset."""
    if len(dataset) == 0:
        return ConfusionMatrix()
    params = Hyperparameters(C=C, gamma=gamma, degree=degree)
    y_pred = predict_many(dataset.X, dataset, kernel, params)
    tn, fp, fn, tp = _sk_confusion_matrix(dataset.y, y_pred, labels=[0, 1]).ravel()
    return ConfusionMatrix(
        true_positive=int(tp),
        true_negative=int(tn),
        false_positive=int(fp),
        false_negative=int(fn),
    )
