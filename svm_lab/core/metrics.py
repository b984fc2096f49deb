# svm_lab/core/metrics.py
# Confusion matrix -> accuracy / precision / recall / F1 (rounded to 2 dp).
from __future__ import annotations

from .types import ConfusionMatrix, PerformanceMetrics


def _ratio(num: float, den: float) -> float:
    # zero denominator -> 0.0 instead of NaN
    return num / den if den else 0.0


def compute_metrics(cm: ConfusionMatrix) -> PerformanceMetrics:
    tp, tn = cm.true_positive, cm.true_negative
    fp, fn = cm.false_positive, cm.false_negative

    accuracy = _ratio(tp + tn, cm.total)
    precision = _ratio(tp, tp + fp)
    recall = _ratio(tp, tp + fn)
    f1 = _ratio(2.0 * precision * recall, precision + recall)

    return PerformanceMetrics(
        accuracy=round(accuracy, 2),
        precision=round(precision, 2),
        recall=round(recall, 2),
        f1_score=round(f1, 2),
    )
