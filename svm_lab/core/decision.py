# svm_lab/core/decision.py
# One decision function per kernel. The classifier thresholds it at 0 and the
# geometry engine draws its zero level set, so the curve on screen is always
# the rule that produced the confusion matrix.
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from . import config
from .kernels import kernel_matrix
from .linear import LinearRule, fallback_rule, fit_linear_rule, tag_support_vectors
from .types import Dataset, Hyperparameters, KernelType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearDecision:
    rule: LinearRule

    def __call__(self, X: np.ndarray) -> np.ndarray:
        return self.rule.decision(X)

    def predict(self, X: np.ndarray) -> np.ndarray:
        return (self(X) > 0).astype(int)


@dataclass(frozen=True, eq=False)
class KernelDecision:
    """score(p) = sum_sv y_sv * K(p, sv) + bias, with y_sv in {-1, +1}."""
    kernel: KernelType
    sv_X: np.ndarray
    sv_sign: np.ndarray
    bias: float
    gamma: float
    degree: int

    def __call__(self, X: np.ndarray) -> np.ndarray:
        X = np.asarray(X, dtype=float).reshape(-1, 2)
        K = kernel_matrix(self.kernel, X, self.sv_X, gamma=self.gamma, degree=self.degree)
        return K @ self.sv_sign + self.bias

    def predict(self, X: np.ndarray) -> np.ndarray:
        return (self(X) > 0).astype(int)


DecisionFunction = Union[LinearDecision, KernelDecision]


def support_bias(sv_labels: np.ndarray) -> float:
    pos = int((sv_labels == 1).sum())
    neg = int((sv_labels == 0).sum())
    return (pos - neg) * config.BIAS_SCALE


def build_decision_function(dataset: Dataset, kernel: KernelType | str, params: Hyperparameters) -> DecisionFunction:
    """Decision function for ``kernel`` on ``dataset``.

    linear      -> centroid bisector (C-shifted)
    rbf/poly/.. -> kernel expansion over the support vectors tagged with C;
                   with no support vectors, the fixed fallback line.
    """
    kernel = KernelType.coerce(kernel)
    if kernel is KernelType.LINEAR:
        return LinearDecision(fit_linear_rule(dataset, params.C))

    svs = tag_support_vectors(dataset, params.C).support_vectors
    if len(svs) == 0:
        logger.debug("%s decision: no support vectors, using fallback line", kernel.value)
        return LinearDecision(fallback_rule())

    labels = svs.y
    return KernelDecision(
        kernel=kernel,
        sv_X=svs.X,
        sv_sign=np.where(labels == 1, 1.0, -1.0),
        bias=support_bias(labels),
        gamma=float(params.gamma),
        degree=int(params.degree),
    )
