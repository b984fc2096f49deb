# svm_lab/core/kernels.py
# Vectorized kernels K(X, Z) -> (n, m) similarity matrices.
from __future__ import annotations

import numpy as np

from . import config
from .types import KernelType


def linear_kernel(X: np.ndarray, Z: np.ndarray) -> np.ndarray:
    # <x, z>
    return X @ Z.T


def rbf_kernel(X: np.ndarray, Z: np.ndarray, gamma: float) -> np.ndarray:
    # exp(-gamma * ||x - z||^2)
    X2 = np.sum(X * X, axis=1, keepdims=True)          # (n, 1)
    Z2 = np.sum(Z * Z, axis=1, keepdims=True).T        # (1, m)
    d2 = np.maximum(X2 + Z2 - 2.0 * (X @ Z.T), 0.0)    # clamp round-off below zero
    return np.exp(-gamma * d2)


def polynomial_kernel(X: np.ndarray, Z: np.ndarray, degree: int = 3) -> np.ndarray:
    # (<x, z> + 1) ** degree
    return (X @ Z.T + 1.0) ** int(degree)


def sigmoid_kernel(X: np.ndarray, Z: np.ndarray) -> np.ndarray:
    # tanh(0.01 * <x, z> + 1)
    return np.tanh(config.SIGMOID_SCALE * (X @ Z.T) + 1.0)


def kernel_matrix(kernel: KernelType | str, X: np.ndarray, Z: np.ndarray, gamma: float = 0.1, degree: int = 3) -> np.ndarray:
    kernel = KernelType.coerce(kernel)
    X = np.asarray(X, dtype=float).reshape(-1, 2)
    Z = np.asarray(Z, dtype=float).reshape(-1, 2)
    if kernel is KernelType.LINEAR:
        return linear_kernel(X, Z)
    if kernel is KernelType.RBF:
        return rbf_kernel(X, Z, float(gamma))
    if kernel is KernelType.POLYNOMIAL:
        return polynomial_kernel(X, Z, degree)
    return sigmoid_kernel(X, Z)
