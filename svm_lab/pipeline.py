# svm_lab/pipeline.py
# Dataset -> support-vector tagging -> boundary/margins -> confusion matrix -> metrics.
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .core import config
from .core.classifier import confusion_matrix
from .core.dataset import generate_dataset
from .core.geometry import boundary, margins
from .core.linear import tag_support_vectors
from .core.metrics import compute_metrics
from .core.types import Dataset, Hyperparameters, KernelType, MarginMode, Scene

logger = logging.getLogger(__name__)


def scene_for_dataset(dataset: Dataset, kernel: KernelType | str, params: Hyperparameters,
                      mode: Optional[MarginMode] = None, seed: Optional[int] = None) -> Scene:
    kernel = KernelType.coerce(kernel)
    tagged = tag_support_vectors(dataset, params.C)
    cm = confusion_matrix(dataset, kernel, params.gamma, params.C, params.degree)
    scene = Scene(
        kernel=kernel,
        params=params,
        dataset=tagged,
        boundary=boundary(kernel, params, dataset),
        margins=margins(kernel, params, dataset),
        confusion=cm,
        metrics=compute_metrics(cm),
        mode=mode,
        seed=seed,
    )
    logger.debug("scene %s C=%.3g gamma=%.3g: %d SVs, accuracy=%.2f",
                 kernel.value, params.C, params.gamma, scene.n_support_vectors, scene.metrics.accuracy)
    return scene


def run_scene(mode: MarginMode | str, kernel: KernelType | str, params: Hyperparameters | None = None,
              seed: Optional[int] = None) -> Scene:
    """Generate the ``mode`` dataset and evaluate it under ``kernel``/``params``."""
    mode = MarginMode.coerce(mode)
    params = params or Hyperparameters()
    seed = config.DEFAULT_SEED if seed is None else int(seed)
    return scene_for_dataset(generate_dataset(mode, seed=seed), kernel, params, mode=mode, seed=seed)


def parameter_grid(dataset: Dataset, kernel: KernelType | str,
                   c_values: Iterable[float] = config.C_GRID,
                   gamma_values: Iterable[float] = config.GAMMA_GRID,
                   degree: int = 3) -> List[Scene]:
    """Scenes for every (C, gamma) pair, row-major over C then gamma."""
    gamma_values = list(gamma_values)
    return [
        scene_for_dataset(dataset, kernel, Hyperparameters(C=float(c), gamma=float(g), degree=degree))
        for c in c_values
        for g in gamma_values
    ]
