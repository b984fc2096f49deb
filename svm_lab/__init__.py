"""Illustrative SVM hyperparameter lab: datasets, geometry, simulated classification, metrics."""
from .core import (
    ConfusionMatrix,
    Dataset,
    Hyperparameters,
    KernelType,
    MarginMode,
    Margins,
    PerformanceMetrics,
    Point,
    Scene,
    boundary,
    compute_metrics,
    confusion_matrix,
    generate_dataset,
    margin_distance,
    margin_width,
    margins,
    predict,
    tag_support_vectors,
)
from .pipeline import parameter_grid, run_scene, scene_for_dataset

__version__ = "0.1.0"
