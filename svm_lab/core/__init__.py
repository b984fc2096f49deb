from .classifier import confusion_matrix, predict, predict_many
from .dataset import MARGIN_MODE_INFO, generate_dataset
from .geometry import boundary, margin_width, margins
from .linear import margin_distance, tag_support_vectors
from .metrics import compute_metrics
from .types import (
    ConfusionMatrix,
    Dataset,
    Hyperparameters,
    KernelType,
    MarginMode,
    Margins,
    PerformanceMetrics,
    Point,
    Scene,
)
