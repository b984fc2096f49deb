# svm_lab/core/config.py
# Tunable constants for the illustrative SVM engine.
# Every value can be overridden with an environment variable; none of them is
# derived from optimization theory, they only shape what the learner sees.
from __future__ import annotations

import os

# ---- Dataset ----------------------------------------------------------------
DATASET_SIZE      = int(os.getenv("SVM_LAB_DATASET_SIZE", "18"))     # 9 points per class
DEFAULT_SEED      = int(os.getenv("SVM_LAB_SEED", "7"))
CLUSTER_JITTER    = float(os.getenv("SVM_LAB_CLUSTER_JITTER", "3.0"))  # +/- units around each anchor
RING_ANGLE_JITTER = float(os.getenv("SVM_LAB_RING_JITTER", "0.2"))     # +/- radians per ring point
SOFT_OUTLIERS     = int(os.getenv("SVM_LAB_SOFT_OUTLIERS", "2"))       # per class, dropped into the other cluster

# ---- Geometry ---------------------------------------------------------------
C_FLOOR              = float(os.getenv("SVM_LAB_C_FLOOR", "0.1"))
BOUNDARY_SHIFT_SCALE = float(os.getenv("SVM_LAB_SHIFT_SCALE", "6.0"))    # low C drags the line toward class 1
MARGIN_SCALE         = float(os.getenv("SVM_LAB_MARGIN_SCALE", "10.0"))  # margin half-width at C=1
BIAS_SCALE           = float(os.getenv("SVM_LAB_BIAS_SCALE", "0.1"))     # support-vector class balance nudge
SCAN_STEP            = float(os.getenv("SVM_LAB_SCAN_STEP", "2.0"))      # linear boundary sampling
GRID_STEP            = float(os.getenv("SVM_LAB_GRID_STEP", "1.0"))      # contour lattice for curved boundaries

VIEWPORT_MIN = 0.0
VIEWPORT_MAX = 100.0

# Fallback line x + y = FALLBACK_INTERCEPT, label 1 above it.
FALLBACK_INTERCEPT = 105.0
SIGMOID_SCALE = 0.01

# ---- Parameter grid (C rows x gamma columns) --------------------------------
C_GRID     = (0.1, 1.0, 10.0)
GAMMA_GRID = (0.01, 0.1, 1.0)

LOG_LEVEL = os.getenv("SVM_LAB_LOG_LEVEL", "WARNING")
