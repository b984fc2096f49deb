import matplotlib

matplotlib.use("Agg")

import pytest

from svm_lab.core.types import Dataset


@pytest.fixture
def mirrored_dataset():
    # positives left of x=50, negatives mirrored to the right; every point
    # sits exactly on the C=1 margin
    X = [[40.0, 20.0], [40.0, 80.0], [60.0, 20.0], [60.0, 80.0]]
    return Dataset.from_arrays(X, [1, 1, 0, 0])
