import dataclasses

import numpy as np
import pytest

from svm_lab.core.dataset import INNER_RADIUS, OUTER_RADIUS, RING_CENTER, generate_dataset
from svm_lab.core.types import MarginMode


@pytest.mark.parametrize("mode", list(MarginMode))
def test_default_size_and_labels(mode):
    data = generate_dataset(mode)
    assert len(data) == 18
    assert set(data.y.tolist()) == {0, 1}
    assert data.class_counts() == (9, 9)
    assert not data.support_mask.any()


@pytest.mark.parametrize("mode", ["hard", "soft", "nonlinear"])
def test_points_stay_in_viewport(mode):
    for seed in range(5):
        X = generate_dataset(mode, seed=seed).X
        assert X.min() >= 0.0 and X.max() <= 100.0


def test_same_seed_same_dataset():
    a = generate_dataset("soft", seed=3)
    b = generate_dataset("soft", seed=3)
    c = generate_dataset("soft", seed=4)
    assert np.array_equal(a.X, b.X)
    assert not np.array_equal(a.X, c.X)


def test_rings_never_swap_order():
    for seed in range(10):
        data = generate_dataset(MarginMode.NONLINEAR, seed=seed)
        r = np.linalg.norm(data.X - np.array(RING_CENTER), axis=1)
        inner, outer = r[data.y == 1], r[data.y == 0]
        assert inner.min() >= INNER_RADIUS[0] - 1e-9 and inner.max() <= INNER_RADIUS[1] + 1e-9
        assert outer.min() >= OUTER_RADIUS[0] - 1e-9 and outer.max() <= OUTER_RADIUS[1] + 1e-9


def test_hard_clusters_on_opposite_sides_of_diagonal():
    data = generate_dataset("hard", seed=11)
    d = data.X[:, 1] - data.X[:, 0]
    assert d[data.y == 1].min() > d[data.y == 0].max()


def test_soft_places_outliers_in_other_cluster():
    data = generate_dataset("soft")
    d = data.X[:, 1] - data.X[:, 0]
    # a class-1 point below the diagonal and a class-0 point above it
    assert (d[data.y == 1] < 0).sum() == 2
    assert (d[data.y == 0] > 0).sum() == 2


def test_custom_sizes():
    data = generate_dataset("nonlinear", size=7)
    assert len(data) == 7
    assert data.class_counts() == (3, 4)
    assert len(generate_dataset("hard", size=0)) == 0


def test_bad_inputs():
    with pytest.raises(ValueError):
        generate_dataset("wavy")
    with pytest.raises(ValueError):
        generate_dataset("hard", size=-1)


def test_points_are_immutable():
    point = generate_dataset("hard")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.is_support_vector = True
