import numpy as np
import pytest

from svm_lab.core.classifier import predict_many
from svm_lab.core.dataset import generate_dataset
from svm_lab.core.decision import build_decision_function
from svm_lab.core.geometry import (
    boundary,
    decision_surface,
    join_pieces,
    margin_width,
    margins,
    split_pieces,
)
from svm_lab.core.linear import (
    boundary_shift,
    fit_linear_rule,
    margin_distance,
    tag_support_vectors,
)
from svm_lab.core.types import Dataset, Hyperparameters, KernelType


def _finite(curve):
    return curve[~np.isnan(curve).any(axis=1)]


def test_margin_shrinks_as_c_grows():
    assert margin_width(10) < margin_width(0.1)
    assert margin_distance(1.0) == pytest.approx(10.0)
    # C is clamped before dividing
    assert margin_distance(0.0) == margin_distance(0.1) == pytest.approx(100.0)


def test_boundary_shift_is_zero_at_c_one():
    assert boundary_shift(1.0) == 0.0
    assert boundary_shift(0.1) == pytest.approx(54.0)
    assert boundary_shift(10.0) < 0.0


def test_hard_linear_boundary_passes_near_cluster_midpoint():
    curve = boundary("linear", Hyperparameters(C=1.0, gamma=0.1), generate_dataset("hard"))
    assert len(curve) > 10
    assert np.all((curve >= 0.0) & (curve <= 100.0))
    d = np.linalg.norm(curve - np.array([50.0, 55.0]), axis=1)
    assert d.min() < 5.0


def test_linear_margins_are_parallel_offsets():
    data = generate_dataset("hard")
    for C in (0.5, 1.0, 4.0):
        params = Hyperparameters(C=C)
        rule = fit_linear_rule(data, C)
        m = margins("linear", params, data)
        assert len(m.upper) and len(m.lower)
        assert np.allclose(rule.decision(m.upper), margin_distance(C))
        assert np.allclose(rule.decision(m.lower), -margin_distance(C))


@pytest.mark.parametrize("kernel", list(KernelType))
def test_boundary_is_idempotent(kernel):
    data = generate_dataset("nonlinear", seed=2)
    params = Hyperparameters(C=0.5, gamma=0.05)
    assert np.array_equal(boundary(kernel, params, data), boundary(kernel, params, data), equal_nan=True)


def _straddles_zero(df, xs, ys, x, y):
    """True when the lattice edge through a contour vertex changes sign."""
    edges = []
    if np.isclose(xs, x, atol=1e-9).any():
        j = int(np.clip(np.searchsorted(ys, y), 1, len(ys) - 1))
        edges.append(((x, ys[j - 1]), (x, ys[j])))
    if np.isclose(ys, y, atol=1e-9).any():
        i = int(np.clip(np.searchsorted(xs, x), 1, len(xs) - 1))
        edges.append(((xs[i - 1], y), (xs[i], y)))
    return any(df(np.array([a]))[0] * df(np.array([b]))[0] <= 1e-12 for a, b in edges)


@pytest.mark.parametrize("gamma", [0.01, 1.0])
def test_rbf_boundary_is_zero_level_set_of_classifier_rule(gamma):
    data = generate_dataset("nonlinear")
    params = Hyperparameters(C=0.1, gamma=gamma)
    df = build_decision_function(data, "rbf", params)
    xs, ys, _ = decision_surface(df, points=data.X)
    pts = _finite(boundary("rbf", params, data))
    assert len(pts) > 0
    # every contour vertex lies on a lattice edge whose ends straddle zero
    for x, y in pts:
        assert _straddles_zero(df, xs, ys, x, y), (x, y)


def test_lattice_contains_every_data_point():
    data = generate_dataset("soft", seed=3)
    df = build_decision_function(data, "rbf", Hyperparameters(C=0.3, gamma=1.0))
    xs, ys, Z = decision_surface(df, points=data.X)
    assert Z.shape == (len(ys), len(xs))
    assert np.all(np.diff(xs) > 0) and np.all(np.diff(ys) > 0)
    assert np.isin(data.X[:, 0], xs).all() and np.isin(data.X[:, 1], ys).all()


def test_narrow_rbf_bump_still_draws_a_boundary():
    data = generate_dataset("hard", seed=1)
    params = Hyperparameters(C=0.3, gamma=1.0)
    labels = predict_many(data.X, data, "rbf", params)
    assert set(labels) == {0, 1}
    assert len(_finite(boundary("rbf", params, data))) > 0


@pytest.mark.parametrize("kernel", ["rbf", "polynomial", "sigmoid"])
@pytest.mark.parametrize("gamma", [0.01, 0.5, 1.0])
def test_boundary_present_whenever_predictions_are_mixed(kernel, gamma):
    for mode in ("hard", "soft", "nonlinear"):
        for seed in range(8):
            data = generate_dataset(mode, seed=seed)
            for C in (0.1, 0.3, 1.0, 3.0):
                params = Hyperparameters(C=C, gamma=gamma)
                if len(set(predict_many(data.X, data, kernel, params))) == 2:
                    assert len(boundary(kernel, params, data)) > 0, (mode, seed, C)


def test_curved_boundary_and_margins_on_mirrored_points(mirrored_dataset):
    params = Hyperparameters(C=1.0, gamma=0.01)
    assert tag_support_vectors(mirrored_dataset, 1.0).support_mask.all()

    curve = _finite(boundary("rbf", params, mirrored_dataset))
    assert np.allclose(curve[:, 0], 50.0, atol=1e-6)
    assert curve[:, 1].min() == pytest.approx(0.0) and curve[:, 1].max() == pytest.approx(100.0)

    m = margins("rbf", params, mirrored_dataset)
    assert np.allclose(_finite(m.upper)[:, 0], 40.0, atol=1e-6)   # class-1 side
    assert np.allclose(_finite(m.lower)[:, 0], 60.0, atol=1e-6)


def test_curved_margins_stay_in_viewport():
    data = generate_dataset("nonlinear")
    m = margins("rbf", Hyperparameters(C=2.0, gamma=0.02), data)
    for curve in (m.upper, m.lower):
        pts = _finite(curve)
        assert np.all((pts >= -1e-9) & (pts <= 100.0 + 1e-9))


def test_degenerate_dataset_uses_fallback_line():
    for data in (Dataset(), Dataset.from_arrays([[10, 20], [70, 80]], [1, 1])):
        curve = boundary("linear", Hyperparameters(), data)
        assert len(curve) > 0
        assert np.allclose(curve.sum(axis=1), 105.0)


def test_tagging_returns_new_dataset():
    data = generate_dataset("hard")
    tagged = tag_support_vectors(data, 0.5)
    assert tagged is not data
    assert tagged.support_mask.any()
    assert not data.support_mask.any()
    assert np.array_equal(tagged.X, data.X)


def test_tagging_matches_distance_rule():
    data = generate_dataset("soft")
    for C in (0.3, 1.0, 5.0):
        rule = fit_linear_rule(data, C)
        expected = np.abs(rule.decision(data.X)) <= margin_distance(C)
        assert np.array_equal(tag_support_vectors(data, C).support_mask, expected)


def test_pieces_round_trip():
    a = np.array([[0.0, 0.0], [1.0, 1.0]])
    b = np.array([[5.0, 5.0], [6.0, 6.0], [7.0, 7.0]])
    joined = join_pieces([a, np.empty((0, 2)), b])
    assert joined.shape == (6, 2)
    pieces = split_pieces(joined)
    assert len(pieces) == 2
    assert np.array_equal(pieces[1], b)
    assert join_pieces([]).shape == (0, 2)


def test_tagging_is_exported_from_core_only():
    from svm_lab import core
    from svm_lab.core import geometry, linear

    assert core.tag_support_vectors is linear.tag_support_vectors
    assert not hasattr(geometry, "tag_support_vectors")
