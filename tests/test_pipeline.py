import numpy as np

from svm_lab.core.dataset import generate_dataset
from svm_lab.core.types import Hyperparameters, KernelType, MarginMode
from svm_lab.pipeline import parameter_grid, run_scene, scene_for_dataset


def test_hard_linear_scene_end_to_end():
    scene = run_scene("hard", "linear", Hyperparameters(C=1.0, gamma=0.1))
    assert scene.mode is MarginMode.HARD
    assert scene.kernel is KernelType.LINEAR
    assert scene.confusion.false_positive == 0 and scene.confusion.false_negative == 0
    assert scene.metrics.accuracy == 1.0
    assert np.linalg.norm(scene.boundary - np.array([50.0, 55.0]), axis=1).min() < 5.0
    assert len(scene.margins.upper) and len(scene.margins.lower)


def test_nonlinear_linear_scene_is_poor():
    scene = run_scene("nonlinear", "linear")
    assert scene.metrics.accuracy < 0.8


def test_scene_tags_a_copy_of_the_dataset():
    data = generate_dataset("soft")
    scene = scene_for_dataset(data, "rbf", Hyperparameters(C=0.5, gamma=0.1))
    assert scene.n_support_vectors == int(scene.dataset.support_mask.sum()) > 0
    assert not data.support_mask.any()
    assert scene.confusion.total == len(data)


def test_parameter_grid_is_row_major_over_c():
    data = generate_dataset("nonlinear")
    scenes = parameter_grid(data, "polynomial", degree=2)
    assert len(scenes) == 9
    assert [(s.params.C, s.params.gamma) for s in scenes[:4]] == [(0.1, 0.01), (0.1, 0.1), (0.1, 1.0), (1.0, 0.01)]
    assert all(s.params.degree == 2 for s in scenes)


def test_default_seed_is_reproducible():
    a = run_scene("soft", "sigmoid")
    b = run_scene("soft", "sigmoid")
    assert a.seed == b.seed
    assert np.array_equal(a.dataset.X, b.dataset.X)
    assert np.array_equal(a.boundary, b.boundary, equal_nan=True)
