import matplotlib.pyplot as plt
import pytest

from svm_lab.core.dataset import generate_dataset
from svm_lab.pipeline import parameter_grid, run_scene
from svm_lab.plots.plotting import plot_confusion, plot_parameter_grid, plot_scene
from svm_lab.professions import terms_for


def test_plot_scene_for_every_kernel():
    for kernel in ("linear", "rbf", "polynomial", "sigmoid"):
        fig = plot_scene(run_scene("nonlinear", kernel), terms=terms_for("marketing"))
        labels = fig.axes[0].get_legend_handles_labels()[1]
        assert "Will Convert" in labels
        plt.close(fig)


def test_plot_parameter_grid_shape():
    scenes = parameter_grid(generate_dataset("hard"), "rbf")
    fig = plot_parameter_grid(scenes)
    assert len(fig.axes) == 9
    plt.close(fig)
    with pytest.raises(ValueError):
        plot_parameter_grid(scenes[:4])


def test_plot_confusion():
    fig = plot_confusion(run_scene("soft", "linear").confusion, terms=terms_for("medical"))
    assert fig.axes[0].get_xlabel() == "Predicted"
    plt.close(fig)
