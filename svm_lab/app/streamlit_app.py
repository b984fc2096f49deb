# svm_lab/app/streamlit_app.py
# Interactive SVM visualizer.
# - Pick a profession (vocabulary), a margin mode (dataset) and a seed
# - Tune kernel, C, gamma (and degree for the polynomial kernel)
# - See boundary, margins, support vectors, metrics and the C x gamma grid
#
# Run with:  streamlit run svm_lab/app/streamlit_app.py

import matplotlib.pyplot as plt
import streamlit as st

from svm_lab.core.dataset import MARGIN_MODE_INFO, generate_dataset
from svm_lab.core.types import Hyperparameters, KernelType, MarginMode
from svm_lab.pipeline import parameter_grid, scene_for_dataset
from svm_lab.plots.plotting import plot_confusion, plot_parameter_grid, plot_scene
from svm_lab.professions import (
    PROFESSION_DESCRIPTIONS,
    PROFESSION_ICONS,
    Profession,
    describe_metrics,
    terms_for,
)


@st.cache_data
def load_dataset(mode: str, seed: int):
    return generate_dataset(mode, seed=seed)


st.set_page_config(page_title="SVM Visualizer", layout="wide")
st.title("SVM Visualizer")

with st.sidebar:
    st.header("Who are you?")
    profession = st.selectbox(
        "Profession",
        [p.value for p in Profession],
        format_func=lambda v: f"{PROFESSION_ICONS[Profession(v)]} {v.capitalize()}",
    )
    st.caption(PROFESSION_DESCRIPTIONS[Profession(profession)])

    st.markdown("---")
    st.header("Dataset")
    mode = st.radio(
        "Margin type",
        [m.value for m in MarginMode],
        format_func=lambda v: f"{MARGIN_MODE_INFO[MarginMode(v)]['title']} ({MARGIN_MODE_INFO[MarginMode(v)]['difficulty']})",
    )
    st.caption(MARGIN_MODE_INFO[MarginMode(mode)]["description"])
    seed = st.number_input("Random seed", value=7, step=1, min_value=0)

    st.markdown("---")
    st.header("Hyperparameters")
    kernel = st.radio("Kernel type", [k.value for k in KernelType], horizontal=True)
    C = st.slider("Regularization (C)", 0.1, 10.0, 1.0, 0.1)
    st.caption("Controls the trade-off between margin size and misclassification")
    gamma = st.slider("Gamma (γ)", 0.01, 1.0, 0.1, 0.01)
    st.caption("Defines influence of single training examples")
    degree = 3
    if kernel == KernelType.POLYNOMIAL.value:
        degree = st.slider("Degree", 1, 6, 3, 1)

terms = terms_for(profession)
data = load_dataset(mode, int(seed))
params = Hyperparameters(C=C, gamma=gamma, degree=degree)
scene = scene_for_dataset(data, kernel, params, mode=MarginMode(mode), seed=int(seed))

st.caption(f"{profession.capitalize()} • {MARGIN_MODE_INFO[MarginMode(mode)]['title']}")
left, right = st.columns([2, 1])

with left:
    fig = plot_scene(scene, terms=terms)
    st.pyplot(fig)
    plt.close(fig)

with right:
    st.subheader("Quick Stats")
    neg, pos = scene.dataset.class_counts()
    st.metric("Total Points", len(scene.dataset))
    st.metric("Support Vectors", scene.n_support_vectors)
    st.metric(terms.positive, pos)
    st.metric(terms.negative, neg)

metrics_tab, grid_tab = st.tabs(["Metrics", "Parameter Grid"])

with metrics_tab:
    st.subheader("Performance Metrics")
    cols = st.columns(4)
    for col, (label, value) in zip(cols, describe_metrics(scene.metrics, terms)):
        col.metric(label, f"{value * 100:.0f}%")

    st.subheader("Confusion Matrix")
    cm = scene.confusion
    st.table({
        "": [f"Actual {terms.positive}", f"Actual {terms.negative}"],
        f"Predicted {terms.positive}": [
            f"{cm.true_positive} ({terms.true_positive})",
            f"{cm.false_positive} ({terms.false_positive})",
        ],
        f"Predicted {terms.negative}": [
            f"{cm.false_negative} ({terms.false_negative})",
            f"{cm.true_negative} ({terms.true_negative})",
        ],
    })
    fig = plot_confusion(cm, terms=terms)
    st.pyplot(fig)
    plt.close(fig)

with grid_tab:
    st.subheader("Parameter Combinations Grid")
    st.caption("Explore how different C and gamma values affect the decision boundary")
    fig = plot_parameter_grid(parameter_grid(data, kernel, degree=degree), terms=terms)
    st.pyplot(fig)
    plt.close(fig)
