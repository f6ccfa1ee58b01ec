"""
Reduction history plots.

Plots live agent counts per kind over the steps of a reduction, and how
often each rule fired.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from icnet.core.trace import KIND_ORDER

if TYPE_CHECKING:
    from icnet.core.trace import ReductionTrace


# Agent colours: Construct blue, Duplicate green, Erase red
KIND_COLORS = {
    "c": (0.0, 0.0, 1.0),
    "d": (0.0, 0.6, 0.0),
    "e": (1.0, 0.0, 0.0),
}

KIND_LABELS = {
    "c": "Construct",
    "d": "Duplicate",
    "e": "Erase",
}


def plot_agent_counts(
    trace: "ReductionTrace",
    title: str = "Live agents",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
    show_total: bool = True,
) -> tuple[Figure, Axes]:
    """
    Plot live agent counts per kind against step number.

    Args:
        trace: Recorded reduction
        title: Plot title
        ax: Existing axes (creates new if None)
        figsize: Figure size if creating new figure
        show_total: Also draw the total live count

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    steps = trace.steps
    counts = trace.counts

    for column, kind in enumerate(KIND_ORDER):
        ax.step(
            steps, counts[:, column],
            where="post",
            color=KIND_COLORS[kind.value],
            label=KIND_LABELS[kind.value],
        )

    if show_total:
        ax.step(steps, trace.totals, where="post", color="black", linestyle="--", label="Total")

    ax.set_xlabel("Step")
    ax.set_ylabel("Live agents")
    ax.set_title(title)
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_rule_counts(
    trace: "ReductionTrace",
    title: str = "Rules applied",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
) -> tuple[Figure, Axes]:
    """Bar chart of how many times each rule fired."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    rule_counts = trace.rule_counts()
    names = sorted(rule_counts)
    values = np.array([rule_counts[name] for name in names], dtype=np.int64)

    ax.bar(np.arange(len(names)), values, color="0.4")
    ax.set_xticks(np.arange(len(names)))
    ax.set_xticklabels(names, rotation=30, ha="right")
    ax.set_ylabel("Count")
    ax.set_title(title)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
