"""
Static 2D wiring diagram of a net.

Agents sit on a circle in identifier order, coloured by kind. Wires
between two principal ports (active pairs) are drawn solid and dark;
every other wire is drawn faint.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from icnet.viz.trace import KIND_COLORS

if TYPE_CHECKING:
    from icnet.core.net import Net


def circular_layout(ids: list[int], radius: float = 1.0) -> dict[int, np.ndarray]:
    """Place agents evenly on a circle, in the given order."""
    n = max(len(ids), 1)
    angles = 2 * np.pi * np.arange(len(ids)) / n
    return {
        agent_id: radius * np.array([np.cos(theta), np.sin(theta)])
        for agent_id, theta in zip(ids, angles)
    }


def plot_net(
    net: "Net",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (6, 6),
    principal_only: bool = False,
    show_labels: bool = True,
) -> tuple[Figure, Axes]:
    """
    Draw the wiring of a net.

    Args:
        net: Net to draw
        title: Plot title
        ax: Existing axes (creates new if None)
        figsize: Figure size if creating new figure
        principal_only: Only draw principal-to-principal wires
        show_labels: Annotate agents with their identifiers

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ids = net.ids()
    positions = circular_layout(ids)

    for agent in net.iter_agents():
        for index, target in enumerate(agent.ports):
            # Each wire once, from its smaller endpoint
            if (target.agent, target.index) < (agent.id, index):
                continue
            principal = index == 0 and target.is_principal
            if principal_only and not principal:
                continue
            start, end = positions[agent.id], positions[target.agent]
            ax.plot(
                [start[0], end[0]], [start[1], end[1]],
                color="black" if principal else "0.7",
                linewidth=2.0 if principal else 1.0,
                zorder=1,
            )

    for agent in net.iter_agents():
        x, y = positions[agent.id]
        ax.scatter([x], [y], color=KIND_COLORS[agent.kind.value], s=200, zorder=2)
        if show_labels:
            ax.annotate(
                str(agent.id), (x, y),
                xytext=(8, 8), textcoords="offset points", fontsize=9,
            )

    ax.set_aspect("equal")
    ax.set_xlim(-1.3, 1.3)
    ax.set_ylim(-1.3, 1.3)
    ax.axis("off")
    ax.set_title(title or f"{len(net)} agents, next id {net.next_id}")

    return fig, ax
