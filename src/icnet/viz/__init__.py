"""
Visualization utilities.

- Live agent counts over a reduction
- Rule histograms
- Static 2D wiring diagrams
"""

from icnet.viz.trace import (
    KIND_COLORS,
    plot_agent_counts,
    plot_rule_counts,
    save_figure,
)
from icnet.viz.net import circular_layout, plot_net

__all__ = [
    "KIND_COLORS",
    "plot_agent_counts",
    "plot_rule_counts",
    "save_figure",
    "circular_layout",
    "plot_net",
]
