#!/usr/bin/env python3
"""
Demo: Erasure Propagation

Each scenario pattern is reduced to normal form and its history
printed. All of them end with an empty net: erasers spread through
every 3-port agent they meet, then annihilate in pairs.

Output: output/demo_erasure/commutation.png
"""

from pathlib import Path

import matplotlib.pyplot as plt

from icnet.core import AgentKind, Net, Reducer
from icnet.patterns import (
    create_annihilation_pair,
    create_erase_pair,
    create_erased_agent,
    create_erased_commutation,
)
from icnet.viz import plot_agent_counts, plot_rule_counts, save_figure


SCENARIOS = {
    "erase pair": create_erase_pair,
    "erased construct": lambda net: create_erased_agent(net, AgentKind.CONSTRUCT),
    "erased duplicate": lambda net: create_erased_agent(net, AgentKind.DUPLICATE),
    "construct annihilation": lambda net: create_annihilation_pair(net, AgentKind.CONSTRUCT),
    "duplicate annihilation": lambda net: create_annihilation_pair(net, AgentKind.DUPLICATE),
    "erased commutation": create_erased_commutation,
}


def main():
    print("=" * 60)
    print("  ERASURE PROPAGATION")
    print("=" * 60)

    reducers = {}
    for name, build in SCENARIOS.items():
        net = Net()
        build(net)
        start = len(net)
        reducer = Reducer(net)
        stats = reducer.run()
        reducers[name] = reducer
        print(f"\n{name}:")
        print(f"   {start} agents -> {stats['live_agents']} in {stats['n_steps']} steps")
        print(f"   live counts: {reducer.trace.totals.tolist()}")

    output_dir = Path("output/demo_erasure")
    output_dir.mkdir(parents=True, exist_ok=True)

    trace = reducers["erased commutation"].trace
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    plot_agent_counts(trace, title="Erased commutation", ax=axes[0])
    plot_rule_counts(trace, ax=axes[1])
    fig.tight_layout()
    save_figure(fig, output_dir / "commutation.png")
    plt.close(fig)
    print(f"\n   Saved to: {output_dir / 'commutation.png'}")


if __name__ == "__main__":
    main()
