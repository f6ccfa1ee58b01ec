#!/usr/bin/env python3
"""
Demo: The Seed Net Never Stops

The canonical seed wires a Construct and a Duplicate principal to
principal, with one of the Duplicate's auxiliary ports looping back
into the Construct:

1. Commutation: the pair copies itself through the other (+2 agents)
2. The copies meet the two erasers and are erased (count unchanged)
3. The erasers meet each other and vanish (-2 agents)
4. What is left is the seed again, with fresh identifiers

Output: output/demo_seed/agent_counts.png, output/demo_seed/seed.png
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from icnet.core import Net, Reducer, ReducerConfig
from icnet.analysis import same_shape, check_invariants
from icnet.patterns import SEED_PERIOD
from icnet.viz import plot_agent_counts, plot_net, save_figure


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("  SEED NET REDUCTION")
    print("=" * 60)

    net = Net.seed()
    print("\n1. Seed net:")
    print(net.dump())

    print("2. One period, step by step...")
    for _ in range(SEED_PERIOD):
        net.step()
        check_invariants(net)
        print(f"   step {net.steps_taken}: {net.last_rule.value}, {len(net)} live agents")
    print()
    print(net.dump())
    print(f"   Same shape as the seed: {same_shape(net, Net.seed())}")

    print("\n3. Running 40 more steps...")
    reducer = Reducer(net, ReducerConfig(max_steps=40))
    stats = reducer.run()
    print(f"   Steps: {stats['n_steps']}, normal form: {stats['normal_form']}")
    print(f"   Live agents: {stats['live_agents']}, next id: {stats['next_id']}")
    for rule, count in stats["rule_counts"].items():
        print(f"   {rule:22s} {count}")

    output_dir = Path("output/demo_seed")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, _ = plot_agent_counts(reducer.trace, title="Seed net: live agents per step")
    save_figure(fig, output_dir / "agent_counts.png")
    plt.close(fig)

    fig, _ = plot_net(Net.seed(), title="Seed net")
    save_figure(fig, output_dir / "seed.png")
    plt.close(fig)
    print(f"\n   Saved plots to: {output_dir}")


if __name__ == "__main__":
    main()
