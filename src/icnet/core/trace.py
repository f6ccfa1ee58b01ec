"""
ReductionTrace: per-step history of a reduction.

Records which rule fired and how many agents of each kind were live
afterwards. Arrays are built on demand for plotting and analysis.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from icnet.core.agents import AgentKind

if TYPE_CHECKING:
    from icnet.core.net import Net
    from icnet.core.scheduler import PairKind


# Column order of ReductionTrace.counts
KIND_ORDER: tuple[AgentKind, ...] = (
    AgentKind.CONSTRUCT,
    AgentKind.DUPLICATE,
    AgentKind.ERASE,
)


@dataclass
class ReductionTrace:
    """History of live agent counts across a reduction."""

    _steps: list[int] = field(default_factory=list)
    _rules: list["PairKind | None"] = field(default_factory=list)
    _counts: list[tuple[int, int, int]] = field(default_factory=list)

    def record(self, step: int, rule: "PairKind | None", net: "Net"):
        """Append one record; rule is None for the initial state."""
        tally = {kind: 0 for kind in KIND_ORDER}
        for agent in net.agents.values():
            tally[agent.kind] += 1
        self._steps.append(step)
        self._rules.append(rule)
        self._counts.append(tuple(tally[kind] for kind in KIND_ORDER))

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> np.ndarray:
        return np.asarray(self._steps, dtype=np.int64)

    @property
    def rules(self) -> list["PairKind | None"]:
        return list(self._rules)

    @property
    def counts(self) -> np.ndarray:
        """[n_records, 3] live counts in KIND_ORDER."""
        return np.asarray(self._counts, dtype=np.int64).reshape(-1, len(KIND_ORDER))

    @property
    def totals(self) -> np.ndarray:
        """Total live agents per record."""
        return self.counts.sum(axis=1)

    def growth(self) -> np.ndarray:
        """Change in live agent count caused by each recorded step."""
        return np.diff(self.totals)

    def rule_counts(self) -> dict[str, int]:
        """How many times each rule fired."""
        result: dict[str, int] = {}
        for rule in self._rules:
            if rule is not None:
                result[rule.value] = result.get(rule.value, 0) + 1
        return result
