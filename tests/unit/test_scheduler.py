"""Unit tests for active-pair detection, priority dispatch and the Reducer."""

import numpy as np
import pytest

from icnet.analysis import is_well_formed, same_shape
from icnet.core import (
    AgentKind,
    Net,
    NetConfig,
    PairKind,
    Port,
    PRIORITY,
    Reducer,
    ReducerConfig,
    find_active_pairs,
    reduce_to_normal_form,
    select_pair,
)
from icnet.patterns import (
    SEED_PERIOD,
    create_annihilation_pair,
    create_erase_pair,
    create_erased_agent,
    create_erased_commutation,
)


class TestFindActivePairs:
    """Tests for find_active_pairs."""

    def test_seed_has_one_commutation(self, seed_net):
        buckets = find_active_pairs(seed_net)
        assert buckets[PairKind.CONSTRUCT_DUPLICATE] == [(2, 3)]
        assert sum(len(b) for b in buckets.values()) == 1

    def test_all_buckets_present(self, empty_net):
        buckets = find_active_pairs(empty_net)
        assert set(buckets) == set(PairKind)
        assert all(bucket == [] for bucket in buckets.values())

    def test_pair_seen_once(self, erase_pair_net):
        buckets = find_active_pairs(erase_pair_net)
        assert buckets[PairKind.ERASE_ERASE] == [(0, 1)]

    def test_erase_normalised_after_construct(self):
        net = Net()
        e = net.create_erase()
        c = net.create_construct()
        x = net.create_erase()
        y = net.create_erase()
        net.connect(Port(e, 0), Port(c, 0))
        net.connect(Port(c, 1), Port(x, 0))
        net.connect(Port(c, 2), Port(y, 0))

        buckets = find_active_pairs(net)
        assert buckets[PairKind.CONSTRUCT_ERASE] == [(c, e)]

    def test_duplicate_normalised_after_construct(self):
        net = Net()
        d = net.create_duplicate()
        c = net.create_construct()
        net.connect(Port(d, 0), Port(c, 0))
        net.connect(Port(d, 1), Port(c, 1))
        net.connect(Port(d, 2), Port(c, 2))

        buckets = find_active_pairs(net)
        assert buckets[PairKind.CONSTRUCT_DUPLICATE] == [(c, d)]

    def test_aux_to_principal_is_not_active(self):
        net = Net()
        create_erased_agent(net, AgentKind.DUPLICATE)
        buckets = find_active_pairs(net)
        # Only the principal-principal wire counts
        assert sum(len(b) for b in buckets.values()) == 1
        assert buckets[PairKind.DUPLICATE_ERASE] == [(0, 3)]


class TestSelectPair:
    """Tests for select_pair and the priority order."""

    def test_priority_order(self):
        assert PRIORITY == (
            PairKind.ERASE_ERASE,
            PairKind.DUPLICATE_ERASE,
            PairKind.CONSTRUCT_ERASE,
            PairKind.DUPLICATE_DUPLICATE,
            PairKind.CONSTRUCT_CONSTRUCT,
            PairKind.CONSTRUCT_DUPLICATE,
        )

    def test_empty_buckets(self):
        assert select_pair({kind: [] for kind in PairKind}) is None

    def test_highest_priority_wins(self):
        buckets = {kind: [] for kind in PairKind}
        buckets[PairKind.CONSTRUCT_DUPLICATE] = [(0, 1)]
        buckets[PairKind.CONSTRUCT_CONSTRUCT] = [(2, 3)]
        buckets[PairKind.DUPLICATE_ERASE] = [(4, 5)]
        assert select_pair(buckets) == (PairKind.DUPLICATE_ERASE, (4, 5))

    def test_tie_break(self):
        buckets = {kind: [] for kind in PairKind}
        buckets[PairKind.ERASE_ERASE] = [(0, 1), (2, 3), (4, 5)]
        assert select_pair(buckets, "lowest") == (PairKind.ERASE_ERASE, (0, 1))
        assert select_pair(buckets, "highest") == (PairKind.ERASE_ERASE, (4, 5))

    def test_unknown_tie_break(self):
        with pytest.raises(ValueError):
            select_pair({kind: [] for kind in PairKind}, "random")


class TestStep:
    """Tests for Net.step."""

    def test_erasers_before_commutation(self):
        net = Net()
        create_erased_commutation(net)
        create_erase_pair(net)
        assert net.step()
        assert net.last_rule is PairKind.ERASE_ERASE

    def test_erasure_before_annihilation(self):
        net = Net()
        create_annihilation_pair(net, AgentKind.CONSTRUCT)
        create_erased_agent(net, AgentKind.CONSTRUCT)
        assert net.step()
        assert net.last_rule is PairKind.CONSTRUCT_ERASE

    def test_tie_break_lowest(self):
        net = Net(NetConfig(tie_break="lowest"))
        create_erase_pair(net)
        create_erase_pair(net)
        net.step()
        assert net.ids() == [2, 3]

    def test_tie_break_highest(self):
        net = Net(NetConfig(tie_break="highest"))
        create_erase_pair(net)
        create_erase_pair(net)
        net.step()
        assert net.ids() == [0, 1]

    def test_normal_form_is_stable(self, erase_pair_net):
        assert erase_pair_net.step()
        for _ in range(3):
            assert erase_pair_net.step() is False
        assert erase_pair_net.is_normal_form()

    def test_no_mutation_at_normal_form(self):
        net = Net()
        a = net.create_construct()
        x = net.create_erase()
        net.connect(Port(a, 0), Port(a, 1))
        net.connect(Port(a, 2), Port(x, 0))
        before = net.dump()
        assert net.step() is False
        assert net.dump() == before
        assert net.steps_taken == 0

    def test_unwired_agent_is_fatal(self, empty_net):
        from icnet.core import UnwiredPortError
        empty_net.create_construct()
        with pytest.raises(UnwiredPortError):
            empty_net.step()


class TestSeedReduction:
    """Tests for reducing the canonical seed."""

    def test_first_period_rules(self, seed_net):
        rules = []
        for _ in range(SEED_PERIOD):
            assert seed_net.step()
            rules.append(seed_net.last_rule)
        assert rules == [
            PairKind.CONSTRUCT_DUPLICATE,
            PairKind.DUPLICATE_ERASE,
            PairKind.CONSTRUCT_ERASE,
            PairKind.ERASE_ERASE,
        ]

    def test_first_period_live_ids(self, seed_net):
        expected = [
            [0, 1, 2, 3, 4, 5],
            [0, 1, 2, 3, 4, 6],
            [0, 1, 2, 3, 6, 7],
            [0, 2, 3, 7],
        ]
        for live in expected:
            seed_net.step()
            assert seed_net.ids() == live
        assert seed_net.next_id == 8

    def test_seed_is_periodic(self, seed_net):
        for _ in range(SEED_PERIOD):
            seed_net.step()
        assert len(seed_net) == 4
        assert same_shape(seed_net, Net.seed())

    def test_seed_never_reaches_normal_form(self, seed_net):
        for _ in range(10 * SEED_PERIOD):
            assert seed_net.step() is True
            assert is_well_formed(seed_net)
        assert seed_net.next_id == 4 + 10 * SEED_PERIOD

    def test_involution_on_every_step(self, seed_net):
        for _ in range(20):
            seed_net.step()
            for agent in seed_net.iter_agents():
                for index in range(len(agent.ports)):
                    port = Port(agent.id, index)
                    assert seed_net.follow(seed_net.follow(port)) == port


class TestReducer:
    """Tests for the Reducer driver."""

    def test_run_to_normal_form(self):
        net = Net()
        create_erased_commutation(net)
        reducer = Reducer(net)
        stats = reducer.run()

        assert stats["n_steps"] == 9
        assert stats["normal_form"] is True
        assert stats["live_agents"] == 0
        assert stats["rule_counts"]["construct-duplicate"] == 1
        assert stats["rule_counts"]["construct-erase"] == 2
        assert stats["rule_counts"]["duplicate-erase"] == 2
        assert stats["rule_counts"]["erase-erase"] == 4

    def test_run_budget_on_seed(self, seed_net):
        reducer = Reducer(seed_net, ReducerConfig(max_steps=12))
        stats = reducer.run()

        assert stats["n_steps"] == 12
        assert stats["normal_form"] is False
        assert stats["live_agents"] == 4
        assert stats["next_id"] == 16
        assert stats["rule_counts"]["construct-construct"] == 0
        assert stats["rule_counts"]["duplicate-duplicate"] == 0
        assert stats["rule_counts"]["construct-duplicate"] == 3

    def test_run_accumulates_steps(self, seed_net):
        reducer = Reducer(seed_net)
        reducer.run(3)
        stats = reducer.run(5)
        assert stats["n_steps"] == 5
        assert stats["current_step"] == 8

    def test_run_zero_steps(self, erase_pair_net):
        stats = Reducer(erase_pair_net).run(0)
        assert stats["n_steps"] == 0
        assert stats["normal_form"] is False
        assert len(erase_pair_net) == 2

    def test_run_negative_budget(self, erase_pair_net):
        with pytest.raises(ValueError):
            Reducer(erase_pair_net).run(-1)

    def test_run_empty_net(self, empty_net):
        stats = Reducer(empty_net).run()
        assert stats["n_steps"] == 0
        assert stats["normal_form"] is True

    def test_trace_records(self, seed_net):
        reducer = Reducer(seed_net)
        reducer.run(SEED_PERIOD)
        trace = reducer.trace

        assert len(trace) == SEED_PERIOD + 1
        assert np.array_equal(trace.steps, np.arange(SEED_PERIOD + 1))
        assert np.array_equal(trace.totals, [4, 6, 6, 6, 4])
        assert np.array_equal(trace.growth(), [2, 0, 0, -2])
        assert trace.rules[0] is None
        # Construct, Duplicate, Erase columns
        assert trace.counts[0].tolist() == [1, 1, 2]
        assert trace.counts[1].tolist() == [2, 2, 2]

    def test_trace_disabled(self, seed_net):
        reducer = Reducer(seed_net, ReducerConfig(record_trace=False))
        reducer.run(4)
        assert len(reducer.trace) == 0

    def test_tie_break_comes_from_net_config(self):
        net = Net(NetConfig(tie_break="highest"))
        create_erase_pair(net)
        create_erase_pair(net)
        Reducer(net).run(1)
        assert net.ids() == [0, 1]

    def test_reducers_keep_separate_traces(self, seed_net, erase_pair_net):
        first = Reducer(seed_net)
        second = Reducer(erase_pair_net)
        first.run(2)
        assert first.trace is not second.trace
        assert len(first.trace) == 3
        assert len(second.trace) == 1

    def test_reduce_to_normal_form(self, erase_pair_net):
        stats = reduce_to_normal_form(erase_pair_net)
        assert stats["n_steps"] == 1
        assert stats["normal_form"] is True
