import numpy as np
import pytest

from genetic_optimizer.genes import Gene
from genetic_optimizer.population import PopulationStore
from genetic_optimizer.ranking import UNEVALUATED, RankingTable


def _store(values):
    store = PopulationStore([Gene.double(0.0, -10.0, 10.0)], len(values))
    for i, v in enumerate(values):
        store.gene(i, 0).current = v
    return store


def test_entries_start_unevaluated():
    table = RankingTable(3)
    assert [e.index for e in table.entries] == [0, 1, 2]
    assert all(e.fitness == UNEVALUATED for e in table.entries)


def test_evaluate_sorts_descending():
    store = _store([1.0, 5.0, -2.0, 3.0])
    table = RankingTable(4)
    table.evaluate(store, lambda genes, n, ctx: genes[0].current, None)
    assert [e.index for e in table.entries] == [1, 3, 0, 2]
    assert np.all(np.diff(table.fitnesses()) <= 0)
    assert table.best.fitness == 5.0
    assert table.parent_index(1) == 3


def test_evaluate_calls_in_index_order_with_context():
    store = _store([1.0, 2.0, 3.0])
    calls = []
    ctx = object()

    def fitness(genes, n, context):
        calls.append((genes[0].current, n, context))
        return 0.0

    RankingTable(3).evaluate(store, fitness, ctx)
    assert calls == [(1.0, 1, ctx), (2.0, 1, ctx), (3.0, 1, ctx)]


def test_ties_keep_previous_order():
    store = _store([0.0, 0.0, 0.0, 0.0])
    table = RankingTable(4)
    table.evaluate(store, lambda genes, n, ctx: 1.0, None)
    table.entries.reverse()
    table.evaluate(store, lambda genes, n, ctx: 1.0, None)
    assert [e.index for e in table.entries] == [3, 2, 1, 0]


def test_fitness_error_propagates():
    def boom(genes, n, ctx):
        raise RuntimeError("bad fitness")

    with pytest.raises(RuntimeError):
        RankingTable(2).evaluate(_store([1.0, 2.0]), boom, None)
