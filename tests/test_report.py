import numpy as np
import pandas as pd

from genetic_optimizer.engine import GeneticAlgorithm
from genetic_optimizer.genes import Gene
from genetic_optimizer.report import history_frame, population_frame


def _fitness(genes, n, ctx):
    return float(genes[0].current + genes[1].current)


def _engine():
    template = [Gene.integer(1, 0, 9), Gene.double(0.0, 0.0, 1.0)]
    return GeneticAlgorithm(template, 6, 3, 2, 1, None, _fitness, rng=np.random.default_rng(5))


def test_population_frame_follows_ranking():
    ga = _engine()
    ga.step()
    df = population_frame(ga)
    assert list(df.columns) == ["rank", "individual", "fitness", "gene_0", "gene_1"]
    assert len(df) == 6
    assert df["fitness"].is_monotonic_decreasing
    top = df.iloc[0]
    assert top["individual"] == ga.ranking.best.index
    assert top["fitness"] == ga.best_score()
    assert top["gene_0"] == ga.best_solution()[0].current


def test_history_frame():
    ga = _engine()
    ga.run()
    df = history_frame(ga)
    assert list(df["epoch"]) == [1, 2, 3]
    assert list(df["best_score"]) == ga.history


def test_population_frame_keeps_integer_genes():
    ga = _engine()
    df = population_frame(ga)
    assert pd.api.types.is_integer_dtype(df["gene_0"])
    assert pd.api.types.is_float_dtype(df["gene_1"])
