"""Tabular views of a running genetic algorithm."""

from __future__ import annotations

import pandas as pd

from .engine import GeneticAlgorithm


def population_frame(engine: GeneticAlgorithm) -> pd.DataFrame:
    """One row per rank position with fitness and gene values.

    Columns are ``rank``, ``individual``, ``fitness`` followed by
    ``gene_0`` … ``gene_{n-1}``.
    """

    rows = []
    for rank, entry in enumerate(engine.ranking.entries):
        row = {"rank": rank, "individual": entry.index, "fitness": entry.fitness}
        for i, gene in enumerate(engine.store.individual(entry.index)):
            row[f"gene_{i}"] = gene.current
        rows.append(row)
    return pd.DataFrame(rows)


def history_frame(engine: GeneticAlgorithm) -> pd.DataFrame:
    """Best score recorded after every completed epoch."""

    return pd.DataFrame(
        {
            "epoch": range(1, len(engine.history) + 1),
            "best_score": engine.history,
        }
    )


__all__ = ["population_frame", "history_frame"]
