"""Fitness bookkeeping and ranking of individuals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np

from .genes import Gene
from .logging import get_logger
from .population import PopulationStore

FitnessFn = Callable[[Sequence[Gene], int, Any], float]

# Fitness of an entry that has not been evaluated yet.
UNEVALUATED = -1.0

logger = get_logger(__name__)


@dataclass
class RankEntry:
    index: int
    fitness: float = UNEVALUATED


class RankingTable:
    """Per-individual fitness kept sorted best first."""

    def __init__(self, population_size: int) -> None:
        self.entries: list[RankEntry] = [RankEntry(i) for i in range(population_size)]

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, rank: int) -> RankEntry:
        return self.entries[rank]

    @property
    def best(self) -> RankEntry:
        return self.entries[0]

    def parent_index(self, rank: int) -> int:
        """Individual index occupying rank position ``rank``."""

        return self.entries[rank].index

    def fitnesses(self) -> np.ndarray:
        return np.array([entry.fitness for entry in self.entries], dtype=float)

    def evaluate(self, store: PopulationStore, fitness_fn: FitnessFn, context: Any) -> None:
        """Score every individual and re-sort descending by fitness.

        The callback receives copies of the genes, is called once per
        individual in index order, and any exception it raises propagates.
        Entries with equal fitness keep their previous relative order.
        """

        scores = [
            float(fitness_fn(store.snapshot(i), store.gene_count, context))
            for i in range(len(self.entries))
        ]
        for entry in self.entries:
            entry.fitness = scores[entry.index]
        self.entries.sort(key=lambda entry: entry.fitness, reverse=True)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "ranking "
                + " ".join(f"{entry.index}:{entry.fitness}" for entry in self.entries)
            )


__all__ = ["FitnessFn", "RankEntry", "RankingTable", "UNEVALUATED"]
