"""Evolution driver for bounded gene vectors.

The driver owns a :class:`PopulationStore` and a :class:`RankingTable`.  Each
epoch runs ``num_genes_to_modify`` update passes.  An update pass leaves the
top ``num_parents`` ranked individuals (the elite) untouched and rebuilds the
rest of the population from them, split by rank into three bands:

* mutation band: copy a random elite parent, then mutate one random gene;
* crossover band: pairs of individuals receive the same random elite parent
  and exchange one gene at the same offset;
* translation band: copy a random elite parent, then shift one random gene
  by +1 or -1.

After the bands are processed the whole population is re-evaluated and
re-ranked.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Sequence

import numpy as np

from .genes import Gene
from .logging import get_logger
from .operators import crossover, mutate, translate
from .population import PopulationStore
from .ranking import FitnessFn, RankingTable

logger = get_logger(__name__)


class GeneticAlgorithm:
    """Elitist genetic algorithm over a fixed-length vector of genes.

    Parameters
    ----------
    template:
        Initial gene vector.  Its length fixes the number of genes per
        individual and its kinds and bounds are shared by every individual.
    population_size:
        Number of individuals.
    epochs:
        Number of :meth:`step` calls after which the run is complete.
    num_parents:
        Size of the elite breeding pool at the top of the ranking.
    num_genes_to_modify:
        Update passes per epoch, clamped to ``[1, len(template)]``.
    user_context:
        Opaque value handed unchanged to ``fitness_fn``.
    fitness_fn:
        Callable ``(genes, gene_count, user_context) -> float``.  Higher is
        better.  It receives copies of the genes.
    rng:
        Random source for every draw.  A fresh default generator is created
        when omitted.
    """

    def __init__(
        self,
        template: Sequence[Gene],
        population_size: int,
        epochs: int,
        num_parents: int,
        num_genes_to_modify: int,
        user_context: Any,
        fitness_fn: FitnessFn,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not template:
            raise ValueError("template must contain at least one gene")
        if population_size <= 0:
            raise ValueError("population_size must be positive")
        if epochs <= 0:
            raise ValueError("epochs must be positive")
        if num_parents <= 0:
            raise ValueError("num_parents must be positive")
        if num_parents > population_size:
            raise ValueError("num_parents cannot exceed population_size")

        self.epochs = epochs
        self.num_parents = num_parents
        self.num_genes_to_modify = min(max(1, num_genes_to_modify), len(template))
        self.user_context = user_context
        self.fitness_fn = fitness_fn
        self.rng = rng or np.random.default_rng()
        self.history: list[float] = []
        self._epoch = 0

        self.store = PopulationStore(template, population_size)
        self.store.randomize(self.rng)
        self.ranking = RankingTable(population_size)
        self._evaluate()

        logger.info(
            "genetic algorithm initialised",
            extra={
                "population_size": population_size,
                "gene_count": self.store.gene_count,
                "best_score": self.best_score(),
            },
        )

    # ------------------------------------------------------------------
    @property
    def population_size(self) -> int:
        return self.store.population_size

    @property
    def gene_count(self) -> int:
        return self.store.gene_count

    @property
    def current_epoch(self) -> int:
        return self._epoch

    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Advance one epoch.

        Returns ``False`` once the epoch counter has reached ``epochs`` and
        ``True`` while more epochs remain.
        """

        self._epoch += 1
        for _ in range(self.num_genes_to_modify):
            self._update()
        self.history.append(self.best_score())

        logger.info(
            "epoch complete",
            extra={
                "epoch": self._epoch,
                "progress": self.progress(),
                "best_score": self.best_score(),
            },
        )
        return self._epoch < self.epochs

    def run(self, on_epoch: Optional[Callable[["GeneticAlgorithm"], None]] = None) -> list[Gene]:
        """Step until the run is complete and return the best solution."""

        while self._epoch < self.epochs:
            self.step()
            if on_epoch is not None:
                on_epoch(self)
        return self.best_solution()

    def progress(self) -> int:
        """Completed share of the run as a whole percentage."""

        if self._epoch >= self.epochs:
            return 100
        percent = int(math.floor(0.5 + 100.0 * self._epoch / self.epochs))
        return min(percent, 99)

    def has_solution(self) -> bool:
        return self.ranking.best.fitness >= 0

    def best_score(self) -> float:
        return self.ranking.best.fitness

    def best_solution(self) -> list[Gene]:
        """Copy of the genes of the best ranked individual."""

        return self.store.snapshot(self.ranking.best.index)

    # ------------------------------------------------------------------
    def bands(self) -> tuple[range, range, range]:
        """Rank positions handled by the mutation, crossover and translation bands.

        The crossover band boundaries are rounded down to even positions so
        it always holds whole pairs.  Any remainder of the split lands in the
        translation band.
        """

        start = self.num_parents
        third = (self.population_size - start) // 3

        mutation = range(start, start + third)

        cross_start = start + third
        cross_end = cross_start + third
        cross_start -= cross_start % 2
        cross_end -= cross_end % 2
        crossover_band = range(cross_start, cross_end)

        translation = range(max(cross_end, start), self.population_size)
        return mutation, crossover_band, translation

    def _pick_parent(self) -> int:
        return self.ranking.parent_index(int(self.rng.integers(0, self.num_parents)))

    def _pick_offset(self) -> int:
        return int(self.rng.integers(0, self.gene_count))

    def _update(self) -> None:
        mutation, crossover_band, translation = self.bands()

        for rank in mutation:
            child = self.ranking.parent_index(rank)
            self.store.copy_genes(self._pick_parent(), child)
            mutate(self.store.gene(child, self._pick_offset()), self.rng)

        for rank in range(crossover_band.start, crossover_band.stop, 2):
            parent = self._pick_parent()
            child = self.ranking.parent_index(rank)
            child2 = self.ranking.parent_index(rank + 1)
            self.store.copy_genes(parent, child)
            self.store.copy_genes(parent, child2)
            offset = self._pick_offset()
            crossover(self.store.gene(child, offset), self.store.gene(child2, offset))

        for rank in translation:
            child = self.ranking.parent_index(rank)
            self.store.copy_genes(self._pick_parent(), child)
            translate(self.store.gene(child, self._pick_offset()), self.rng)

        self._evaluate()
        logger.debug("update pass complete", extra={"epoch": self._epoch})

    def _evaluate(self) -> None:
        self.ranking.evaluate(self.store, self.fitness_fn, self.user_context)


__all__ = ["GeneticAlgorithm"]
