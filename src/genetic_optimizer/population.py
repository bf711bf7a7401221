"""Flat storage for the genes of every individual in a population."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .genes import Gene
from .operators import mutate


class PopulationStore:
    """Ordered genes of all individuals, one contiguous block per individual.

    Individual ``i`` owns the slice ``[i * gene_count, (i + 1) * gene_count)``.
    The store is sized once from the template and never resized.
    """

    def __init__(self, template: Sequence[Gene], population_size: int) -> None:
        self.gene_count = len(template)
        self.population_size = population_size
        self.genes: list[Gene] = [
            gene.copy() for _ in range(population_size) for gene in template
        ]

    def __len__(self) -> int:
        return len(self.genes)

    # ------------------------------------------------------------------
    def offset(self, index: int, gene_offset: int = 0) -> int:
        return index * self.gene_count + gene_offset

    def gene(self, index: int, gene_offset: int) -> Gene:
        return self.genes[self.offset(index, gene_offset)]

    def individual(self, index: int) -> list[Gene]:
        """Return the live genes of individual ``index``."""

        start = self.offset(index)
        return self.genes[start : start + self.gene_count]

    def snapshot(self, index: int) -> list[Gene]:
        """Return independent copies of the genes of individual ``index``."""

        return [gene.copy() for gene in self.individual(index)]

    # ------------------------------------------------------------------
    def copy_genes(self, parent: int, child: int) -> None:
        """Copy gene ``i`` of ``parent`` onto gene ``i`` of ``child``."""

        if parent == child:
            return
        parent_offset = self.offset(parent)
        child_offset = self.offset(child)
        for i in range(self.gene_count):
            self.genes[child_offset + i] = self.genes[parent_offset + i].copy()

    def randomize(self, rng: np.random.Generator) -> None:
        """Draw a fresh value for every stored gene."""

        for gene in self.genes:
            mutate(gene, rng)

    # ------------------------------------------------------------------
    def values(self) -> np.ndarray:
        """Current values as a ``(population_size, gene_count)`` array."""

        flat = np.array([gene.current for gene in self.genes], dtype=float)
        return flat.reshape(self.population_size, self.gene_count)

    def bounds_ok(self) -> bool:
        return all(gene.in_bounds() for gene in self.genes)


__all__ = ["PopulationStore"]
