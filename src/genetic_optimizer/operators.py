"""Genetic operators acting on single genes or gene pairs.

Every operator draws randomness from an explicitly supplied
:class:`numpy.random.Generator` so that runs are reproducible when the caller
seeds it.
"""

from __future__ import annotations

import numpy as np

from .genes import Gene, GeneKind, coerce

# Resolution of the random fraction used for floating point draws.
RAND_RESOLUTION = 10_000_000


def clamp_to_limits(gene: Gene) -> Gene:
    """Force ``gene.current`` into ``[gene.min, gene.max]``."""

    gene.current = coerce(gene.kind, min(max(gene.current, gene.min), gene.max))
    return gene


def mutate(gene: Gene, rng: np.random.Generator) -> Gene:
    """Replace the gene value with a uniform draw from its bounds."""

    if gene.kind is GeneKind.INTEGER:
        gene.current = int(rng.integers(gene.min, gene.max + 1))
    else:
        fraction = int(rng.integers(0, RAND_RESOLUTION)) / (RAND_RESOLUTION - 1)
        gene.current = coerce(gene.kind, gene.min + fraction * (gene.max - gene.min))
    return clamp_to_limits(gene)


def crossover(gene_a: Gene, gene_b: Gene) -> tuple[Gene, Gene]:
    """Exchange the values of two genes.

    Only ``current`` moves between the slots; each slot keeps its own kind and
    bounds and the received value is clamped against them.
    """

    gene_a.current, gene_b.current = gene_b.current, gene_a.current
    clamp_to_limits(gene_a)
    clamp_to_limits(gene_b)
    return gene_a, gene_b


def translate(gene: Gene, rng: np.random.Generator) -> Gene:
    """Shift the gene value by +1 or -1 with equal probability."""

    step = 1 if int(rng.integers(0, 2)) == 0 else -1
    gene.current = coerce(gene.kind, gene.current + step)
    return clamp_to_limits(gene)


__all__ = ["RAND_RESOLUTION", "clamp_to_limits", "mutate", "crossover", "translate"]
