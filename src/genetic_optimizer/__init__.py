"""Genetic algorithm optimiser for bounded numeric gene vectors."""

from .engine import GeneticAlgorithm
from .genes import Gene, GeneKind
from .ranking import RankEntry, RankingTable

__all__ = ["__version__", "GeneticAlgorithm", "Gene", "GeneKind", "RankEntry", "RankingTable"]
__version__ = "0.1.0"
