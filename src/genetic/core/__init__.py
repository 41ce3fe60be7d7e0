"""
Core data structures: the genome contract and the population.
"""

from .genome import Genome, NullGenome, NULL_FITNESS
from .population import Population
from .random_source import RandomSource, default_random_source

__all__ = [
    "Genome",
    "NullGenome",
    "NULL_FITNESS",
    "Population",
    "RandomSource",
    "default_random_source",
]
