"""
genetic: a generic evolutionary-optimization engine.

A Population of caller-supplied genomes is evolved by fitness-proportionate
parent selection, crossover, mutation and full generational replacement.
"""

from .exceptions import ConfigurationError
from .core.genome import Genome, NullGenome, NULL_FITNESS
from .core.population import Population
from .core.random_source import RandomSource, default_random_source

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Genome",
    "NullGenome",
    "NULL_FITNESS",
    "Population",
    "RandomSource",
    "default_random_source",
]
