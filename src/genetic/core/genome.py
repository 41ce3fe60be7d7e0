"""
Genome contract for the genetic framework.

This module defines the abstract Genome class that every evolvable type must
implement, and the NullGenome sentinel returned by a population that has not
been evaluated yet.
"""

from abc import ABC, abstractmethod


# Reserved fitness of the sentinel. Real fitness scores are non-negative.
NULL_FITNESS = float("-inf")


class Genome(ABC):
    """
    Base class for a unit of evolution.

    A genome owns its genetic material and caches the fitness computed by
    evaluate_fitness(). The population never inspects the material directly;
    it only uses the methods below.

    Attributes:
        _fitness: Cached fitness score (0.0 until evaluated)
        _evaluated: Whether evaluate_fitness() has run on this instance
    """

    def __init__(self):
        self._fitness: float = 0.0
        self._evaluated: bool = False

    @abstractmethod
    def replicate(self) -> "Genome":
        """
        Create an independent copy of this genome.

        The copy must not share genetic material with the original and must
        carry no cached fitness.

        Returns:
            New unevaluated genome
        """

    @abstractmethod
    def evaluate_fitness(self) -> None:
        """Compute and cache the fitness of this genome."""

    @abstractmethod
    def crossover(self, other: "Genome") -> "Genome":
        """
        Combine this genome with another one.

        Neither parent is modified.

        Args:
            other: Second parent

        Returns:
            New child genome
        """

    @abstractmethod
    def mutate(self, rate: float) -> None:
        """
        Randomly alter this genome's material in place.

        Args:
            rate: Mutation probability in [0, 1]
        """

    def get_fitness(self) -> float:
        """Get the cached fitness score (0.0 before evaluation)."""
        return self._fitness

    def set_fitness(self, fitness: float) -> None:
        """Cache a fitness score and mark the genome as evaluated."""
        self._fitness = float(fitness)
        self._evaluated = True

    def is_evaluated(self) -> bool:
        """Check if this genome has been evaluated."""
        return self._evaluated


class NullGenome(Genome):
    """
    Stand-in for "no best genome yet".

    Its fitness is NULL_FITNESS, which no real genome can reach, and it is
    falsy so that callers can test `if population.get_best():`.
    """

    def replicate(self) -> "NullGenome":
        return NullGenome()

    def evaluate_fitness(self) -> None:
        pass

    def get_fitness(self) -> float:
        return NULL_FITNESS

    def crossover(self, other: Genome) -> "NullGenome":
        return NullGenome()

    def mutate(self, rate: float) -> None:
        pass

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullGenome()"
