"""
Population management for the genetic framework.

This module defines the Population class, which owns one generation of genomes
and drives the evaluate -> select -> crossover -> mutate -> replace cycle.
The caller decides how many generations to run; the population never loops
on its own.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .genome import Genome, NullGenome
from .random_source import RandomSource, default_random_source
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Population:
    """
    A fixed-size generation of genomes evolved by fitness-proportionate selection.

    Generation 0 is built by replicating a seed genome. Each call to
    create_new_generation() replaces every genome with a child of two parents
    picked by roulette-wheel selection, so evaluate_fitness() must run first.

    Fitness scores are expected to be non-negative. A negative score is logged
    but not rejected; it distorts the selection probabilities.

    Attributes:
        _genomes: Genomes of the current generation
        _epoch: Number of generations created so far
        _mutation_rate: Mutation probability handed to Genome.mutate()
        _total_fitness: Sum of fitness at the last evaluate_fitness() call
        _best: Fittest genome at the last evaluate_fitness() call
        _population_number: Size of every generation
        _rng: Random source used by parent selection
        _evaluated: Whether the current generation has been scored
    """

    def __init__(
        self,
        seed: Genome,
        population_number: int,
        mutation_rate: float = 0.0,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize a Population.

        Args:
            seed: Genome replicated to form generation 0
            population_number: Number of genomes in every generation (>= 1)
            mutation_rate: Mutation probability in [0, 1]
            rng: Random source for selection (numpy Generator if None)

        Raises:
            ConfigurationError: If mutation_rate or population_number is invalid
        """
        if not 0.0 <= mutation_rate <= 1.0:
            raise ConfigurationError(
                f"mutation_rate must be between 0 and 1, got {mutation_rate}"
            )
        is_int = isinstance(population_number, int) and not isinstance(population_number, bool)
        if not is_int or population_number < 1:
            raise ConfigurationError(
                f"population_number must be an integer of at least 1, got {population_number!r}"
            )

        self._epoch: int = 0
        self._mutation_rate: float = float(mutation_rate)
        self._total_fitness: float = 0.0
        self._best: Optional[Genome] = None
        self._evaluated: bool = False
        self._population_number: int = population_number
        self._rng: RandomSource = rng if rng is not None else default_random_source()

        self._genomes: List[Genome] = [seed.replicate() for _ in range(population_number)]

        logger.debug(
            f"Initialized population of {population_number} genomes "
            f"with mutation rate {mutation_rate}"
        )

    def get_best(self) -> Genome:
        """Get the fittest genome of the last evaluation, or a NullGenome."""
        return self._best if self._best is not None else NullGenome()

    def get_total_fitness(self) -> float:
        """Get the sum of fitness over the last evaluated generation."""
        return self._total_fitness

    def get_epoch(self) -> int:
        """Get the current generation number."""
        return self._epoch

    def increment_epoch(self) -> None:
        """Advance the generation counter without creating a generation."""
        self._epoch += 1

    def get_population_number(self) -> int:
        """Get the number of genomes per generation."""
        return self._population_number

    def get_mutation_rate(self) -> float:
        """Get the mutation rate."""
        return self._mutation_rate

    def get_population(self) -> Tuple[Genome, ...]:
        """Get a read-only view of the current generation."""
        return tuple(self._genomes)

    def set_population(self, genomes: Sequence[Genome]) -> None:
        """
        Replace the current generation.

        The population size follows the new collection. Fitness totals and
        the best genome keep describing the last evaluation until
        evaluate_fitness() runs again.

        Args:
            genomes: New generation

        Raises:
            ConfigurationError: If genomes is empty
        """
        if not genomes:
            raise ConfigurationError("Cannot set an empty population")

        if len(genomes) != self._population_number:
            logger.info(
                f"Population size changed from {self._population_number} to {len(genomes)}"
            )

        self._genomes = list(genomes)
        self._population_number = len(self._genomes)
        self._evaluated = False

    def evaluate_fitness(self) -> None:
        """
        Evaluate every genome and refresh the total fitness and the best genome.

        Ties for the best score keep the first genome encountered.
        """
        total = 0.0
        best: Optional[Genome] = None

        for genome in self._genomes:
            genome.evaluate_fitness()
            fitness = genome.get_fitness()

            if fitness < 0:
                logger.warning(
                    f"Negative fitness {fitness} in epoch {self._epoch}; "
                    "selection probabilities are undefined"
                )

            total += fitness
            if best is None or best.get_fitness() < fitness:
                best = genome

        self._total_fitness = total
        self._best = best
        self._evaluated = True

        logger.debug(
            f"Epoch {self._epoch}: total fitness {total:.4f}, "
            f"best fitness {best.get_fitness():.4f}"
        )

    def create_new_generation(self) -> None:
        """
        Replace the current generation with a new one.

        1. Select two parents in proportion to their fitness.
        2. Crossover them to build a child.
        3. Mutate the child.

        Raises:
            ZeroDivisionError: If the total fitness is zero. The current
                generation and epoch are left unchanged.
        """
        new_generation = []
        for _ in range(self._population_number):
            first_parent = self._select_parent()
            second_parent = self._select_parent()

            child = first_parent.crossover(second_parent)
            child.mutate(self._mutation_rate)

            new_generation.append(child)

        self._genomes = new_generation
        self._epoch += 1
        self._evaluated = False

        logger.debug(f"Created generation {self._epoch} with {len(new_generation)} genomes")

    def _select_parent(self) -> Genome:
        """
        Pick a genome by roulette-wheel selection.

        Draws r in [0, 1) and subtracts each genome's share of the total
        fitness until r drops to zero or below.

        Returns:
            Selected genome

        Raises:
            ZeroDivisionError: If the total fitness is zero
        """
        if self._total_fitness == 0:
            raise ZeroDivisionError("Cannot select a parent when total fitness is zero")

        size = len(self._genomes)
        random_value = self._rng.random()
        index = 0

        while random_value > 0 and index < size:
            random_value -= self._genomes[index].get_fitness() / self._total_fitness
            index += 1

        # Rounding can leave random_value above zero after the last genome.
        index = min(max(index - 1, 0), size - 1)
        return self._genomes[index]

    @property
    def size(self) -> int:
        """Get the current number of genomes."""
        return len(self._genomes)

    def statistics(self) -> Dict[str, Any]:
        """
        Compute statistics of the current generation.

        Returns:
            Dictionary containing population statistics
        """
        fitness_scores = [g.get_fitness() for g in self._genomes] if self._evaluated else []

        return {
            "size": len(self._genomes),
            "epoch": self._epoch,
            "evaluated": len(fitness_scores),
            "total_fitness": self._total_fitness,
            "avg_fitness": float(np.mean(fitness_scores)) if fitness_scores else None,
            "best_fitness": float(np.max(fitness_scores)) if fitness_scores else None,
            "worst_fitness": float(np.min(fitness_scores)) if fitness_scores else None,
        }

    def __repr__(self) -> str:
        best = self.get_best()
        best_str = f"{best.get_fitness():.3f}" if best else "None"
        return (
            f"Population(epoch={self._epoch}, "
            f"size={len(self._genomes)}, "
            f"mutation_rate={self._mutation_rate}, "
            f"best_fitness={best_str})"
        )

    def __len__(self) -> int:
        return len(self._genomes)

    def __iter__(self) -> Iterator[Genome]:
        return iter(self._genomes)
