"""
Evolution engine for the genetic framework.

The Population only knows how to advance one generation at a time. This
module wraps it in a driving loop that records per-generation statistics,
tracks the best genome ever seen and stops early once a target fitness is
reached.
"""

import logging
from typing import List, Optional

from ..core.genome import Genome, NullGenome
from ..core.population import Population
from ..core.random_source import RandomSource, default_random_source
from .config import EvolutionConfig, GenerationHistory

logger = logging.getLogger(__name__)


class EvolutionEngine:
    """
    Runs a Population for a number of generations.

    Full generational replacement can discard the current best genome, so the
    engine keeps its own reference to the fittest genome observed so far.

    Example usage:
        ```python
        config = EvolutionConfig(population_size=50, mutation_rate=0.1, n_generations=20)
        engine = EvolutionEngine(BitStringGenome(32), config)
        best = engine.run()
        ```
    """

    def __init__(
        self,
        seed_genome: Genome,
        config: EvolutionConfig,
        rng: Optional[RandomSource] = None,
        evo_logger=None,
    ):
        """
        Initialize the evolution engine.

        Args:
            seed_genome: Genome replicated to build generation 0
            config: Run configuration
            rng: Random source for parent selection (seeded from config if None)
            evo_logger: Optional EvolutionLogger receiving per-generation stats
        """
        self.config = config
        self.evo_logger = evo_logger
        self.population = Population(
            seed_genome,
            config.population_size,
            config.mutation_rate,
            rng=rng if rng is not None else default_random_source(config.seed),
        )

        self.history: List[GenerationHistory] = []
        self.best_genome: Optional[Genome] = None
        self._best_fitness_history: List[float] = []

        logger.info(
            f"Initialized EvolutionEngine with {config.n_generations} generations, "
            f"population size {config.population_size}, mutation rate {config.mutation_rate}"
        )

    def get_best(self) -> Genome:
        """Get the best genome seen so far, or a NullGenome."""
        return self.best_genome if self.best_genome is not None else NullGenome()

    def best_fitness_history(self) -> List[float]:
        """Get the running maximum fitness after each evaluated generation."""
        return list(self._best_fitness_history)

    def step(self) -> None:
        """Evaluate the current generation, record it and breed the next one."""
        self._evaluate()
        self._breed()

    def run(self, n_generations: Optional[int] = None) -> Genome:
        """
        Run the evolution loop.

        Each iteration scores the current generation and breeds the next one
        unless the target fitness has been reached.

        Args:
            n_generations: Number of generations to breed (config value if None)

        Returns:
            Best genome observed during the run
        """
        n_generations = n_generations if n_generations is not None else self.config.n_generations

        for _ in range(n_generations):
            self._evaluate()
            if self._target_reached():
                logger.info(
                    f"Target fitness {self.config.target_fitness} reached "
                    f"at epoch {self.population.get_epoch()}"
                )
                break
            self._breed()
        else:
            # The last generation bred above has not been scored yet.
            self._evaluate()

        best = self.get_best()
        logger.info(f"Evolution complete. Best fitness: {best.get_fitness():.4f}")

        if self.evo_logger:
            self.evo_logger.log_final_best(best, self.population.get_epoch())

        return best

    def _evaluate(self) -> None:
        self.population.evaluate_fitness()

        current_best = self.population.get_best()
        if self.best_genome is None or current_best.get_fitness() > self.best_genome.get_fitness():
            self.best_genome = current_best
        self._best_fitness_history.append(self.best_genome.get_fitness())

        record = GenerationHistory.from_statistics(self.population.statistics())
        self.history.append(record)

        if self.config.log_generation_stats:
            if self.evo_logger:
                self.evo_logger.log_generation(record)
            else:
                logger.debug(
                    f"Epoch {record.epoch}: best={record.best_fitness:.4f} "
                    f"avg={record.avg_fitness:.4f}"
                )

    def _breed(self) -> None:
        try:
            self.population.create_new_generation()
        except ZeroDivisionError:
            logger.error(
                f"Every genome in epoch {self.population.get_epoch()} scored zero; "
                "cannot select parents"
            )
            raise

    def _target_reached(self) -> bool:
        if self.config.target_fitness is None or self.best_genome is None:
            return False
        return self.best_genome.get_fitness() >= self.config.target_fitness
