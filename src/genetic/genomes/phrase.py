"""
Phrase genome that evolves a string towards a target phrase.
"""

import string
from typing import Optional

import numpy as np

from ..core.genome import Genome


CHARSET = np.array(list(string.ascii_letters + string.digits + string.punctuation + " "))


class PhraseGenome(Genome):
    """
    Genome holding a character array the length of the target phrase.

    Fitness is the number of characters that match the target in place,
    raised to `exponent`, plus `smoothing`. The smoothing term keeps a
    generation with no matching characters selectable.

    Attributes:
        target: Phrase to evolve towards
        genes: numpy array of single characters
        exponent: Power applied to the match count
        smoothing: Constant added to every fitness score
        rng: numpy Generator used for crossover and mutation
    """

    def __init__(
        self,
        target: str,
        genes: Optional[np.ndarray] = None,
        exponent: int = 1,
        smoothing: float = 0.01,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__()
        if not target:
            raise ValueError("target must be a non-empty string")
        if smoothing < 0:
            raise ValueError(f"smoothing must be non-negative, got {smoothing}")

        self.target = target
        self.exponent = exponent
        self.smoothing = smoothing
        self.rng = rng if rng is not None else np.random.default_rng()

        if genes is None:
            genes = self.rng.choice(CHARSET, size=len(target))
        genes = np.array(list(genes), dtype="<U1")
        if genes.shape != (len(target),):
            raise ValueError(f"Expected {len(target)} genes, got shape {genes.shape}")

        self.genes = genes
        self._target_array = np.array(list(target), dtype="<U1")

    @property
    def phrase(self) -> str:
        return "".join(self.genes)

    @property
    def max_fitness(self) -> float:
        """Fitness of a genome that spells the target exactly."""
        return len(self.target) ** self.exponent + self.smoothing

    def _spawn(self, genes: np.ndarray) -> "PhraseGenome":
        return PhraseGenome(
            self.target,
            genes=genes,
            exponent=self.exponent,
            smoothing=self.smoothing,
            rng=self.rng,
        )

    def replicate(self) -> "PhraseGenome":
        return self._spawn(self.genes.copy())

    def evaluate_fitness(self) -> None:
        matches = int(np.sum(self.genes == self._target_array))
        self.set_fitness(matches ** self.exponent + self.smoothing)

    def crossover(self, other: Genome) -> "PhraseGenome":
        """Take the genes before a random midpoint from self and the rest from other."""
        if not isinstance(other, PhraseGenome) or other.target != self.target:
            raise ValueError("Crossover requires a PhraseGenome with the same target")

        midpoint = int(self.rng.integers(0, len(self.target) + 1))
        child_genes = np.concatenate([self.genes[:midpoint], other.genes[midpoint:]])
        return self._spawn(child_genes)

    def mutate(self, rate: float) -> None:
        if rate <= 0:
            return
        positions = self.rng.random(len(self.genes)) < rate
        n_changed = int(positions.sum())
        if n_changed:
            self.genes[positions] = self.rng.choice(CHARSET, size=n_changed)

    def __repr__(self) -> str:
        return f"PhraseGenome({self.phrase!r}, fitness={self._fitness})"
