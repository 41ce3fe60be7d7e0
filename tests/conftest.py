"""
Shared test fixtures.
"""

import pytest
import numpy as np

from genetic.core.genome import Genome
from genetic.genomes.bit_string import BitStringGenome


class ScriptedRandom:
    """Random source returning a fixed sequence of draws (cycled)."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FixedGenome(Genome):
    """Genome whose fitness is a preset number."""

    def __init__(self, score: float = 1.0, label: str = ""):
        super().__init__()
        self.score = score
        self.label = label
        self.evaluations = 0
        self.mutations = []

    def replicate(self):
        return FixedGenome(self.score, self.label)

    def evaluate_fitness(self):
        self.evaluations += 1
        self.set_fitness(self.score)

    def crossover(self, other):
        return FixedGenome((self.score + other.score) / 2, f"{self.label}x{other.label}")

    def mutate(self, rate):
        self.mutations.append(rate)

    def __repr__(self):
        return f"FixedGenome({self.label!r}, {self.score})"


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def fixed_genome():
    """Factory for fixed-fitness genomes."""
    return FixedGenome


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(42)


@pytest.fixture
def bit_genome(rng):
    """Random 16-bit genome."""
    return BitStringGenome(16, rng=rng)
