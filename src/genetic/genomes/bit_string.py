"""
Bit-string genome whose fitness is the number of ones ("one-max").
"""

from typing import Optional

import numpy as np

from ..core.genome import Genome


class BitStringGenome(Genome):
    """
    Genome holding a fixed-length array of bits.

    Attributes:
        bits: uint8 array of 0/1 values
        rng: numpy Generator used for crossover points and mutation
    """

    def __init__(
        self,
        length: int,
        bits: Optional[np.ndarray] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize a bit-string genome.

        Args:
            length: Number of bits
            bits: Initial bits (random if None)
            rng: Random generator (fresh default_rng if None)
        """
        super().__init__()
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")

        self.rng = rng if rng is not None else np.random.default_rng()

        if bits is None:
            bits = self.rng.integers(0, 2, size=length)
        bits = np.asarray(bits, dtype=np.uint8)
        if bits.shape != (length,):
            raise ValueError(f"Expected {length} bits, got shape {bits.shape}")

        self.bits = bits.copy()

    @property
    def length(self) -> int:
        return len(self.bits)

    @property
    def max_fitness(self) -> float:
        """Fitness of the all-ones string."""
        return float(self.length)

    def replicate(self) -> "BitStringGenome":
        return BitStringGenome(self.length, bits=self.bits, rng=self.rng)

    def evaluate_fitness(self) -> None:
        self.set_fitness(int(self.bits.sum()))

    def crossover(self, other: Genome) -> "BitStringGenome":
        """Single-point crossover: head of self, tail of other."""
        if not isinstance(other, BitStringGenome) or other.length != self.length:
            raise ValueError("Crossover requires a BitStringGenome of the same length")

        cut = int(self.rng.integers(0, self.length + 1))
        child_bits = np.concatenate([self.bits[:cut], other.bits[cut:]])
        return BitStringGenome(self.length, bits=child_bits, rng=self.rng)

    def mutate(self, rate: float) -> None:
        """Flip every bit independently with probability rate."""
        if rate <= 0:
            return
        flips = self.rng.random(self.length) < rate
        self.bits[flips] ^= 1

    def __repr__(self) -> str:
        return f"BitStringGenome({''.join(str(b) for b in self.bits)}, fitness={self._fitness})"
