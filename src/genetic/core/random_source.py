"""
Random source used by parent selection.
"""

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything with a random() method returning a uniform float in [0, 1).

    Both random.Random and numpy.random.Generator qualify.
    """

    def random(self) -> float:
        ...


def default_random_source(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the default random source.

    Args:
        seed: Optional seed for reproducible runs

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)
