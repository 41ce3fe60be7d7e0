"""
Utility modules for the genetic framework.
"""

from .evolution_logger import EvolutionLogger

__all__ = [
    "EvolutionLogger",
]
