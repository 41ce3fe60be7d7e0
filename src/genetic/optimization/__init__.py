"""
Optimization module for the genetic framework.

This module contains the evolution engine that drives a Population through
a number of generations, and its configuration.
"""

from .engine import EvolutionEngine
from .config import EvolutionConfig, GenerationHistory

__all__ = [
    "EvolutionEngine",
    "EvolutionConfig",
    "GenerationHistory",
]
