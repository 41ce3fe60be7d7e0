"""
Configuration and data classes for the genetic evolution engine.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EvolutionConfig:
    """
    Configuration for an evolution run.

    Contains the hyperparameters handed to the Population and the settings
    of the driving loop.
    """

    # Population parameters
    population_size: int = 50
    mutation_rate: float = 0.1

    # Loop parameters
    n_generations: int = 20
    target_fitness: Optional[float] = None
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_generation_stats: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.population_size < 1:
            raise ConfigurationError("population_size must be at least 1")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError("mutation_rate must be between 0 and 1")
        if self.n_generations < 1:
            raise ConfigurationError("n_generations must be at least 1")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log_level: {self.log_level}")
        self.log_level = self.log_level.upper()

        if self.mutation_rate == 1.0:
            logger.warning("mutation_rate = 1.0 turns the search into a random walk")

    @classmethod
    def from_yaml(cls, config_path: Path) -> "EvolutionConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            EvolutionConfig instance
        """
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        # Extract nested parameters if present
        evolution_config = config.get("evolution", config)

        unknown = set(evolution_config) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(**evolution_config)

    @classmethod
    def from_env(cls) -> "EvolutionConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - POPULATION_SIZE: population_size
        - MUTATION_RATE: mutation_rate
        - MAX_GENERATIONS: n_generations
        - TARGET_FITNESS: target_fitness
        - RANDOM_SEED: seed
        - LOG_LEVEL: log_level

        Returns:
            EvolutionConfig instance
        """
        target = os.getenv("TARGET_FITNESS")
        seed = os.getenv("RANDOM_SEED")
        try:
            return cls(
                population_size=int(os.getenv("POPULATION_SIZE", "50")),
                mutation_rate=float(os.getenv("MUTATION_RATE", "0.1")),
                n_generations=int(os.getenv("MAX_GENERATIONS", "20")),
                target_fitness=float(target) if target else None,
                seed=int(seed) if seed else None,
                log_level=os.getenv("LOG_LEVEL", "INFO"),
            )
        except ValueError as e:
            if isinstance(e, ConfigurationError):
                raise
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "population_size": self.population_size,
            "mutation_rate": self.mutation_rate,
            "n_generations": self.n_generations,
            "target_fitness": self.target_fitness,
            "seed": self.seed,
            "log_level": self.log_level,
            "log_generation_stats": self.log_generation_stats,
        }

    def to_yaml(self, save_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, "w") as f:
            yaml.dump({"evolution": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")


@dataclass
class GenerationHistory:
    """
    Statistics for a single evaluated generation.
    """

    epoch: int
    population_size: int
    total_fitness: float
    avg_fitness: float
    best_fitness: float
    worst_fitness: float
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_statistics(cls, stats: Dict[str, Any]) -> "GenerationHistory":
        """Build a record from Population.statistics()."""
        return cls(
            epoch=stats["epoch"],
            population_size=stats["size"],
            total_fitness=stats["total_fitness"],
            avg_fitness=stats["avg_fitness"],
            best_fitness=stats["best_fitness"],
            worst_fitness=stats["worst_fitness"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "epoch": self.epoch,
            "population_size": self.population_size,
            "total_fitness": self.total_fitness,
            "avg_fitness": self.avg_fitness,
            "best_fitness": self.best_fitness,
            "worst_fitness": self.worst_fitness,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationHistory":
        """Create instance from dictionary."""
        return cls(**data)
